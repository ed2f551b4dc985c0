"""Edit distance alignment algorithm for sequence matching."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

# Preference when several moves reach the same minimum cost. A diagonal move
# (match/sub) beats a deletion, which beats an insertion, so one mismatched
# word is reported as "sub" rather than "del" + "ins".
TIE_BREAK_ORDER: Tuple[str, ...] = ("diagonal", "del", "ins")

Step = Tuple[str, Optional[int], Optional[int]]


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> List[Step]:
    """Classic edit-distance alignment returning a path of operations.

    Returns list of tuples: (op, ref_index, hyp_index)
      op in {"match","sub","del","ins"}.

      match -> correct words
      sub -> aligned but different words
      del -> target words absent from the transcript
      ins -> extra transcript words

    Args:
        ref: Reference sequence (normalized target tokens)
        hyp: Hypothesis sequence (normalized transcript tokens)

    Returns:
        List of tuples: (operation, ref_index, hyp_index), from start to end
    """
    n, m = len(ref), len(hyp)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    back: List[List[Step]] = [[("start", None, None)] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dp[i][0] = i
        back[i][0] = ("del", i - 1, None)
    for j in range(1, m + 1):
        dp[0][j] = j
        back[0][j] = ("ins", None, j - 1)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if ref[i - 1] == hyp[j - 1] else 1
            moves = {
                "diagonal": (dp[i - 1][j - 1] + cost_sub, ("match" if cost_sub == 0 else "sub", i - 1, j - 1)),
                "del": (dp[i - 1][j] + 1, ("del", i - 1, None)),
                "ins": (dp[i][j - 1] + 1, ("ins", None, j - 1)),
            }
            # min() keeps the first of equal costs, so iteration order is the tie-break
            best_cost, best_step = min((moves[name] for name in TIE_BREAK_ORDER), key=lambda x: x[0])
            dp[i][j] = best_cost
            back[i][j] = best_step

    # backtrack
    ops: List[Step] = []
    i, j = n, m
    while not (i == 0 and j == 0):
        step = back[i][j]
        op = step[0]
        ops.append(step)
        if op in ("match", "sub"):
            i -= 1
            j -= 1
        elif op == "del":
            i -= 1
        elif op == "ins":
            j -= 1
        else:
            break
    ops.reverse()
    return ops
