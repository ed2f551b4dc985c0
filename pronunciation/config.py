"""Configuration constants for pronunciation feedback and IPA transcription."""
from __future__ import annotations

import os

# Accuracy at or above this ratio counts as a successful repetition
# Mirrors the lesson runner's "Good!" / "Keep going." split
PASS_THRESHOLD = float(os.getenv("PRONUNCIATION_PASS_THRESHOLD", "0.8"))

# Locale used when the caller passes an empty locale base
DEFAULT_LOCALE = os.getenv("PRONUNCIATION_DEFAULT_LOCALE", "en").strip().lower() or "en"

# Locales with a grapheme-to-phoneme converter
SUPPORTED_LOCALES = ("en", "it")

# Returned for empty or whitespace-only input (never cached)
IPA_PLACEHOLDER = "/…/"
