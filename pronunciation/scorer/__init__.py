"""Accuracy scoring over word-level diff tokens."""
from .accuracy import AccuracyResult, feedback_message, token_accuracy

__all__ = ["AccuracyResult", "token_accuracy", "feedback_message"]
