# src/tokenlint/utils/tokenizer.py
import math


def estimate_tokens(chars: int, ratio: float) -> int:
    """Estimates token count from a byte length using a fixed tokens-per-char ratio."""
    return math.floor(chars * ratio)
