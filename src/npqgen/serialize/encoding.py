from __future__ import annotations


def to_alphabetic(n: int) -> str:
    """
    Bijective base-26 variable name: 1 -> "a", 26 -> "z", 27 -> "aa".

    There is no zero digit; ``n <= 0`` yields the empty string.
    """
    result = ""
    while n > 0:
        mod = (n - 1) % 26
        result = chr(ord("a") + mod) + result
        n = (n - mod) // 26
    return result
