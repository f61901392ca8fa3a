"""Glob-style matching with ``*`` and ``?`` wildcards."""

from __future__ import annotations


def wildcard_match(text: str | None, pattern: str | None) -> bool:
    """Return True when ``pattern`` matches the whole of ``text``.

    ``*`` matches any run of characters (including none) and ``?`` matches
    exactly one character. Every other character matches itself.
    A missing text or pattern never matches.
    """
    if text is None or pattern is None:
        return False

    # previous[j] tells whether the text consumed so far matches pattern[:j].
    previous = [True]
    for symbol in pattern:
        previous.append(previous[-1] and symbol == "*")

    for char in text:
        current = [False]
        for j, symbol in enumerate(pattern, start=1):
            if symbol == "*":
                current.append(current[j - 1] or previous[j])
            else:
                current.append(previous[j - 1] and symbol in ("?", char))
        previous = current

    return previous[-1]