"""String exercises: bracket balance, substring search, last word length."""

from __future__ import annotations

_OPENER_FOR = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed by its own kind in the right order."""
    stack: list[str] = []
    for char in s:
        if stack and char in _OPENER_FOR:
            if _OPENER_FOR[char] != stack[-1]:
                return False
            stack.pop()
        else:
            stack.append(char)
    return not stack


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])