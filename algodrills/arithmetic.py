"""Integer exercises: digit palindromes, binary string addition, integer roots, stair climbing."""

from __future__ import annotations

from math import comb


def num_digits(n: int) -> int:
    """Return how many decimal digits ``n`` has; zero counts as one digit."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return len(str(n)) if n > 0 else 1


def nth_digit(x: int, digit_no: int) -> int:
    """Return the decimal digit of ``x`` at position ``digit_no``, counting from the right at 0.

    For a negative ``x`` the digit carries the sign of ``x``.
    """
    if digit_no < 0:
        raise ValueError(f"digit position must be non-negative, got {digit_no}")
    digit = (abs(x) // 10**digit_no) % 10
    return -digit if x < 0 else digit


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    n = num_digits(x)
    return all(nth_digit(x, i) == nth_digit(x, n - i - 1) for i in range(n // 2))


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings of '0' and '1'.

    The result is as wide as the longer operand, plus one digit for a final
    carry; leading zeros of the longer operand are kept.
    """
    if set(a) - {"0", "1"} or set(b) - {"0", "1"}:
        raise ValueError("operands must consist of '0' and '1' only")
    width = max(len(a), len(b))
    digits: list[str] = []
    carry = 0
    for x, y in zip(reversed(a.zfill(width)), reversed(b.zfill(width))):
        total = int(x) + int(y) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def int_sqrt(x: int) -> int:
    """Return the square root of a non-negative integer, rounded down."""
    if x < 0:
        raise ValueError(f"cannot take the square root of negative {x}")
    low, high = x, 0
    # Halve until the square no longer overshoots; the root lies in [low, high).
    while low * low > x:
        high = low
        low //= 2
    if low * low == x:
        return low
    while high - low != 1:
        candidate = low + (high - low) // 2
        square = candidate * candidate
        if square == x:
            return candidate
        if square < x:
            low = candidate
        else:
            high = candidate
    return low


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two steps at a time."""
    # Each term counts the arrangements containing exactly ``twos`` double steps.
    return 1 + sum(comb(n - twos, twos) for twos in range(1, n // 2 + 1))