"""Array exercises: pair sums, in-place compaction, insertion search, digit increment, merging."""

from __future__ import annotations

from collections import defaultdict, deque
from itertools import pairwise
from typing import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two distinct elements summing to ``target``, or ``[]``."""
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(nums):
        positions[value].append(index)

    for index, value in enumerate(nums):
        remains = target - value
        found = positions.get(remains)
        if not found:
            continue
        if remains == value:
            # The partner has the same value, so a second occurrence is needed.
            if len(found) > 1:
                return [index, found[1]]
        else:
            return [index, found[0]]
    return []


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its first k items are unique; return k.

    Items past position k are left as they were. An empty sequence yields 1.
    """
    count = 1
    for previous, current in pairwise(list(nums)):
        if previous != current:
            nums[count] = current
            count += 1
    return count


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front, keeping order; return their count."""
    count = 0
    for value in list(nums):
        if value != val:
            nums[count] = value
            count += 1
    return count


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted distinct ``nums``, or where it would be inserted.

    Raises IndexError for an empty sequence.
    """
    begin, end = 0, len(nums)
    mid = 0
    while end - begin > 0:
        mid = begin + (end - begin) // 2
        if nums[mid] == target:
            return mid
        if end - begin == 1:
            break
        if nums[mid] < target:
            begin += (end - begin) // 2
        else:
            end -= (end - begin) // 2
    return mid if target < nums[0] else mid + 1


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as most-significant-first decimal digits."""
    reversed_result: list[int] = []
    carry = True
    for digit in reversed(digits):
        if carry and digit == 9:
            reversed_result.append(0)
        else:
            reversed_result.append(digit + 1 if carry else digit)
            carry = False
    if carry and digits:
        reversed_result.append(1)
    return reversed_result[::-1]


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted items followed by room for ``n`` more; after the
    call its first ``m + n`` items are sorted.
    """
    displaced: deque[int] = deque()
    j = 0
    for i in range(m + n):
        if i < m:
            if not displaced:
                if j < n and nums1[i] > nums2[j]:
                    displaced.append(nums1[i])
                    nums1[i] = nums2[j]
                    j += 1
                continue
            head = displaced[0]
            if j < n:
                if head <= nums2[j] and head < nums1[i]:
                    displaced.append(nums1[i])
                    nums1[i] = displaced.popleft()
                elif nums2[j] <= head and nums2[j] < nums1[i]:
                    displaced.append(nums1[i])
                    nums1[i] = nums2[j]
                    j += 1
            elif head < nums1[i]:
                displaced.append(nums1[i])
                nums1[i] = displaced.popleft()
        elif not displaced:
            if j < n:
                nums1[i] = nums2[j]
                j += 1
        elif j < n and not displaced[0] < nums2[j]:
            nums1[i] = nums2[j]
            j += 1
        else:
            nums1[i] = displaced.popleft()