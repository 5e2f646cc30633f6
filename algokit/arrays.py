"""Classic algorithms over integer arrays and matrices."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Sequence
from functools import cmp_to_key

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def two_sum_brute(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of every pair summing to ``target``, flattened, in O(n^2).

    Each matching pair contributes its lower index followed by its higher one.
    """
    return [
        index
        for i, a in enumerate(nums)
        for j, b in enumerate(nums[i + 1 :], start=i + 1)
        if a + b == target
        for index in (i, j)
    ]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of pairs summing to ``target``, flattened, in O(n).

    Each match contributes the later index followed by the earlier one.
    """
    result: list[int] = []
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            result.extend((i, partner))
        else:
            seen[value] = i
    return result


def remove_duplicates(nums: list[int]) -> int:
    """Drop repeated values from a sorted list in place and return its new length."""
    kept = 0
    for value in nums:
        if kept == 0 or nums[kept - 1] != value:
            nums[kept] = value
            kept += 1
    del nums[kept:]
    return kept


def remove_element(nums: list[int], val: int) -> int:
    """Drop every occurrence of ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted list, or where it would be inserted."""
    return next((i for i, value in enumerate(nums) if value >= target), len(nums))


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run; 0 for an empty list."""
    if not nums:
        return 0
    best = running = nums[0]
    for value in nums[1:]:
        running = max(running + value, value)
        best = max(best, running)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values.

    A window size of one or less returns the values unchanged. Raises
    ValueError when ``k`` exceeds the length of ``nums`` by more than one.
    """
    if k <= 1:
        return list(nums)
    if k > len(nums) + 1:
        raise ValueError(f"window size {k} is larger than the input")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        while window[0] < i - k + 1:
            window.popleft()
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Values of equal frequency are taken together, so the result can exceed
    ``k`` when a frequency tier straddles the cut.
    """
    buckets: defaultdict[int, list[int]] = defaultdict(list)
    for value, count in Counter(nums).items():
        buckets[count].append(value)
    result: list[int] = []
    for count in sorted(buckets, reverse=True):
        result.extend(buckets[count])
        if len(result) == k:
            break
    return result


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def num_subarray_product_less_than_k(nums: Sequence[int], k: int) -> int:
    """Count contiguous runs of positive values whose product is below ``k``."""
    if k <= 0:
        return 0
    count = 0
    left = 0
    product = 1
    for right, value in enumerate(nums):
        product *= value
        while left <= right and product >= k:
            product //= nums[left]
            left += 1
        count += right - left + 1
    return count


def _rob_line(houses: Sequence[int]) -> int:
    if not houses:
        return 0
    before, best = 0, houses[0]
    for value in houses[1:]:
        before, best = best, max(before + value, best)
    return best


def rob(nums: Sequence[int]) -> int:
    """Return the most that can be taken from houses in a circle, skipping neighbours."""
    if len(nums) == 1:
        return nums[0]
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if it cannot be made.

    Raises ValueError for a negative amount.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if total >= coin:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] > amount else fewest[amount]


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Arrange non-negative integers to form the largest number, as a string."""
    if not nums or sum(nums) == 0:
        return "0"
    digits = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    return "".join(digits)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if result > INT32_MAX or result < INT32_MIN:
        return 0
    return result