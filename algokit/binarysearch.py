"""Binary search over sorted, rotated and two-dimensional data."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest per-hour rate that finishes all piles within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    lo, hi = 1, max(piles)
    best = hi
    while lo <= hi:
        k = (lo + hi) // 2
        hours = sum(-(-pile // k) for pile in piles)
        if hours <= h:
            best = k
            hi = k - 1
        else:
            lo = k + 1
    return best


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the minimum of a rotated sorted sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    left, right = 0, len(nums) - 1
    best = nums[0]
    while left <= right:
        if nums[left] < nums[right]:
            best = min(best, nums[left])
            break
        mid = (left + right) // 2
        best = min(best, nums[mid])
        if nums[mid] >= nums[left]:
            left = mid + 1
        else:
            right = mid - 1
    return best


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a row-major sorted matrix for ``target``."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    top, bot = 0, len(matrix) - 1
    while top <= bot:
        row = (top + bot) // 2
        if matrix[row][cols - 1] < target:
            top = row + 1
        elif matrix[row][0] > target:
            bot = row - 1
        else:
            break
    else:
        return False

    row = (top + bot) // 2
    return binary_search(matrix[row], target) != -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] <= target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def _find_edge(arr: Sequence[int], target: int, *, leftmost: bool) -> int:
    low, high = 0, len(arr) - 1
    found = -1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == target:
            found = mid
            if leftmost:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return found


def find_first(arr: Sequence[int], target: int) -> int:
    """Return the first index of ``target`` in sorted ``arr``, or -1."""
    return _find_edge(arr, target, leftmost=True)


def find_last(arr: Sequence[int], target: int) -> int:
    """Return the last index of ``target`` in sorted ``arr``, or -1."""
    return _find_edge(arr, target, leftmost=False)


def count_occurrences(arr: Sequence[int], target: int) -> int:
    """Count how often ``target`` occurs in sorted ``arr``."""
    first = find_first(arr, target)
    if first == -1:
        return 0
    return find_last(arr, target) - first + 1