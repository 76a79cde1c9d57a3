"""Binary search over an ascending sequence of integers."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def binary_search_iterative(nums: Sequence[int], target: int) -> int:
    """Index of target in ascending nums, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] < target:
            low = mid + 1
        elif nums[mid] > target:
            high = mid - 1
        else:
            return mid
    return -1


def binary_search_recursive(
    nums: Sequence[int], target: int, low: int = 0, high: Optional[int] = None
) -> int:
    """Index of target within nums[low..high] (inclusive), or -1 if absent."""
    if high is None:
        high = len(nums) - 1
    if low > high:
        return -1
    mid = low + (high - low) // 2
    if nums[mid] == target:
        return mid
    if target < nums[mid]:
        return binary_search_recursive(nums, target, low, mid - 1)
    return binary_search_recursive(nums, target, mid + 1, high)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Search a fixed sample list and print the index found both ways."""
    parser = argparse.ArgumentParser(description="Binary search demonstration.")
    parser.add_argument("target", nargs="?", type=int, default=10)
    args = parser.parse_args(argv)

    nums = [1, 4, 5, 9, 10, 12, 15, 18, 20]
    target = args.target
    print(f"Index of {target} (using loop): {binary_search_iterative(nums, target)}")
    print(f"Index of {target} (using recursion): {binary_search_recursive(nums, target)}")
    return 0