"""Merge sort and selection sort over lists of integers."""

from __future__ import annotations

from heapq import merge


def merge_sort(nums: list[int]) -> list[int]:
    """Return a new list holding ``nums`` in ascending order."""
    if len(nums) <= 1:
        return list(nums)
    mid = len(nums) // 2
    return list(merge(merge_sort(nums[:mid]), merge_sort(nums[mid:])))


def select_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place by repeated selection and return it."""
    for i in range(len(nums) - 1):
        min_idx = min(range(i, len(nums)), key=nums.__getitem__)
        if min_idx != i:
            nums[i], nums[min_idx] = nums[min_idx], nums[i]
    return nums