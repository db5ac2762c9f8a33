"""Easy interview problems: arrays, strings, linked lists and trees."""

from __future__ import annotations

import math
from functools import reduce
from operator import xor

from dsa_drills.nodes import ListNode, TreeNode

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return indices of two numbers adding up to ``target``, or [] if none."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], index]
        seen[num] = index
    return []


def is_valid_parentheses(s: str) -> bool:
    """Check that every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted linked lists into one sorted list."""
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def max_profit(prices: list[int]) -> int:
    """Best profit from one buy followed by one sell."""
    min_price = math.inf
    best = 0
    for price in prices:
        min_price = min(min_price, price)
        best = max(best, price - min_price)
    return int(best)


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(s: str) -> bool:
    """Check ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in s if _is_alnum(char)]
    return cleaned == cleaned[::-1]


def max_sub_array(nums: list[int]) -> int:
    """Largest sum of a contiguous non-empty subarray (Kadane)."""
    if not nums:
        raise ValueError("max_sub_array() needs at least one number")
    current = best = nums[0]
    for num in nums[1:]:
        current = max(num, current + num)
        best = max(best, current)
    return best


def contains_duplicate(nums: list[int]) -> bool:
    """Whether any value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place and return the new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def binary_search(nums: list[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1 if absent."""
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


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` stairs taking 1 or 2 steps at a time."""
    if n <= 2:
        return n
    prev2, prev1 = 1, 2
    for _ in range(3, n + 1):
        prev2, prev1 = prev1, prev1 + prev2
    return prev1


def _is_mirror(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _is_mirror(left.left, right.right)
        and _is_mirror(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether a binary tree is a mirror image of itself."""
    return root is None or _is_mirror(root.left, root.right)


def single_number(nums: list[int]) -> int:
    """The one value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def intersection(nums1: list[int], nums2: list[int]) -> list[int]:
    """Distinct values present in both lists, in order of appearance in ``nums2``."""
    first = set(nums1)
    return list(dict.fromkeys(num for num in nums2 if num in first))


def move_zeroes(nums: list[int]) -> None:
    """Move all zeroes to the end in place, keeping the order of the rest."""
    non_zero = [num for num in nums if num != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def fizz_buzz(n: int) -> list[str]:
    """FizzBuzz strings for 1 through ``n``."""
    result = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            result.append("FizzBuzz")
        elif i % 3 == 0:
            result.append("Fizz")
        elif i % 5 == 0:
            result.append("Buzz")
        else:
            result.append(str(i))
    return result