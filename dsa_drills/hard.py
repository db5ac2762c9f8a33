"""Hard interview problems: binary search, stacks, dynamic programming and BFS."""

from __future__ import annotations

import heapq
import math
from collections import deque
from itertools import count
from string import ascii_lowercase

from dsa_drills.nodes import ListNode, TreeNode

_NULL_MARK = "#"


def find_median_sorted_arrays(nums1: list[int], nums2: list[int]) -> float:
    """Median of the union of two sorted arrays, by partition binary search."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    if m + n == 0:
        raise ValueError("find_median_sorted_arrays() needs at least one number")
    left, right = 0, m
    while left <= right:
        i = (left + right) // 2
        j = (m + n + 1) // 2 - i
        max_left1 = nums1[i - 1] if i > 0 else -math.inf
        min_right1 = nums1[i] if i < m else math.inf
        max_left2 = nums2[j - 1] if j > 0 else -math.inf
        min_right2 = nums2[j] if j < n else math.inf
        if max_left1 <= min_right2 and max_left2 <= min_right1:
            lower = max(max_left1, max_left2)
            if (m + n) % 2 == 0:
                return (lower + min(min_right1, min_right2)) / 2.0
            return float(lower)
        if max_left1 > min_right2:
            right = i - 1
        else:
            left = i + 1
    return 0.0


def trap(height: list[int]) -> int:
    """Units of rain water trapped between the bars."""
    left, right = 0, len(height) - 1
    left_max = right_max = water = 0
    while left < right:
        if height[left] < height[right]:
            if height[left] >= left_max:
                left_max = height[left]
            else:
                water += left_max - height[left]
            left += 1
        else:
            if height[right] >= right_max:
                right_max = height[right]
            else:
                water += right_max - height[right]
            right -= 1
    return water


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring."""
    stack = [-1]
    best = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
            continue
        stack.pop()
        if not stack:
            stack.append(index)
        else:
            best = max(best, index - stack[-1])
    return best


def is_match(s: str, p: str) -> bool:
    """Wildcard match of ``s`` against ``p``: '?' is one character, '*' any run."""
    n = len(p)
    previous = [True] + [False] * n
    for j, symbol in enumerate(p, start=1):
        previous[j] = symbol == "*" and previous[j - 1]
    for char in s:
        current = [False] * (n + 1)
        for j, symbol in enumerate(p, start=1):
            if symbol == "*":
                current[j] = previous[j] or current[j - 1]
            elif symbol == "?" or symbol == char:
                current[j] = previous[j - 1]
        previous = current
    return previous[n]


def min_distance(word1: str, word2: str) -> int:
    """Edit distance: fewest inserts, deletes and replacements from one word to the other."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i] + [0] * len(word2)
        for j, b in enumerate(word2, start=1):
            if a == b:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
        previous = current
    return previous[len(word2)]


def merge_k_lists(lists: list[ListNode | None]) -> ListNode | None:
    """Splice any number of sorted linked lists into one sorted list."""
    tiebreak = count()
    heap = [(head.val, next(tiebreak), head) for head in lists if head is not None]
    heapq.heapify(heap)
    dummy = ListNode(0)
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(tiebreak), node.next))
    return dummy.next


def largest_rectangle_area(heights: list[int]) -> int:
    """Area of the largest rectangle fitting under the histogram."""
    stack: list[int] = []
    best = 0
    for index, h in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] > h:
            bar = heights[stack.pop()]
            width = index - stack[-1] - 1 if stack else index
            best = max(best, bar * width)
        stack.append(index)
    return best


def maximal_rectangle(matrix: list[list[str]]) -> int:
    """Area of the largest rectangle of '1' cells in a binary matrix."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def ladder_length(begin_word: str, end_word: str, word_list: list[str]) -> int:
    """Words in the shortest one-letter-change chain to ``end_word``, or 0."""
    words = set(word_list)
    if end_word not in words:
        return 0
    queue = deque([begin_word])
    level = 1
    while queue:
        for _ in range(len(queue)):
            word = queue.popleft()
            if word == end_word:
                return level
            for pos in range(len(word)):
                for letter in ascii_lowercase:
                    candidate = word[:pos] + letter + word[pos + 1:]
                    if candidate in words:
                        queue.append(candidate)
                        words.discard(candidate)
        level += 1
    return 0


class Codec:
    """Turns binary trees into comma-separated preorder text and back."""

    def serialize(self, root: TreeNode | None) -> str:
        """Preorder values with '#' for every missing child."""
        tokens: list[str] = []
        stack: list[TreeNode | None] = [root]
        while stack:
            node = stack.pop()
            if node is None:
                tokens.append(_NULL_MARK)
            else:
                tokens.append(str(node.val))
                stack.append(node.right)
                stack.append(node.left)
        return ",".join(tokens)

    def deserialize(self, data: str) -> TreeNode | None:
        """Rebuild a tree from text made by :meth:`serialize`."""
        if not data:
            return None
        tokens = iter(data.split(","))

        def make(token: str) -> TreeNode | None:
            return None if token == _NULL_MARK else TreeNode(int(token))

        root = make(next(tokens))
        if root is None:
            return None
        pending: list[tuple[TreeNode, str]] = [(root, "right"), (root, "left")]
        while pending:
            token = next(tokens, None)
            if token is None:
                break
            parent, side = pending.pop()
            child = make(token)
            if child is not None:
                setattr(parent, side, child)
                pending.append((child, "right"))
                pending.append((child, "left"))
        return root