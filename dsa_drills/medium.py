"""Medium interview problems: arrays, dynamic programming, graphs and trees."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter, defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto

from dsa_drills.nodes import TreeNode


def three_sum(nums: list[int]) -> list[list[int]]:
    """Distinct triplets summing to zero; sorts ``nums`` in place."""
    nums.sort()
    result: list[list[int]] = []
    size = len(nums)
    for i, first in enumerate(nums):
        if i > 0 and first == nums[i - 1]:
            continue
        left, right = i + 1, size - 1
        while left < right:
            total = first + nums[left] + nums[right]
            if total == 0:
                result.append([first, nums[left], nums[right]])
                while left < right and nums[left] == nums[left + 1]:
                    left += 1
                while left < right and nums[right] == nums[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group words that are anagrams of one another."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    best = start = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def max_area(height: list[int]) -> int:
    """Largest water area held between two of the given lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def product_except_self(nums: list[int]) -> list[int]:
    """For each position, the product of every other element."""
    result = [1] * len(nums)
    prefix = 1
    for index, num in enumerate(nums):
        result[index] = prefix
        prefix *= num
    suffix = 1
    for index in reversed(range(len(nums))):
        result[index] *= suffix
        suffix *= nums[index]
    return result


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    matrix[:] = [list(row)[::-1] for row in zip(*matrix)]


def spiral_order(matrix: list[list[int]]) -> list[int]:
    """Elements of ``matrix`` in clockwise spiral order."""
    result: list[int] = []
    if not matrix:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def can_jump(nums: list[int]) -> bool:
    """Whether the last index is reachable from the first."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def merge(intervals: list[list[int]]) -> list[list[int]]:
    """Merge overlapping intervals; sorts ``intervals`` in place."""
    if not intervals:
        return []
    intervals.sort()
    result = [list(intervals[0])]
    for start, end in intervals[1:]:
        if start <= result[-1][1]:
            result[-1][1] = max(result[-1][1], end)
        else:
            result.append([start, end])
    return result


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    row = [1] * n
    for _ in range(1, m):
        for col in range(1, n):
            row[col] += row[col - 1]
    return row[n - 1]


def coin_change(coins: list[int], amount: int) -> int:
    """Fewest coins making ``amount``, or -1 if it cannot be made."""
    impossible = amount + 1
    best = [0] + [impossible] * amount
    for value in range(1, amount + 1):
        for coin in coins:
            if coin <= value:
                best[value] = min(best[value], best[value - coin] + 1)
    return -1 if best[amount] > amount else best[amount]


def length_of_lis(nums: list[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for num in nums:
        pos = bisect_left(tails, num)
        if pos == len(tails):
            tails.append(num)
        else:
            tails[pos] = num
    return len(tails)


def word_break(s: str, word_dict: list[str]) -> bool:
    """Whether ``s`` splits into a sequence of dictionary words."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words for start in range(end)
        )
    return reachable[len(s)]


def _rob_line(values: list[int]) -> int:
    prev2 = prev1 = 0
    for value in values:
        prev2, prev1 = prev1, max(prev1, prev2 + value)
    return prev1


def rob(nums: list[int]) -> int:
    """Most money from houses in a circle without robbing two neighbours."""
    if len(nums) == 1:
        return nums[0]
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def num_islands(grid: list[list[str]]) -> int:
    """Count islands of '1' cells; sinks visited land in ``grid``."""
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    count = 0
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] != "1":
                continue
            count += 1
            pending = [(i, j)]
            while pending:
                r, c = pending.pop()
                if 0 <= r < rows and 0 <= c < cols and grid[r][c] == "1":
                    grid[r][c] = "0"
                    pending.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return count


class _Visit(Enum):
    UNSEEN = auto()
    ACTIVE = auto()
    DONE = auto()


def can_finish(num_courses: int, prerequisites: list[list[int]]) -> bool:
    """Whether all courses can be taken, i.e. the prerequisites have no cycle."""
    graph: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        graph[required].append(course)
    state = [_Visit.UNSEEN] * num_courses

    for start in range(num_courses):
        if state[start] is not _Visit.UNSEEN:
            continue
        state[start] = _Visit.ACTIVE
        stack = [(start, iter(graph[start]))]
        while stack:
            node, successors = stack[-1]
            nxt = next(successors, None)
            if nxt is None:
                state[node] = _Visit.DONE
                stack.pop()
            elif state[nxt] is _Visit.ACTIVE:
                return False
            elif state[nxt] is _Visit.UNSEEN:
                state[nxt] = _Visit.ACTIVE
                stack.append((nxt, iter(graph[nxt])))
    return True


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True

    def _walk(self, text: str) -> _TrieNode | None:
        node: _TrieNode | None = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


def find_kth_largest(nums: list[int], k: int) -> int:
    """The ``k``-th largest value (1-based)."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def top_k_frequent(nums: list[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first."""
    buckets: list[list[int]] = [[] for _ in range(len(nums) + 1)]
    for num, count in Counter(nums).items():
        buckets[count].append(num)
    result: list[int] = []
    for bucket in reversed(buckets):
        for num in bucket:
            if len(result) == k:
                return result
            result.append(num)
    return result


def find_peak_element(nums: list[int]) -> int:
    """Index of some element greater than its neighbours."""
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left


def search(nums: list[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values of a binary tree grouped by depth, left to right."""
    if root is None:
        return []
    result: list[list[int]] = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        result.append(level)
    return result


def _within(node: TreeNode | None, low: float, high: float) -> bool:
    if node is None:
        return True
    if not low < node.val < high:
        return False
    return _within(node.left, low, node.val) and _within(node.right, node.val, high)


def is_valid_bst(root: TreeNode | None) -> bool:
    """Whether the tree is a binary search tree with strictly ordered keys."""
    return _within(root, float("-inf"), float("inf"))


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Deepest node having both ``p`` and ``q`` as descendants (or itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def build_tree(preorder: list[int], inorder: list[int]) -> TreeNode | None:
    """Rebuild a binary tree from its preorder and inorder traversals."""
    position = {value: index for index, value in enumerate(inorder)}
    values = iter(preorder)

    def build(left: int, right: int) -> TreeNode | None:
        if left > right:
            return None
        node = TreeNode(next(values))
        mid = position[node.val]
        node.left = build(left, mid - 1)
        node.right = build(mid + 1, right)
        return node

    return build(0, len(inorder) - 1)