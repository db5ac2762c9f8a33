import pytest

from dsa_drills.easy import (
    binary_search,
    climb_stairs,
    contains_duplicate,
    fizz_buzz,
    intersection,
    is_palindrome,
    is_symmetric,
    is_valid_parentheses,
    max_profit,
    max_sub_array,
    merge_two_lists,
    move_zeroes,
    reverse_list,
    single_number,
    two_sum,
)
from dsa_drills.nodes import ListNode, TreeNode, build_list, list_values


# Two Sum
def test_two_sum_basic():
    assert sorted(two_sum([2, 7, 11, 15], 9)) == [0, 1]


def test_two_sum_multiple_valid():
    assert sorted(two_sum([3, 2, 4], 6)) == [1, 2]


def test_two_sum_same_number():
    assert len(two_sum([3, 3], 6)) == 2


def test_two_sum_no_answer():
    assert two_sum([1, 2], 10) == []


# Valid Parentheses
@pytest.mark.parametrize("s", ["()", "()[]{}", "{[]}", ""])
def test_valid_parentheses_true(s):
    assert is_valid_parentheses(s) is True


@pytest.mark.parametrize("s", ["(]", "([)]", "((", "(", ")"])
def test_valid_parentheses_false(s):
    assert is_valid_parentheses(s) is False


# Merge Two Sorted Lists
def test_merge_both_non_empty():
    merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
    assert list_values(merged) == [1, 1, 2, 3, 4, 4]


def test_merge_one_empty():
    merged = merge_two_lists(None, ListNode(0))
    assert merged.val == 0
    assert merged.next is None


# Best Time to Buy and Sell Stock
def test_max_profit_normal():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_none():
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_single_day():
    assert max_profit([5]) == 0


# Valid Palindrome
def test_palindrome_cases():
    assert is_palindrome("A man, a plan, a canal: Panama") is True
    assert is_palindrome("race a car") is False
    assert is_palindrome(" ") is True


@pytest.mark.parametrize("s", ["", "a", "aa"])
def test_palindrome_edge_cases(s):
    assert is_palindrome(s) is True


# Maximum Subarray
@pytest.mark.parametrize(
    "nums, expected",
    [
        ([-2, 1, -3, 4, -1, 2, 1, -5, 4], 6),
        ([1, 2, 3, 4, 5], 15),
        ([-5, -2, -3, -1], -1),
        ([5], 5),
    ],
)
def test_max_sub_array(nums, expected):
    assert max_sub_array(nums) == expected


def test_max_sub_array_empty_raises():
    with pytest.raises(ValueError):
        max_sub_array([])


# Contains Duplicate
def test_contains_duplicate_true():
    assert contains_duplicate([1, 2, 3, 1]) is True
    assert contains_duplicate([1, 1, 1, 3, 3, 4, 3, 2, 4, 2]) is True


def test_contains_duplicate_false():
    assert contains_duplicate([1, 2, 3, 4]) is False


# Reverse Linked List
def test_reverse_list_normal():
    reversed_head = reverse_list(build_list([1, 2, 3]))
    assert reversed_head.val == 3
    assert reversed_head.next.val == 2
    assert reversed_head.next.next.val == 1
    assert reversed_head.next.next.next is None


def test_reverse_list_empty():
    assert reverse_list(None) is None


# Binary Search
def test_binary_search_found():
    assert binary_search([-1, 0, 3, 5, 9, 12], 9) == 4
    assert binary_search([-1, 0, 3, 5, 9, 12], -1) == 0


def test_binary_search_not_found():
    assert binary_search([-1, 0, 3, 5, 9, 12], 2) == -1


# Climbing Stairs
@pytest.mark.parametrize("n, expected", [(2, 2), (3, 3), (4, 5), (5, 8), (10, 89)])
def test_climb_stairs(n, expected):
    assert climb_stairs(n) == expected


# Symmetric Tree
def test_symmetric_tree():
    root = TreeNode(
        1,
        TreeNode(2, TreeNode(3), TreeNode(4)),
        TreeNode(2, TreeNode(4), TreeNode(3)),
    )
    assert is_symmetric(root) is True


def test_not_symmetric_tree():
    root = TreeNode(1, TreeNode(2, None, TreeNode(3)), TreeNode(2, None, TreeNode(3)))
    assert is_symmetric(root) is False


def test_empty_tree_is_symmetric():
    assert is_symmetric(None) is True


# Single Number
def test_single_number_basic():
    assert single_number([2, 2, 1]) == 1
    assert single_number([4, 1, 2, 1, 2]) == 4


def test_single_number_single_element():
    assert single_number([1]) == 1


# Intersection of Two Arrays
def test_intersection_basic():
    assert intersection([1, 2, 2, 1], [2, 2]) == [2]


def test_intersection_multiple_common():
    assert sorted(intersection([4, 9, 5], [9, 4, 9, 8, 4])) == [4, 9]


# Move Zeroes
def test_move_zeroes_basic():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


def test_move_zeroes_no_zeroes():
    nums = [1, 2, 3]
    move_zeroes(nums)
    assert nums == [1, 2, 3]


# Fizz Buzz
def test_fizz_buzz_basic():
    result = fizz_buzz(15)
    assert result[0] == "1"
    assert result[2] == "Fizz"
    assert result[4] == "Buzz"
    assert result[14] == "FizzBuzz"


def test_fizz_buzz_small():
    result = fizz_buzz(5)
    assert len(result) == 5
    assert result[4] == "Buzz"