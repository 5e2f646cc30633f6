import pytest

from algokit.pairs import k_smallest_pairs, k_smallest_pairs_fast


def test_first_example():
    expected = [[1, 2], [1, 4], [1, 6]]
    assert k_smallest_pairs([1, 7, 11], [2, 4, 6], 3) == expected
    assert k_smallest_pairs_fast([1, 7, 11], [2, 4, 6], 3) == expected


def test_duplicate_values():
    expected = [[1, 1], [1, 1]]
    assert k_smallest_pairs([1, 1, 2], [1, 2, 3], 2) == expected
    assert k_smallest_pairs_fast([1, 1, 2], [1, 2, 3], 2) == expected


def test_k_larger_than_pair_count():
    expected = [[1, 3], [2, 3]]
    assert k_smallest_pairs([1, 2], [3], 3) == expected
    assert k_smallest_pairs_fast([1, 2], [3], 3) == expected


def test_empty_input_gives_empty():
    assert k_smallest_pairs([], [1, 2], 3) == []
    assert k_smallest_pairs([1, 2], [], 3) == []
    assert k_smallest_pairs_fast([], [1, 2], 3) == []
    assert k_smallest_pairs_fast([1, 2], [], 3) == []


def test_zero_k_gives_empty():
    assert k_smallest_pairs([1, 2], [3, 4], 0) == []
    assert k_smallest_pairs_fast([1, 2], [3, 4], 0) == []


def test_slow_negative_k_gives_empty():
    assert k_smallest_pairs([1, 2], [3, 4], -1) == []


def test_fast_negative_k_raises():
    with pytest.raises(ValueError):
        k_smallest_pairs_fast([1, 2], [3, 4], -1)


@pytest.mark.parametrize("k", [1, 4, 9, 20, 100])
def test_both_solvers_agree_on_sums(k):
    nums1 = [-5, -1, 0, 3, 3, 8]
    nums2 = [-2, 1, 4, 4, 10]
    slow = k_smallest_pairs(nums1, nums2, k)
    fast = k_smallest_pairs_fast(nums1, nums2, k)
    assert [u + v for u, v in slow] == [u + v for u, v in fast]
    assert len(slow) == min(k, len(nums1) * len(nums2))


def _assert_sorted_and_drawn(result, nums1, nums2):
    sums = [u + v for u, v in result]
    assert sums == sorted(sums)
    assert all(u in nums1 and v in nums2 for u, v in result)


def test_results_sorted_and_drawn_from_inputs():
    nums1 = [1, 4, 9, 12]
    nums2 = [0, 2, 2, 7]
    slow = k_smallest_pairs(nums1, nums2, 7)
    fast = k_smallest_pairs_fast(nums1, nums2, 7)
    assert len(slow) == 7
    assert len(fast) == 7
    _assert_sorted_and_drawn(slow, nums1, nums2)
    _assert_sorted_and_drawn(fast, nums1, nums2)