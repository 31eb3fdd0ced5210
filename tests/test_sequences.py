import pytest

from algokit.sequences import lcs, matrix_chain_order, min_cut_cost, word_wrap


@pytest.mark.parametrize("text", ["", "a", "abcdef", "aaaa"])
def test_lcs_with_itself_is_full_length(text):
    assert lcs(text, text) == len(text)


def test_lcs_with_empty_is_zero():
    assert lcs("abc", "") == 0
    assert lcs("", "abc") == 0


@pytest.mark.parametrize("s1,s2", [("ABCDGH", "AEDFHR"), ("AGGTAB", "GXTXAYB"), ("xyz", "zyx")])
def test_lcs_is_symmetric_and_bounded(s1, s2):
    result = lcs(s1, s2)
    assert result == lcs(s2, s1)
    assert 0 <= result <= min(len(s1), len(s2))


def test_lcs_of_subsequence_is_its_length():
    text = "dynamicprogramming"
    sub = text[::3]
    assert lcs(text, sub) == len(sub)


def test_lcs_disjoint_alphabets():
    assert lcs("abc", "xyz") == 0


def test_lcs_accepts_lists():
    assert lcs([1, 2, 3, 4], [2, 4]) == 2


def test_matrix_chain_single_matrix():
    assert matrix_chain_order([10, 20]) == 0


def test_matrix_chain_two_matrices():
    assert matrix_chain_order([10, 20, 30]) == 10 * 20 * 30


def test_matrix_chain_example():
    assert matrix_chain_order([40, 20, 30, 10, 30]) == 26000


def test_matrix_chain_not_worse_than_left_to_right():
    dims = [5, 10, 3, 12, 5, 50, 6]
    left_to_right = sum(dims[0] * dims[i] * dims[i + 1] for i in range(1, len(dims) - 1))
    assert matrix_chain_order(dims) <= left_to_right


def test_matrix_chain_rejects_short_input():
    with pytest.raises(ValueError):
        matrix_chain_order([7])


def test_min_cut_cost_no_cuts():
    assert min_cut_cost(9, []) == 0


def test_min_cut_cost_single_cut_costs_whole_stick():
    assert min_cut_cost(9, [4]) == 9


def test_min_cut_cost_example():
    assert min_cut_cost(7, [1, 3, 4, 5]) == 16


def test_min_cut_cost_ignores_order_and_keeps_input():
    cuts = [5, 1, 4, 3]
    assert min_cut_cost(7, cuts) == min_cut_cost(7, sorted(cuts))
    assert cuts == [5, 1, 4, 3]


def test_word_wrap_all_on_one_line():
    assert word_wrap([2, 3, 1], 20) == 0


def test_word_wrap_empty():
    assert word_wrap([], 5) == 0


def test_word_wrap_example():
    assert word_wrap([3, 2, 2, 5], 6) == 10


def test_word_wrap_one_word_per_line():
    assert word_wrap([4, 4], 4) == 0


def test_word_wrap_rejects_overlong_word():
    with pytest.raises(ValueError):
        word_wrap([3, 9, 2], 6)