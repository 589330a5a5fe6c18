from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    decode,
    encode,
    group_anagrams,
    has_duplicates,
    is_anagram,
    top_k_frequent,
    two_sum,
)


@given(st.lists(st.integers(-50, 50)))
def test_has_duplicates_matches_set_size(nums):
    assert has_duplicates(nums) is (len(set(nums)) < len(nums))


def test_has_duplicates_examples():
    assert has_duplicates([1, 2, 3, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False


def test_encode_worked_example():
    assert encode(["neet", "code", "loves", "you"]) == "4#neet4#code5#loves3#you"


@given(st.lists(st.text()))
def test_encode_decode_round_trip(strs):
    assert decode(encode(strs)) == strs


def test_decode_handles_separator_inside_text():
    strs = ["a#b", "#", "", "12#"]
    assert decode(encode(strs)) == strs


def test_decode_empty():
    assert decode("") == []


@pytest.mark.parametrize("bad", ["3abc", "x#abc", "#abc", "-1#a"])
def test_decode_rejects_malformed(bad):
    with pytest.raises(ValueError):
        decode(bad)


def test_group_anagrams_example():
    strs = ["act", "pots", "tops", "cat", "stop", "hat"]
    groups = group_anagrams(strs)
    assert sorted(sorted(g) for g in groups) == [
        ["act", "cat"],
        ["hat"],
        ["pots", "stop", "tops"],
    ]


@given(st.lists(st.text(alphabet="abc", max_size=4)))
def test_group_anagrams_partitions_input(strs):
    groups = group_anagrams(strs)
    flat = [s for g in groups for s in g]
    assert Counter(flat) == Counter(strs)
    for g in groups:
        assert all(is_anagram(g[0], s) for s in g)
    keys = [sorted(g[0]) for g in groups]
    assert len(keys) == len({"".join(k) for k in keys})


@given(st.lists(st.integers(0, 8), max_size=30), st.integers(1, 10))
def test_top_k_frequent_picks_most_frequent(nums, k):
    result = top_k_frequent(nums, k)
    counts = Counter(nums)
    assert len(result) == min(k, len(counts))
    assert len(set(result)) == len(result)
    freqs = [counts[v] for v in result]
    assert freqs == sorted(freqs, reverse=True)
    excluded = set(counts) - set(result)
    if result and excluded:
        assert min(freqs) >= max(counts[v] for v in excluded)


def test_two_sum_example():
    assert two_sum([2, 4, 5, 6], 11) == (2, 3)


def test_two_sum_no_solution():
    assert two_sum([1, 2], 10) is None
    assert two_sum([], 0) is None


@given(st.lists(st.integers(-20, 20), max_size=20), st.integers(-40, 40))
def test_two_sum_result_is_valid(nums, target):
    result = two_sum(nums, target)
    exists = any(
        nums[i] + nums[j] == target
        for i in range(len(nums))
        for j in range(i + 1, len(nums))
    )
    if result is None:
        assert not exists
    else:
        i, j = result
        assert i < j
        assert nums[i] + nums[j] == target


def test_is_anagram_examples():
    assert is_anagram("anagram", "nagaram") is True
    assert is_anagram("rat", "car") is False
    assert is_anagram("ab", "abc") is False


@given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz"), st.randoms())
def test_is_anagram_of_shuffle(s, rnd):
    letters = list(s)
    rnd.shuffle(letters)
    assert is_anagram(s, "".join(letters))