"""Conformance suite shared by the three traversal strategies."""

from __future__ import annotations

import itertools

import pytest

from hash_bruteforce.core.strategy import (
    OdometerSearch,
    RecursiveSearch,
    StackSearch,
    count_candidates,
    get_strategy,
)
from hash_bruteforce.utils.exceptions import (
    InvalidAlphabetError,
    InvalidSearchSpaceError,
    UnknownStrategyError,
)

from .conftest import ALPHABET, MAX_LENGTH, LastCharOracle, LengthOracle


def every_string(alphabet: str, max_length: int):
    for length in range(max_length + 1):
        for chars in itertools.product(alphabet, repeat=length):
            yield "".join(chars)


@pytest.mark.parametrize("plaintext", ["a", "ba", "cf", "gggg", "abcde"])
def test_search_recovers_known_plaintexts(strategy, md5, plaintext: str) -> None:
    assert strategy.search(md5.digest(plaintext), ALPHABET, MAX_LENGTH, md5) == plaintext


def test_search_returns_none_for_out_of_space_target(strategy, md5) -> None:
    assert strategy.search(md5.digest("zzzzzz"), ALPHABET, MAX_LENGTH, md5) is None


def test_search_rejects_string_one_character_too_long(strategy, md5) -> None:
    assert strategy.search(md5.digest("aaa"), "ab", 2, md5) is None


def test_search_uses_md5_by_default(strategy, md5) -> None:
    assert strategy.search(md5.digest("dc"), ALPHABET, 3) == "dc"


def test_every_string_in_a_small_space_is_found(strategy, md5) -> None:
    tested_empty = strategy.tests_empty
    for plaintext in every_string("abc", 3):
        found = strategy.search(md5.digest(plaintext), "abc", 3, md5)
        if plaintext == "" and not tested_empty:
            assert found is None
        else:
            assert found == plaintext


def test_strategies_agree_on_every_target(md5) -> None:
    strategies = [RecursiveSearch(), StackSearch(), OdometerSearch(include_empty=True)]
    for plaintext in list(every_string("abc", 2)) + ["abcd", "x"]:
        target = md5.digest(plaintext)
        results = {s.search(target, "abc", 2, md5) for s in strategies}
        assert len(results) == 1


def test_visit_order_is_depth_first_lexicographic() -> None:
    expected = ["", "a", "aa", "ab", "b", "ba", "bb"]

    assert RecursiveSearch().list_candidates("ab", 2) == expected
    assert StackSearch().list_candidates("ab", 2) == expected
    assert OdometerSearch().list_candidates("ab", 2) == expected[1:]
    assert OdometerSearch(include_empty=True).list_candidates("ab", 2) == expected


def test_visit_order_follows_alphabet_order_not_sort_order() -> None:
    assert StackSearch().list_candidates("ba", 1) == ["", "b", "a"]
    assert OdometerSearch().list_candidates("ba", 2) == ["b", "bb", "ba", "a", "ab", "aa"]


def test_candidates_are_unique_and_complete(strategy) -> None:
    seen = strategy.list_candidates("abcd", 3)

    assert len(seen) == len(set(seen))
    assert len(seen) == strategy.total_count("abcd", 3)
    expected = set(every_string("abcd", 3))
    if not strategy.tests_empty:
        expected.discard("")
    assert set(seen) == expected


def test_length_collisions_return_first_visited_candidate(strategy) -> None:
    oracle = LengthOracle()
    assert strategy.search(oracle.digest("xy"), ALPHABET, MAX_LENGTH, oracle) == "aa"
    assert strategy.search(oracle.digest("xyzw"), ALPHABET, MAX_LENGTH, oracle) == "aaaa"


def test_last_character_collisions_return_first_visited_candidate(strategy) -> None:
    oracle = LastCharOracle()
    assert strategy.search(oracle.digest("b"), ALPHABET, MAX_LENGTH, oracle) == "aaaab"
    assert strategy.search(oracle.digest("g"), ALPHABET, 2, oracle) == "ag"


def test_forward_push_order_would_change_the_first_match() -> None:
    class ForwardPushStack(StackSearch):
        def _traverse(self, accept, alphabet, max_length):
            stack = [""]
            while stack:
                candidate = stack.pop()
                if accept(candidate):
                    return candidate
                if len(candidate) < max_length:
                    stack.extend(candidate + char for char in alphabet)
            return None

    oracle = LastCharOracle()
    target = oracle.digest("b")

    assert StackSearch().search(target, ALPHABET, MAX_LENGTH, oracle) == "aaaab"
    assert ForwardPushStack().search(target, ALPHABET, MAX_LENGTH, oracle) != "aaaab"


def test_exhaustion_tests_every_candidate_once(strategy) -> None:
    calls = []

    def reject(candidate: str) -> bool:
        calls.append(candidate)
        return False

    assert strategy.find(reject, ALPHABET, MAX_LENGTH) is None
    expected = 19608 if strategy.tests_empty else 19607
    assert len(calls) == expected
    assert strategy.total_count(ALPHABET, MAX_LENGTH) == expected


def test_count_candidates() -> None:
    assert count_candidates(7, 5) == 19608
    assert count_candidates(7, 5) <= 137257
    assert count_candidates(7, 5, include_empty=False) == 19607
    assert count_candidates(3, 0) == 1
    assert count_candidates(0, 4) == 1


def test_empty_string_target() -> None:
    target = LengthOracle().digest("")
    oracle = LengthOracle()

    assert RecursiveSearch().search(target, ALPHABET, 2, oracle) == ""
    assert StackSearch().search(target, ALPHABET, 2, oracle) == ""
    assert OdometerSearch().search(target, ALPHABET, 2, oracle) is None
    assert OdometerSearch(include_empty=True).search(target, ALPHABET, 2, oracle) == ""


def test_zero_max_length() -> None:
    assert RecursiveSearch().list_candidates(ALPHABET, 0) == [""]
    assert StackSearch().list_candidates(ALPHABET, 0) == [""]
    assert OdometerSearch().list_candidates(ALPHABET, 0) == []


def test_empty_alphabet(strategy) -> None:
    seen = strategy.list_candidates("", 3)
    assert seen == ([""] if strategy.tests_empty else [])


def test_alphabet_may_be_a_list_of_characters(strategy, md5) -> None:
    assert strategy.search(md5.digest("yx"), ["x", "y"], 2, md5) == "yx"


def test_target_digest_is_not_modified(strategy, md5) -> None:
    target = bytearray(md5.digest("gg"))
    before = bytes(target)

    assert strategy.search(target, ALPHABET, 2, md5) == "gg"
    assert bytes(target) == before


@pytest.mark.parametrize("alphabet", ["aab", ["ab", "c"], ["a", 1], ["a", ""]])
def test_invalid_alphabet_is_rejected(strategy, alphabet) -> None:
    with pytest.raises(InvalidAlphabetError):
        strategy.find(lambda candidate: False, alphabet, 2)


@pytest.mark.parametrize("max_length", [-1, 1.5, "3", True, None])
def test_invalid_max_length_is_rejected(strategy, max_length) -> None:
    with pytest.raises(InvalidSearchSpaceError):
        strategy.find(lambda candidate: False, ALPHABET, max_length)


def test_recursive_search_refuses_lengths_beyond_the_recursion_limit() -> None:
    with pytest.raises(InvalidSearchSpaceError):
        RecursiveSearch().find(lambda candidate: False, "a", 100_000)


@pytest.mark.parametrize("strategy_class", [StackSearch, OdometerSearch])
def test_iterative_strategies_handle_long_candidates(strategy_class, md5) -> None:
    plaintext = "a" * 3000
    assert strategy_class().search(md5.digest(plaintext), "a", 3000, md5) == plaintext


def test_get_strategy_by_name() -> None:
    assert isinstance(get_strategy("recursive"), RecursiveSearch)
    assert isinstance(get_strategy("STACK"), StackSearch)

    odometer = get_strategy("odometer", include_empty=True)
    assert isinstance(odometer, OdometerSearch)
    assert odometer.tests_empty


def test_get_strategy_rejects_unknown_names() -> None:
    with pytest.raises(UnknownStrategyError):
        get_strategy("breadth-first")
