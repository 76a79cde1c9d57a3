import pytest

from cppstart.binary_search import (
    binary_search_iterative,
    binary_search_recursive,
    main,
)

NUMS = [1, 4, 5, 9, 10, 12, 15, 18, 20]


def test_sample_target():
    assert binary_search_iterative(NUMS, 10) == 4
    assert binary_search_recursive(NUMS, 10) == 4


def test_every_element_is_found_at_its_position():
    for position, value in enumerate(NUMS):
        assert binary_search_iterative(NUMS, value) == position
        assert binary_search_recursive(NUMS, value) == position


@pytest.mark.parametrize("target", [0, 2, 11, 21])
def test_missing_value_gives_minus_one(target):
    assert binary_search_iterative(NUMS, target) == -1
    assert binary_search_recursive(NUMS, target) == -1


def test_empty_sequence():
    assert binary_search_iterative([], 3) == -1
    assert binary_search_recursive([], 3) == -1


def test_recursive_respects_bounds():
    assert binary_search_recursive(NUMS, 20, 0, 3) == -1
    assert binary_search_recursive(NUMS, 9, 2, 5) == 3


def test_both_agree_on_range():
    values = list(range(0, 50, 3))
    for target in range(-2, 55):
        assert binary_search_iterative(values, target) == binary_search_recursive(values, target)


def test_main_prints_both_results(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Index of 10 (using loop): 4",
        "Index of 10 (using recursion): 4",
    ]


def test_main_with_missing_target(capsys):
    assert main(["7"]) == 0
    out = capsys.readouterr().out
    assert "Index of 7 (using loop): -1" in out