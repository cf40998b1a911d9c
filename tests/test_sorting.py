import random

from dsakit.sorting import bubble_sort, insertion_sort, selection_sort


def _all_sorts(values):
    data = list(values)
    return [bubble_sort(data), insertion_sort(data), selection_sort(data)]


def test_source_example():
    data = [15, 2, 5, 244, 3, 600]
    expected = [2, 3, 5, 15, 244, 600]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert insertion_sort([]) == []
    assert selection_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert insertion_sort([7]) == [7]
    assert selection_sort([7]) == [7]


def test_does_not_mutate_input():
    data = [4, 1, 3, 2]
    assert bubble_sort(data) == [1, 2, 3, 4]
    assert data == [4, 1, 3, 2]
    assert insertion_sort(data) == [1, 2, 3, 4]
    assert data == [4, 1, 3, 2]
    assert selection_sort(data) == [1, 2, 3, 4]
    assert data == [4, 1, 3, 2]


def test_duplicates_and_negatives():
    data = [3, -1, 3, 0, -1, 2, 2]
    expected = [-1, -1, 0, 2, 2, 3, 3]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_accepts_any_iterable_of_comparables():
    words = ("pear", "apple", "fig", "banana")
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(iter(words)) == expected
    assert insertion_sort(iter(words)) == expected
    assert selection_sort(iter(words)) == expected


def test_random_lists_match_builtin():
    rng = random.Random(1234)
    for _ in range(50):
        data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 30))]
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert insertion_sort(data) == expected
        assert selection_sort(data) == expected


def test_already_sorted_and_reversed():
    data = list(range(20))
    assert bubble_sort(data) == data
    assert insertion_sort(data) == data
    assert selection_sort(data) == data
    assert bubble_sort(reversed(data)) == data
    assert insertion_sort(reversed(data)) == data
    assert selection_sort(reversed(data)) == data


def test_results_agree_across_algorithms():
    rng = random.Random(99)
    data = [rng.randint(0, 10) for _ in range(25)]
    first, second, third = _all_sorts(data)
    assert first == second == third