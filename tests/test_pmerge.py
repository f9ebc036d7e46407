import random

import pytest

from ninetools.pmerge import SortReport, main, merge_sort, parse_numbers, sort_and_time


def test_parse_numbers_keeps_order():
    assert parse_numbers(["3", "1", "2"]) == [3, 1, 2]


def test_parse_numbers_reads_leading_integer():
    assert parse_numbers(["  42xyz", "+7"]) == [42, 7]


def test_parse_numbers_non_numeric_is_zero():
    assert parse_numbers(["abc"]) == [0]


def test_parse_numbers_rejects_negative():
    with pytest.raises(ValueError, match="Negative numbers are not allowed"):
        parse_numbers(["5", "-1"])


@pytest.mark.parametrize("size", [0, 1, 2, 3, 7, 16, 101])
def test_merge_sort_matches_sorted(size):
    rng = random.Random(size)
    values = [rng.randint(0, 50) for _ in range(size)]
    assert merge_sort(values) == sorted(values)


def test_merge_sort_does_not_modify_input():
    values = [5, 4, 3]
    merge_sort(values)
    assert values == [5, 4, 3]


def test_sort_and_time():
    numbers = [9, 3, 7, 3, 1]
    report = sort_and_time(numbers)
    assert report.before == tuple(numbers)
    assert report.after == tuple(sorted(numbers))
    assert report.vector_time >= 0
    assert report.deque_time >= 0


def test_report_format():
    report = SortReport(before=(3, 1), after=(1, 3), vector_time=5, deque_time=7)
    assert report.format() == (
        "Before sorting: 3 1\n"
        "After sorting: 1 3\n"
        "Time taken for vector: 5 microseconds\n"
        "Time taken for deque: 7 microseconds"
    )


def test_main_prints_report(capsys):
    assert main(["3", "2", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Before sorting: 3 2 1"
    assert lines[1] == "After sorting: 1 2 3"
    assert lines[2].startswith("Time taken for vector: ")
    assert lines[3].endswith(" microseconds")


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error: No arguments provided.\n"


def test_main_negative(capsys):
    assert main(["1", "-4"]) == 1
    assert capsys.readouterr().err == "Error: Negative numbers are not allowed.\n"