import re

import pytest

from src.feed.errors import ErrorKind, FeedError
from src.utils.extract import extract, extract_or_empty, extract_single


def test_extract_returns_groups_of_first_match() -> None:
    pattern = re.compile(r"(\d+)-(\d+)")

    assert extract("a 1-2 b 3-4", pattern, 2) == ("1", "2")


def test_extract_reports_unmatched_optional_group_as_empty() -> None:
    pattern = re.compile(r"<h2>(.+?)?</h2>")

    assert extract("<h2></h2>", pattern, 1) == ("",)


def test_extract_without_match_raises_cant_parse() -> None:
    pattern = re.compile(r"<h2>(.+?)?</h2>")

    with pytest.raises(FeedError) as excinfo:
        extract("<h1>x</h1>", pattern, 1)

    assert excinfo.value.kind is ErrorKind.CANT_PARSE
    assert excinfo.value.groups == ("",)


def test_extract_with_wrong_arity_raises_cant_parse() -> None:
    pattern = re.compile(r"(a)(b)")

    with pytest.raises(FeedError) as excinfo:
        extract("ab", pattern, 3)

    assert excinfo.value.kind is ErrorKind.CANT_PARSE
    assert excinfo.value.groups == ("", "", "")


def test_extract_single_and_or_empty() -> None:
    pattern = re.compile(r'data-id="(\d+)"')

    assert extract_single('<div data-id="42">', pattern) == "42"
    assert extract_or_empty("<div>", pattern) == ("",)
