import re

import pytest

from rena.core import PaddingDirection
from rena.core.text_match import file_extension, pad_counter, expand_template, is_valid_filename


@pytest.mark.parametrize("name, ext", [
    ("image.jpg", ".jpg"),
    ("archive.tar.gz", ".gz"),
    ("README", ""),
    (".bashrc", ""),
    (".config.json", ".json"),
    ("trailing.", "."),
])
def test_file_extension(name, ext):
    assert file_extension(name) == ext


def test_pad_left():
    assert pad_counter(7, 4, PaddingDirection.LEFT) == "0007"


def test_pad_right():
    assert pad_counter(7, 4, PaddingDirection.RIGHT) == "7000"


def test_pad_middle_even_split():
    assert pad_counter(12, 6, PaddingDirection.MIDDLE) == "001200"


def test_pad_middle_odd_puts_extra_zero_right():
    assert pad_counter(7, 4, PaddingDirection.MIDDLE) == "0700"
    assert pad_counter(12, 5, PaddingDirection.MIDDLE) == "01200"


@pytest.mark.parametrize("direction", list(PaddingDirection))
def test_pad_never_truncates(direction):
    assert pad_counter(123456, 3, direction) == "123456"
    assert pad_counter(42, 0, direction) == "42"


def test_expand_numbered_groups():
    match = re.search(r"Show\.S(\d+)E(\d+)\.1080p\.mkv", "Show.S01E02.1080p.mkv")
    assert expand_template("Show S${1} E${2} (1080p).mkv", match) == "Show S01 E02 (1080p).mkv"
    assert expand_template("$2-$1", match) == "02-01"


def test_expand_whole_match_and_named_groups():
    match = re.search(r"(?P<year>\d{4})-(?P<month>\d{2})", "photo_2021-07.png")
    assert expand_template("${0}", match) == "2021-07"
    assert expand_template("${month}_${year}.png", match) == "07_2021.png"
    assert expand_template("$year.png", match) == "2021.png"


def test_expand_missing_or_unmatched_group_is_empty():
    match = re.search(r"(a)|(b)", "b")
    assert expand_template("[$1][$2][$9]", match) == "[][b][]"


def test_expand_escapes_and_verbatim():
    match = re.search(r"(x)", "x")
    assert expand_template("cost $$5", match) == "cost $5"
    assert expand_template("plain name.txt", match) == "plain name.txt"


def test_expand_greedy_reference_name():
    # Like $1a is the group named "1a", which does not exist
    match = re.search(r"(x)", "x")
    assert expand_template("$1a", match) == ""
    assert expand_template("${1}a", match) == "xa"


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "nul\0byte"])
def test_invalid_filenames(name):
    valid, error = is_valid_filename(name)
    assert not valid
    assert error


def test_valid_filename():
    assert is_valid_filename("Show S01 E01 (1080p).mkv") == (True, None)


def test_expand_non_ascii_digit_reference_is_literal():
    match = re.search(r"x(\d)", "x1.txt")
    assert expand_template("v$² ($1).txt", match) == "v$² (1).txt"
    assert expand_template("v${²}.txt", match) == "v.txt"
