import pytest

from dvbtune.charsets import ICONV_CODES, iconv_codes_count, is_known_charset


def test_count_matches_table():
    assert iconv_codes_count() == len(ICONV_CODES)


def test_utf8_is_first():
    assert ICONV_CODES[0] == "UTF-8"
    assert is_known_charset(ICONV_CODES[0]) is True


def test_table_ends_with_yu():
    assert ICONV_CODES[iconv_codes_count() - 1] == "YU"


def test_every_listed_code_is_known():
    assert all(is_known_charset(code) for code in ICONV_CODES)


@pytest.mark.parametrize("name", ["utf-8", "iso-8859-15", "Iso6937", "windows-1252"])
def test_known_ignores_case(name):
    assert is_known_charset(name) is True


@pytest.mark.parametrize("name", ["", "NOT-A-CHARSET", "UTF-9", "ISO-8859-99"])
def test_unknown_names(name):
    assert is_known_charset(name) is False


def test_surrounding_whitespace_ignored():
    assert is_known_charset("  UTF8\n") is True


def test_codes_are_upper_case_strings():
    assert all(code == code.upper() for code in ICONV_CODES)
    assert all(is_known_charset(code.lower()) for code in ICONV_CODES)