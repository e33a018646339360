from datetime import datetime, timedelta

import pytest

from sinexkit.dates import SinexError, intervals_overlap, parse_sinex_date

DEFAULT = datetime(1999, 9, 9)


def test_pinned_dates_from_data_reject_example():
    assert parse_sinex_date("05:349:00000", DEFAULT) == datetime(2005, 12, 15)
    assert parse_sinex_date("06:136:86399", DEFAULT) == datetime(2006, 5, 16, 23, 59, 59)


def test_zero_date_gives_default():
    assert parse_sinex_date("00:000:00000", DEFAULT) is DEFAULT


def test_leading_spaces_and_trailing_text():
    plain = parse_sinex_date("93:003:00000", DEFAULT)
    assert parse_sinex_date("   93:003:00000 98:084:11545 UNE", DEFAULT) == plain


def test_century_pivot():
    assert parse_sinex_date("50:001:00000", DEFAULT).year == 2050
    assert parse_sinex_date("51:001:00000", DEFAULT).year == 1951


def test_day_of_year_and_seconds_are_offsets():
    base = parse_sinex_date("10:001:00000", DEFAULT)
    later = parse_sinex_date("10:032:03600", DEFAULT)
    assert later - base == timedelta(days=31, hours=1)


def test_non_numeric_raises():
    with pytest.raises(SinexError):
        parse_sinex_date("ab:cde:fghij", DEFAULT)


def test_missing_fields_raise():
    with pytest.raises(SinexError):
        parse_sinex_date("93:003", DEFAULT)


def test_invalid_day_of_year_raises():
    with pytest.raises(SinexError):
        parse_sinex_date("93:000:00100", DEFAULT)
    with pytest.raises(SinexError):
        parse_sinex_date("93:366:00000", DEFAULT)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_sinex_date("", DEFAULT)


def test_overlap_disjoint():
    a, b, c, d = (datetime(2000, 1, n) for n in (1, 2, 3, 4))
    assert intervals_overlap(a, b, c, d) is False
    assert intervals_overlap(a, b, c, d, strict=False) is False


def test_overlap_touching_edges():
    a, b, c = (datetime(2000, 1, n) for n in (1, 2, 3))
    assert intervals_overlap(a, b, b, c, strict=True) is False
    assert intervals_overlap(a, b, b, c, strict=False) is True


def test_overlap_contained_is_symmetric():
    a, b, c, d = (datetime(2000, 1, n) for n in (1, 2, 3, 4))
    assert intervals_overlap(a, d, b, c) is True
    assert intervals_overlap(b, c, a, d) is True