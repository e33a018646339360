from datetime import datetime

import pytest

from sinexkit.psd import PsdTerm, SitePsdModel


def test_empty_model():
    m = SitePsdModel()
    assert m.num_logarithmic_terms() == 0
    assert m.num_exponential_terms() == 0


def test_add_terms_return_counts():
    m = SitePsdModel()
    t = datetime(2010, 2, 27, 6, 34, 14)
    assert m.add_log_term(t, 1.0, 2.0) == 1
    assert m.add_exp_term(t, 3.0, 4.0) == 1
    assert m.add_log_term(t) == 2
    assert m.add_exp_term(t) == 2
    assert m.add_exp_term(t) == 3
    assert m.num_logarithmic_terms() == 2
    assert m.num_exponential_terms() == 3


def test_interleaved_additions_keep_order():
    m = SitePsdModel()
    t = datetime(2004, 12, 26)
    for i in range(5):
        m.add_exp_term(t, amp=float(i), tau=10.0 * i)
        m.add_log_term(t, amp=-float(i), tau=-10.0 * i)
    assert [m.exp_term_at(i).amplitude for i in range(5)] == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert [m.log_term_at(i).amplitude for i in range(5)] == [0.0, -1.0, -2.0, -3.0, -4.0]
    assert m.exp_term_at(3).tau == 30.0
    assert m.log_term_at(2).tau == -20.0


def test_mjd_origin_is_zero():
    term = PsdTerm.at(datetime(1858, 11, 17))
    assert term.mjd == 0
    assert term.sec_of_day == 0.0


def test_epoch_round_trip():
    t = datetime(2011, 3, 11, 5, 46, 24, 500000)
    m = SitePsdModel()
    m.add_log_term(t, 0.01, 0.5)
    term = m.log_term_at(0)
    assert term.epoch == t
    assert term.amplitude == 0.01
    assert term.tau == 0.5


def test_sec_of_day_below_a_day():
    t = datetime(2020, 6, 30, 23, 59, 59)
    term = PsdTerm.at(t)
    assert 0.0 <= term.sec_of_day < 86400.0
    assert PsdTerm.at(datetime(2020, 7, 1)).mjd == term.mjd + 1


def test_missing_term_raises():
    m = SitePsdModel()
    m.add_log_term(datetime(2000, 1, 1))
    with pytest.raises(IndexError):
        m.exp_term_at(0)
    with pytest.raises(IndexError):
        m.log_term_at(1)