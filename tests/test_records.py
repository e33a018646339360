from datetime import datetime

import pytest

from sinexkit.dates import SinexError
from sinexkit.records import ObservationCode, SiteId, SolutionEstimate


def _site(code="DIOA", point="A", domes="12602S011"):
    return SiteId(site_code=code, point_code=point, domes=domes)


def test_observation_code_from_char():
    assert ObservationCode.from_char("D") is ObservationCode.DORIS
    assert ObservationCode.from_char("P") is ObservationCode.GNSS


def test_observation_code_unknown_raises():
    with pytest.raises(SinexError):
        ObservationCode.from_char("X")


def test_site_matches_code_only():
    site = _site()
    assert site.matches("DIOA") is True
    assert site.matches("DIOB") is False


def test_site_matches_with_domes():
    site = _site()
    assert site.matches("DIOA 12602S011", use_domes=True) is True
    assert site.matches("DIOA 12602S012", use_domes=True) is False
    assert site.matches("DIOA 12602S012", use_domes=False) is True


def test_solution_estimate_match_site():
    est = SolutionEstimate(
        parameter_type="STAX",
        site_code="DIOA",
        point_code="A",
        soln_id="1",
        epoch=datetime(2000, 1, 1),
        estimate=1.0,
    )
    assert est.match_site(_site()) is True
    assert est.match_site(_site(point="B")) is False
    assert est.match_site(_site(code="DIOB")) is False