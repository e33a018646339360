"""Record types held in the blocks of a SINEX file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sinexkit.dates import SinexError


class ObservationCode(Enum):
    """Technique used to produce a SINEX record."""

    COMBINED = "C"
    DORIS = "D"
    GNSS = "P"
    SLR = "L"
    LLR = "M"
    VLBI = "R"

    @classmethod
    def from_char(cls, char: str) -> "ObservationCode":
        """Resolve a one-character SINEX observation code."""
        try:
            return cls(char)
        except ValueError:
            raise SinexError(f"erroneous SINEX observation code {char!r}") from None


@dataclass(frozen=True)
class SiteId:
    """A SITE/ID record; longitude and latitude in radians, height in metres."""

    site_code: str
    point_code: str = "A"
    domes: str = ""
    obscode: ObservationCode = ObservationCode.DORIS
    description: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    height: float = 0.0

    def matches(self, text: str, use_domes: bool = False) -> bool:
        """Match against ``"CODE"`` or, with ``use_domes``, ``"CODE DOMES____"``."""
        if text[:4].strip() != self.site_code:
            return False
        if use_domes:
            return text[5:14].strip() == self.domes
        return True

    def same_site(self, site_code: str, point_code: str) -> bool:
        """Compare SITE CODE and POINT CODE."""
        return self.site_code == site_code and self.point_code == point_code


@dataclass(frozen=True)
class SiteEccentricity:
    """A SITE/ECCENTRICITY record; ``eccentricity`` holds the three components in metres."""

    site_code: str
    point_code: str
    soln_id: str
    obscode: ObservationCode
    start: datetime
    stop: datetime
    ref_system: str
    eccentricity: tuple[float, float, float]


@dataclass(frozen=True)
class DataReject:
    """A SOLUTION/DATA_REJECT record."""

    site_code: str
    point_code: str
    soln_id: str
    obscode: ObservationCode
    start: datetime
    stop: datetime
    colm: str = ""
    cola: str = ""
    comment: str = ""


@dataclass(frozen=True)
class SiteAntenna:
    """A SITE/ANTENNA record."""

    site_code: str
    point_code: str
    soln_id: str
    obscode: ObservationCode
    ant_type: str = ""
    ant_serial: str = ""


@dataclass(frozen=True)
class SolutionEstimate:
    """A SOLUTION/ESTIMATE record."""

    parameter_type: str
    site_code: str
    point_code: str
    soln_id: str
    epoch: datetime
    estimate: float
    std_deviation: float = 0.0
    units: str = ""
    constraint: str = ""
    index: int = 0

    def match_site(self, site: SiteId) -> bool:
        """True if the record belongs to ``site`` (SITE CODE and POINT CODE)."""
        return site.same_site(self.site_code, self.point_code)


@dataclass(frozen=True)
class SolutionEpoch:
    """A SOLUTION/EPOCHS record."""

    site_code: str
    point_code: str
    soln_id: str
    obscode: ObservationCode
    start: datetime
    stop: datetime
    mean_epoch: datetime