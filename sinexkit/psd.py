"""Post-seismic deformation model terms (logarithmic and exponential)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

_MJD_ORIGIN = datetime(1858, 11, 17)


@dataclass(frozen=True)
class PsdTerm:
    """A single PSD term: amplitude, relaxation time and earthquake epoch (MJD + seconds of day)."""

    amplitude: float
    tau: float
    mjd: int
    sec_of_day: float

    @classmethod
    def at(cls, t: datetime, amplitude: float = 0.0, tau: float = 0.0) -> "PsdTerm":
        delta = t.replace(tzinfo=None) - _MJD_ORIGIN
        mjd = delta.days
        sec = delta.seconds + delta.microseconds / 1e6
        return cls(float(amplitude), float(tau), mjd, sec)

    @property
    def epoch(self) -> datetime:
        return _MJD_ORIGIN + timedelta(days=self.mjd, seconds=self.sec_of_day)


@dataclass
class SitePsdModel:
    """Holds the logarithmic and exponential terms of a site's PSD model, in insertion order."""

    log_terms: list[PsdTerm] = field(default_factory=list)
    exp_terms: list[PsdTerm] = field(default_factory=list)

    def num_logarithmic_terms(self) -> int:
        return len(self.log_terms)

    def num_exponential_terms(self) -> int:
        return len(self.exp_terms)

    def log_term_at(self, i: int) -> PsdTerm:
        return self.log_terms[i]

    def exp_term_at(self, i: int) -> PsdTerm:
        return self.exp_terms[i]

    def add_log_term(self, t: datetime, amp: float = 0.0, tau: float = 0.0) -> int:
        """Add a logarithmic term; return the new number of logarithmic terms."""
        self.log_terms.append(PsdTerm.at(t, amp, tau))
        return len(self.log_terms)

    def add_exp_term(self, t: datetime, amp: float = 0.0, tau: float = 0.0) -> int:
        """Add an exponential term; return the new number of exponential terms."""
        self.exp_terms.append(PsdTerm.at(t, amp, tau))
        return len(self.exp_terms)