"""Real harmonic signal models: y(t) = sum of As*sin(2*pi*f*t) + Ac*cos(2*pi*f*t)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple


class Harmonic(NamedTuple):
    """One harmonic constituent: frequency, sine and cosine amplitudes."""

    freq: float
    amp_sin: float = 0.0
    amp_cos: float = 0.0


class RealHarmonics:
    """An ordered collection of harmonic constituents."""

    def __init__(self, terms: Iterable[Iterable[float]] = ()) -> None:
        self._terms: list[Harmonic] = [Harmonic(*term) for term in terms]

    def add_harmonic(self, freq: float, amp_sin: float = 0.0, amp_cos: float = 0.0) -> int:
        """Append a constituent and return the new number of constituents."""
        self._terms.append(Harmonic(float(freq), float(amp_sin), float(amp_cos)))
        return len(self._terms)

    def value(self, t: float) -> float:
        """Evaluate the model at ``t``."""
        total = 0.0
        for freq, amp_sin, amp_cos in self._terms:
            arg = 2.0 * math.pi * freq * t
            total += amp_sin * math.sin(arg) + amp_cos * math.cos(arg)
        return total

    def num_harmonics(self) -> int:
        return len(self._terms)

    def __getitem__(self, i: int) -> Harmonic:
        return self._terms[i]

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Harmonic]:
        return iter(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RealHarmonics):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        return f"RealHarmonics({self._terms!r})"


@dataclass
class SiteRealHarmonics:
    """Harmonic model tagged with a 4-character site code."""

    site_name: str = ""
    harmonics: RealHarmonics = field(default_factory=RealHarmonics)

    def __post_init__(self) -> None:
        self.site_name = (self.site_name or "")[:4]

    def add_harmonic(self, freq: float, amp_sin: float = 0.0, amp_cos: float = 0.0) -> int:
        """Append a constituent and return the new number of constituents."""
        return self.harmonics.add_harmonic(freq, amp_sin, amp_cos)