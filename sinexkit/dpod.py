"""Readers for the annual/semi-annual correction files of DPOD realizations."""

from __future__ import annotations

import os
import re
from typing import Iterable

from sinexkit.dates import SinexError
from sinexkit.harmonics import RealHarmonics, SiteRealHarmonics
from sinexkit.records import SiteId

_INT = re.compile(r"-?\d+")
_FLOAT = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_DATA_START = 27


def parse_frequency_line(line: str) -> tuple[int, float] | None:
    """Resolve a ``# Frequency  1 : 365.250 days`` line.

    Returns ``(index, frequency)`` or ``None`` if the line is not a frequency line.
    """
    if not line.startswith("#"):
        return None
    body = line[1:].lstrip(" #")
    if not body.startswith("Frequency "):
        return None
    rest = body[11:].lstrip(" ")
    index = _INT.match(rest)
    if index is None:
        return None
    rest = rest[index.end() + 1:]
    colon = rest.find(":")
    if colon < 0:
        return None
    value = _FLOAT.match(rest[colon + 1:].lstrip(" "))
    if value is None:
        return None
    return int(index.group()), float(value.group())


def _data_values(line: str) -> tuple[float, float, float, float]:
    """Read COSAMP, COSSTD, SINAMP, SINSTD from a data line."""
    tokens = line[_DATA_START:].split()[:4]
    if len(tokens) < 4:
        raise SinexError(f"failed resolving coefficients from line {line!r}")
    try:
        cos_amp, cos_std, sin_amp, sin_std = (float(tok) for tok in tokens)
    except ValueError:
        raise SinexError(f"failed resolving coefficients from line {line!r}") from None
    return cos_amp, cos_std, sin_amp, sin_std


def parse_dpod_freq_corr(
    path: str | os.PathLike[str], sites: Iterable[SiteId]
) -> list[SiteRealHarmonics]:
    """Collect the harmonic corrections of ``sites`` from a dpod freq_corr file.

    Each data line of a wanted site adds one harmonic with the frequency of
    the latest frequency header line, its sine and its cosine amplitude.
    Sites appear in the result in the order first met in the file.
    """
    wanted = list(sites)
    harmonics: dict[str, SiteRealHarmonics] = {}
    freq: float | None = None
    with open(path, encoding="latin-1") as stream:
        for raw in stream:
            line = raw.rstrip("\r\n")
            if line.startswith("#"):
                resolved = parse_frequency_line(line)
                if resolved is not None:
                    freq = resolved[1]
                continue
            code, point = line[1:5].strip(), line[6:8].strip()
            if not any(site.same_site(code, point) for site in wanted):
                continue
            cos_amp, _, sin_amp, _ = _data_values(line)
            if freq is None:
                raise SinexError(f"failed reading frequency in dpod file {path}")
            entry = harmonics.get(code)
            if entry is None:
                harmonics[code] = SiteRealHarmonics(
                    code, RealHarmonics([(freq, sin_amp, cos_amp)])
                )
            else:
                entry.add_harmonic(freq, sin_amp, cos_amp)
    return list(harmonics.values())