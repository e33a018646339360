"""Parsing of the SITE/ID and SITE/ECCENTRICITY blocks."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Iterable, Iterator

from sinexkit.dates import SinexError, parse_sinex_date
from sinexkit.records import ObservationCode, SiteEccentricity, SiteId

_MAX_SITE_ID_LINES = 10000
_MAX_ECCENTRICITY_LINES = 5000


def block_body(lines: Iterable[str], name: str, max_lines: int) -> Iterator[str]:
    """Yield the non-comment data lines of block ``name``.

    A leading ``+NAME`` line is skipped and reading stops at ``-NAME``.
    """
    count = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "+" + name:
            continue
        if line.startswith("-" + name):
            return
        count += 1
        if count >= max_lines:
            raise SinexError(
                f"read {count} lines and no '-{name}' line found"
            )
        if line.startswith("*"):
            continue
        yield line


def _angle(deg_token: str, mm_token: str, sec_token: str) -> float:
    try:
        deg = int(deg_token)
        minutes = int(mm_token)
        sec = float(sec_token)
    except ValueError:
        raise SinexError(
            f"failed parsing angle {deg_token} {mm_token} {sec_token}"
        ) from None
    value = abs(deg) + minutes / 60.0 + sec / 3600.0
    if deg_token.startswith("-"):
        value = -value
    return math.radians(value)


def parse_site_id_line(line: str) -> SiteId:
    """Parse one SITE/ID data line."""
    tokens = line[44:].split()
    if len(tokens) < 7:
        raise SinexError(f"failed parsing SITE/ID line {line!r}")
    longitude = _angle(*tokens[0:3])
    latitude = _angle(*tokens[3:6])
    try:
        height = float(tokens[6])
    except ValueError:
        raise SinexError(f"failed parsing site height in line {line!r}") from None
    return SiteId(
        site_code=line[1:5].strip(),
        point_code=line[6:8].strip(),
        domes=line[9:18].strip(),
        obscode=ObservationCode.from_char(line[19:20]),
        description=line[21:43].strip(),
        longitude=longitude,
        latitude=latitude,
        height=height,
    )


def parse_site_id_block(
    lines: Iterable[str],
    sites: Iterable[str] | None = None,
    use_domes: bool = False,
) -> list[SiteId]:
    """Collect SITE/ID records matching ``sites``; all records if none are given."""
    wanted = list(sites or [])
    result = []
    for line in block_body(lines, "SITE/ID", _MAX_SITE_ID_LINES):
        site = parse_site_id_line(line)
        if not wanted or any(site.matches(text, use_domes) for text in wanted):
            result.append(site)
    return result


def parse_eccentricity_line(
    line: str, data_start: datetime, data_stop: datetime
) -> SiteEccentricity:
    """Parse one SITE/ECCENTRICITY data line."""
    if len(line) < 70:
        raise SinexError(f"SITE/ECCENTRICITY line too short: {line!r}")
    obscode = ObservationCode.from_char(line[14])
    start = parse_sinex_date(line[16:28], data_start)
    stop = parse_sinex_date(line[29:41], data_stop)
    tokens = line[45:].split()
    try:
        up, north, east = (float(tok) for tok in tokens[:3])
    except ValueError:
        raise SinexError(f"failed parsing eccentricities from line {line!r}") from None
    return SiteEccentricity(
        site_code=line[1:5].strip(),
        point_code=line[6:8].strip(),
        soln_id=line[9:13].strip(),
        obscode=obscode,
        start=start,
        stop=stop,
        ref_system=line[42:45].strip(),
        eccentricity=(up, north, east),
    )


def parse_site_eccentricity_block(
    lines: Iterable[str],
    sites: Iterable[SiteId],
    t: datetime,
    data_start: datetime,
    data_stop: datetime,
    allow_extrapolation: bool = True,
    allowed_offset: timedelta = timedelta(seconds=2),
) -> list[SiteEccentricity]:
    """Collect eccentricities of ``sites`` valid at ``t``.

    A record valid up to within ``allowed_offset`` of the file's data stop is
    taken to hold after its stop when ``allow_extrapolation`` is set.
    """
    if t > data_stop and not allow_extrapolation:
        return []
    wanted = list(sites)
    result = []
    for line in block_body(lines, "SITE/ECCENTRICITY", _MAX_ECCENTRICITY_LINES):
        ecc = parse_eccentricity_line(line, data_start, data_stop)
        if t < ecc.start:
            continue
        valid = t < ecc.stop or (
            allow_extrapolation and (data_stop - ecc.stop) < allowed_offset
        )
        if valid and any(s.same_site(ecc.site_code, ecc.point_code) for s in wanted):
            result.append(ecc)
    return result