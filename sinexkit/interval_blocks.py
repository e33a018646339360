"""Parsing of the SOLUTION/DATA_REJECT and SITE/ANTENNA blocks."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from sinexkit.dates import intervals_overlap, parse_sinex_date
from sinexkit.records import DataReject, ObservationCode, SiteAntenna, SiteId
from sinexkit.site_blocks import block_body

_MAX_DATA_REJECT_LINES = 100000
_MAX_SITE_ANTENNA_LINES = 10000


def _site_of_line(line: str) -> tuple[str, str]:
    return line[1:5].strip(), line[6:8].strip()


def _is_wanted(line: str, sites: list[SiteId]) -> bool:
    code, point = _site_of_line(line)
    return any(site.same_site(code, point) for site in sites)


def parse_data_reject_line(
    line: str, data_start: datetime, data_stop: datetime
) -> DataReject:
    """Parse one SOLUTION/DATA_REJECT data line.

    All-zero dates resolve to the file's ``data_start`` / ``data_stop``.
    """
    code, point = _site_of_line(line)
    return DataReject(
        site_code=code,
        point_code=point,
        soln_id=line[9:13].strip(),
        obscode=ObservationCode.from_char(line[14:15]),
        start=parse_sinex_date(line[16:28], data_start),
        stop=parse_sinex_date(line[29:41], data_stop),
        colm=line[42:43],
        cola=line[44:45],
        comment=line[46:],
    )


def parse_data_reject_block(
    lines: Iterable[str],
    sites: Iterable[SiteId],
    data_start: datetime,
    data_stop: datetime,
    start: datetime = datetime.min,
    stop: datetime = datetime.max,
) -> list[DataReject]:
    """Collect rejection intervals of ``sites`` that overlap ``[start, stop]``.

    Intervals that only touch ``[start, stop]`` at an edge are not collected.
    The collected records keep the full interval written in the file.
    """
    wanted = list(sites)
    result = []
    for line in block_body(lines, "SOLUTION/DATA_REJECT", _MAX_DATA_REJECT_LINES):
        if not _is_wanted(line, wanted):
            continue
        record = parse_data_reject_line(line, data_start, data_stop)
        if intervals_overlap(start, stop, record.start, record.stop, strict=True):
            result.append(record)
    return result


def parse_site_antenna_block(
    lines: Iterable[str],
    sites: Iterable[SiteId],
    data_start: datetime,
    data_stop: datetime,
    start: datetime = datetime.min,
    stop: datetime = datetime.max,
) -> list[SiteAntenna]:
    """Collect SITE/ANTENNA records of ``sites`` whose interval meets ``[start, stop]``.

    Intervals touching ``[start, stop]`` at an edge are collected.
    """
    wanted = list(sites)
    result = []
    for line in block_body(lines, "SITE/ANTENNA", _MAX_SITE_ANTENNA_LINES):
        if not _is_wanted(line, wanted):
            continue
        valid_from = parse_sinex_date(line[16:28], data_start)
        valid_to = parse_sinex_date(line[29:41], data_stop)
        if not intervals_overlap(valid_from, valid_to, start, stop, strict=False):
            continue
        code, point = _site_of_line(line)
        result.append(
            SiteAntenna(
                site_code=code,
                point_code=point,
                soln_id=line[9:13].strip(),
                obscode=ObservationCode.from_char(line[14:15]),
                ant_type=line[42:62].strip(),
                ant_serial=line[63:68].strip(),
            )
        )
    return result