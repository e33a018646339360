"""Access to the header and blocks of a SINEX file."""

from __future__ import annotations

import os
from datetime import datetime, timedelta
from typing import Iterable

from sinexkit.dates import SinexError, parse_sinex_date
from sinexkit.interval_blocks import parse_data_reject_block, parse_site_antenna_block
from sinexkit.records import (
    DataReject,
    ObservationCode,
    SiteAntenna,
    SiteEccentricity,
    SiteId,
)
from sinexkit.site_blocks import parse_site_eccentricity_block, parse_site_id_block

_CONSTRAINT_CODES = ("0", "1", "2")


class Sinex:
    """A SINEX file: its header fields and the positions of its blocks.

    Opening a missing file raises ``FileNotFoundError``; a file whose header
    or block structure is malformed raises ``SinexError``.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.filename = os.fspath(path)
        with open(self.filename, encoding="latin-1") as stream:
            self._lines = stream.read().splitlines()
        if not self._lines:
            raise SinexError(f"empty SINEX file {self.filename}")
        self._parse_header(self._lines[0])
        self._blocks = self._mark_blocks()

    def _parse_header(self, line: str) -> None:
        tokens = line.split()
        if len(tokens) < 10 or tokens[0] != "%=SNX":
            raise SinexError(f"invalid SINEX header line {line!r} in {self.filename}")
        try:
            self.version = float(tokens[1])
            self.num_estimates = int(tokens[8])
        except ValueError:
            raise SinexError(f"invalid SINEX header line {line!r}") from None
        self.agency = tokens[2]
        self.created_at = parse_sinex_date(tokens[3], datetime.min)
        self.data_agency = tokens[4]
        self.data_start = parse_sinex_date(tokens[5], datetime.min)
        self.data_stop = parse_sinex_date(tokens[6], datetime.max)
        self.obscode = ObservationCode.from_char(tokens[7])
        if tokens[9] not in _CONSTRAINT_CODES:
            raise SinexError(f"invalid SINEX constraint code {tokens[9]!r}")
        self.constraint_code = tokens[9]
        self.sol_contents = " ".join(tokens[10:])

    def _mark_blocks(self) -> dict[str, tuple[int, int]]:
        blocks: dict[str, tuple[int, int]] = {}
        current: str | None = None
        opened_at = 0
        for number, line in enumerate(self._lines[1:], start=1):
            if line.startswith("%ENDSNX"):
                break
            if line.startswith("+"):
                if current is not None:
                    raise SinexError(
                        f"block {line[1:].rstrip()!r} opened inside {current!r} "
                        f"in {self.filename}"
                    )
                current, opened_at = line[1:].rstrip(), number
            elif line.startswith("-"):
                name = line[1:].rstrip()
                if name != current:
                    raise SinexError(
                        f"unexpected end of block {name!r} in {self.filename}"
                    )
                blocks.setdefault(name, (opened_at, number + 1))
                current = None
        if current is not None:
            raise SinexError(f"block {current!r} never closed in {self.filename}")
        return blocks

    @property
    def block_names(self) -> tuple[str, ...]:
        """Names of the blocks in the file, in file order."""
        return tuple(self._blocks)

    def block_lines(self, name: str) -> list[str]:
        """Lines of block ``name``, from its ``+NAME`` to its ``-NAME`` line."""
        try:
            start, stop = self._blocks[name]
        except KeyError:
            raise SinexError(f"no block {name!r} in SINEX file {self.filename}") from None
        return self._lines[start:stop]

    def parse_block_site_id(
        self, sites: Iterable[str] | None = None, use_domes: bool = False
    ) -> list[SiteId]:
        """SITE/ID records for ``sites`` (``"CODE"`` or ``"CODE DOMES"``); all if none given."""
        return parse_site_id_block(self.block_lines("SITE/ID"), sites, use_domes)

    def parse_block_site_eccentricity(
        self,
        sites: Iterable[SiteId],
        t: datetime,
        allow_extrapolation: bool = True,
        allowed_offset: timedelta = timedelta(seconds=2),
    ) -> list[SiteEccentricity]:
        """Eccentricities of ``sites`` valid at ``t``."""
        if t > self.data_stop and not allow_extrapolation:
            return []
        return parse_site_eccentricity_block(
            self.block_lines("SITE/ECCENTRICITY"),
            sites,
            t,
            self.data_start,
            self.data_stop,
            allow_extrapolation,
            allowed_offset,
        )

    def parse_block_data_reject(
        self,
        sites: Iterable[SiteId],
        start: datetime = datetime.min,
        stop: datetime = datetime.max,
    ) -> list[DataReject]:
        """Data rejection intervals of ``sites`` overlapping ``[start, stop]``."""
        return parse_data_reject_block(
            self.block_lines("SOLUTION/DATA_REJECT"),
            sites,
            self.data_start,
            self.data_stop,
            start,
            stop,
        )

    def parse_block_site_antenna(
        self,
        sites: Iterable[SiteId],
        start: datetime = datetime.min,
        stop: datetime = datetime.max,
    ) -> list[SiteAntenna]:
        """SITE/ANTENNA records of ``sites`` valid within ``[start, stop]``."""
        return parse_site_antenna_block(
            self.block_lines("SITE/ANTENNA"),
            sites,
            self.data_start,
            self.data_stop,
            start,
            stop,
        )

    def __repr__(self) -> str:
        return f"Sinex({self.filename!r})"