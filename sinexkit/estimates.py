"""Filtering of SOLUTION/ESTIMATE records and linear coordinate extrapolation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from sinexkit.dates import SinexError
from sinexkit.records import SiteId, SolutionEpoch, SolutionEstimate

_SECONDS_PER_YEAR = 365.25 * 86400.0
_COMPONENTS = (("STAX", "VELX"), ("STAY", "VELY"), ("STAZ", "VELZ"))


@dataclass(frozen=True)
class SiteCoordinates:
    """Cartesian coordinates of a site, in metres."""

    site: SiteId
    x: float
    y: float
    z: float


def filter_solution_estimates(
    estimates: Iterable[SolutionEstimate], epochs: Iterable[SolutionEpoch]
) -> list[SolutionEstimate]:
    """Keep the estimates that have a solution epoch with the same site, point and solution id."""
    keys = {(e.site_code, e.point_code, e.soln_id) for e in epochs}
    return [
        est
        for est in estimates
        if (est.site_code, est.point_code, est.soln_id) in keys
    ]


def _find(
    estimates: Sequence[SolutionEstimate], site: SiteId, parameter: str
) -> SolutionEstimate | None:
    return next(
        (e for e in estimates if e.match_site(site) and e.parameter_type == parameter),
        None,
    )


def linear_extrapolate_coordinates(
    sites: Iterable[SiteId], t: datetime, estimates: Iterable[SolutionEstimate]
) -> list[SiteCoordinates]:
    """Extrapolate each site's position to ``t`` with a linear model.

    For every site the first STAX/VELX, STAY/VELY and STAZ/VELZ estimates that
    match it are used; the velocity is per year of 365.25 days.
    """
    pool = list(estimates)
    result = []
    for site in sites:
        xyz = []
        for sta, vel in _COMPONENTS:
            position = _find(pool, site, sta)
            velocity = _find(pool, site, vel)
            if position is None and velocity is None:
                raise SinexError(
                    f"failed retrieving components for site {site.site_code} {site.point_code}"
                )
            if velocity is None:
                raise SinexError(
                    f"found only {sta} but not {vel} parameter for site "
                    f"{site.site_code} {site.point_code}"
                )
            if position is None:
                raise SinexError(
                    f"found only {vel} but not {sta} parameter for site "
                    f"{site.site_code} {site.point_code}"
                )
            years = (t - position.epoch).total_seconds() / _SECONDS_PER_YEAR
            xyz.append(position.estimate + velocity.estimate * years)
        result.append(SiteCoordinates(site, *xyz))
    return result