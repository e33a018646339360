# sinexkit

Tools for reading SINEX (Solution INdependent EXchange) files and the
companion DPOD `*_freq_corr.txt` files used for DORIS beacons and other
geodetic sites.

## Installation

```
pip install .
```

The package has no runtime dependencies. Install the `test` extra
(`pip install .[test]`) to run the test suite with pytest.

## What is in the package

- `sinexkit.sinexfile.Sinex` opens a SINEX file, reads its `%=SNX` header
  line (`version`, `agency`, `created_at`, `data_agency`, `data_start`,
  `data_stop`, `obscode`, `num_estimates`, `constraint_code`,
  `sol_contents`) and checks that every `+NAME` block is closed by its
  `-NAME` line. `block_names` lists the blocks in file order and
  `block_lines(name)` returns the lines of one block. It parses these blocks
  for a chosen list of sites:
  - `parse_block_site_id(sites, use_domes)` – `SITE/ID`; sites are given as
    `"CODE"` or, with `use_domes=True`, `"CODE DOMES"`; all records if no
    sites are given.
  - `parse_block_site_eccentricity(sites, t, allow_extrapolation, allowed_offset)`
    – `SITE/ECCENTRICITY` records valid at `t`.
  - `parse_block_data_reject(sites, start, stop)` – `SOLUTION/DATA_REJECT`
    intervals overlapping `[start, stop]`.
  - `parse_block_site_antenna(sites, start, stop)` – `SITE/ANTENNA` records.
- `sinexkit.site_blocks` and `sinexkit.interval_blocks` hold the same parsers
  as plain functions working on any iterable of lines, plus the single-line
  parsers `parse_site_id_line`, `parse_eccentricity_line` and
  `parse_data_reject_line`.
- `sinexkit.records` defines the record dataclasses (`SiteId`,
  `SiteEccentricity`, `DataReject`, `SiteAntenna`, `SolutionEstimate`,
  `SolutionEpoch`) and the `ObservationCode` enum.
- `sinexkit.estimates` provides `filter_solution_estimates(estimates, epochs)`,
  which keeps the estimates whose site, point and solution id appear among the
  epochs, and `linear_extrapolate_coordinates(sites, t, estimates)`, which
  returns `SiteCoordinates` from `STAX/VELX`, `STAY/VELY`, `STAZ/VELZ`
  estimates with velocities per year of 365.25 days.
- `sinexkit.dpod.parse_dpod_freq_corr(path, sites)` reads a DPOD frequency
  correction file into a list of `SiteRealHarmonics`, one per site;
  `parse_frequency_line` resolves a `# Frequency  1 : 365.250 days` line.
- `sinexkit.harmonics.RealHarmonics` holds harmonic constituents and
  evaluates `value(t)` = Σ As·sin(2πft) + Ac·cos(2πft).
- `sinexkit.psd.SitePsdModel` stores the logarithmic and exponential terms
  (`PsdTerm`: amplitude, relaxation time, MJD and seconds of day) of a
  post-seismic deformation model.
- `sinexkit.dates.parse_sinex_date` parses `YY:DDD:SSSSS` dates (the all-zero
  date resolves to a given default) and `intervals_overlap` compares
  intervals.

Parsing failures raise `sinexkit.dates.SinexError`; opening a file that does
not exist raises `FileNotFoundError`.

## Usage

```python
from datetime import datetime

from sinexkit.sinexfile import Sinex

snx = Sinex("dpod2020.snx")
sites = snx.parse_block_site_id(["DIOB", "MANB"], use_domes=False)

t = datetime(2020, 1, 1)
for ecc in snx.parse_block_site_eccentricity(sites, t):
    print(ecc.site_code, ecc.soln_id, ecc.ref_system, ecc.eccentricity)
```

Annual and semi-annual corrections for the same sites:

```python
from sinexkit.dpod import parse_dpod_freq_corr

for site in parse_dpod_freq_corr("dpod2020_freq_corr.txt", sites):
    for harmonic in site.harmonics:
        print(site.site_name, harmonic.freq, harmonic.amp_cos, harmonic.amp_sin)
```

Extrapolating coordinates from estimates you have built:

```python
from sinexkit.estimates import linear_extrapolate_coordinates
from sinexkit.records import SolutionEstimate

site = sites[0]
epoch = datetime(2010, 1, 1)
estimates = [
    SolutionEstimate(name, site.site_code, site.point_code, "1", epoch, value)
    for name, value in [
        ("STAX", 4595212.0), ("VELX", -0.01),
        ("STAY", 2039473.0), ("VELY", 0.02),
        ("STAZ", 3912627.0), ("VELZ", 0.01),
    ]
]
for crd in linear_extrapolate_coordinates([site], t, estimates):
    print(crd.site.site_code, crd.x, crd.y, crd.z)
```

## What the package does not do

- `Sinex` does not parse the `SOLUTION/ESTIMATE` or `SOLUTION/EPOCHS`
  blocks; `SolutionEstimate` and `SolutionEpoch` records must be built by the
  caller (for example from `Sinex.block_lines`) before they are filtered or
  extrapolated.
- `SitePsdModel` only stores post-seismic deformation terms; it does not
  evaluate the model, and there is no reader for DPOD PSD correction files.
- There is no command-line tool and nothing is written back to SINEX files.