"""Read SINEX solution files and DPOD harmonic correction data."""

__version__ = "1.1.0"