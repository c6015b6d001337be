"""
Stormie package
===============

This package contains the Storm Impact Engine (stormie).

- The CLI entry point is in `stormie/cli.py`.
- Damage magnitude normalization is in `stormie/magnitude.py`.
- Group-by / top-N aggregation is in `stormie/aggregate.py`.
- The four-table pipeline (health + economic impact) is in `stormie/engine.py`.
- Dataset loading is in `stormie/loader.py`.
"""

__version__ = '0.1.0'
