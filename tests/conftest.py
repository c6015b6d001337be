"""
Shared pytest fixtures for the stormie test suite.
"""

import itertools

import pytest

from stormie.models import StormEvent


@pytest.fixture
def create_event():
    """
    Return a function that creates StormEvent objects with sensible defaults.

    Example:
        event = create_event("TORNADO", fatalities=5, prop_dmg=2.5, prop_dmg_exp="M")
    """
    ids = itertools.count()

    def _create_event(
        event_type: str = "TORNADO",
        fatalities=0,
        injuries=0,
        prop_dmg=0.0,
        prop_dmg_exp: str = "",
        crop_dmg=0.0,
        crop_dmg_exp: str = "",
    ) -> StormEvent:
        return StormEvent(
            event_id=next(ids),
            event_type=event_type,
            fatalities=fatalities,
            injuries=injuries,
            prop_dmg=prop_dmg,
            prop_dmg_exp=prop_dmg_exp,
            crop_dmg=crop_dmg,
            crop_dmg_exp=crop_dmg_exp,
        )

    return _create_event


@pytest.fixture
def storm_csv(tmp_path):
    """A small storm events CSV with the columns of the NOAA export."""
    path = tmp_path / "storms.csv"
    path.write_text(
        "STATE__,EVTYPE,FATALITIES,INJURIES,PROPDMG,PROPDMGEXP,CROPDMG,CROPDMGEXP\n"
        "1,TORNADO,5,15,25,K,0,\n"
        "1,TORNADO,0,2,2.5,M,0,\n"
        "2,FLOOD,1,3,100,K,5,M\n"
        "2,FLOOD,,,5,M,10,K\n"
        "3,   HIGH SURF ADVISORY,0,0,200,K,0,\n"
        "4,HAIL,0,1,10,0,3,?\n",
        encoding="utf-8",
    )
    return path
