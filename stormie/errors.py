"""Exceptions raised by stormie."""

from typing import Optional


class StormieError(Exception):
    """Base class for stormie errors."""


class UnmappedMagnitudeCode(StormieError, ValueError):
    """A damage magnitude code outside the known alphabet was encountered.

    `event_id` and `field` are filled in by the engine when the code came from
    a specific record; a bare `normalize()` call leaves them as None.
    """

    def __init__(self, code: object, event_id: Optional[int] = None, field: Optional[str] = None):
        self.code = code
        self.event_id = event_id
        self.field = field
        where = ""
        if event_id is not None:
            where = f" (event {event_id}, field {field})"
        super().__init__(f"Unmapped magnitude code {code!r}{where}")
