"""Satellite definitions and lookups."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from dvbtune.model import Polarization, WestEastFlag

_log = logging.getLogger(__name__)

UNKNOWN_NAME = "??"


@dataclass(frozen=True)
class SatelliteTransponder:
    """Stored tuning data of one satellite transponder."""

    modulation_system: int
    intermediate_frequency: int
    polarization: Polarization
    symbol_rate: int
    fec_inner: int
    rolloff: int
    modulation_type: int


@dataclass
class Satellite:
    """A satellite with its transponders and position data."""

    short_name: str
    id: int
    full_name: str
    items: tuple[SatelliteTransponder, ...] = ()
    west_east_flag: WestEastFlag = WestEastFlag.EAST
    orbital_position: int = 0
    rotor_position: int = 0
    source_id: str = ""
    skew: int = 0

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass
class SatelliteList:
    """An ordered collection of satellites with lookup helpers."""

    satellites: list[Satellite] = field(default_factory=list)

    def __init__(self, satellites: Iterable[Satellite] = ()) -> None:
        self.satellites = list(satellites)

    def __len__(self) -> int:
        return len(self.satellites)

    def __iter__(self) -> Iterator[Satellite]:
        return iter(self.satellites)

    def __getitem__(self, index: int) -> Satellite:
        return self.satellites[index]

    def _by_id(self, idx: int) -> Satellite | None:
        return next((sat for sat in self.satellites if sat.id == idx), None)

    def txt_to_satellite(self, name: str) -> int | None:
        """Return the id of the satellite with this short name, ignoring case."""
        wanted = name.casefold()
        for sat in self.satellites:
            if sat.short_name.casefold() == wanted:
                return sat.id
        return None

    def short_name(self, idx: int) -> str:
        """Return the short name of satellite idx, or "??" if unknown."""
        sat = self._by_id(idx)
        return sat.short_name if sat else UNKNOWN_NAME

    def full_name(self, idx: int) -> str:
        """Return the full name of satellite idx, or "??" if unknown."""
        sat = self._by_id(idx)
        if sat is None:
            _log.warning("Satellite code %s not defined. Please re-check whether you typed correctly.", idx)
            return UNKNOWN_NAME
        return sat.full_name

    def rotor_position_to_index(self, rotor_position: int) -> int:
        """Return the list index of the satellite at rotor_position, or 0."""
        return next(
            (i for i, sat in enumerate(self.satellites) if sat.rotor_position == rotor_position),
            0,
        )

    def choose(self, name: str, fallback: str = "S19E2") -> tuple[int, bool]:
        """Select a satellite by short name.

        Returns the satellite id and whether name was found; an unknown name
        falls back to the satellite named by fallback.
        """
        found = True
        sat_id = self.txt_to_satellite(name)
        if sat_id is None:
            found = False
            _log.warning("Satellite code %r is not defined. Falling back to %r.", name, fallback)
            sat_id = self.txt_to_satellite(fallback)
            if sat_id is None:
                raise KeyError(f"fallback satellite {fallback!r} is not defined")
        _log.info("using settings for %s", self.full_name(sat_id))
        return sat_id, found

    def lines(self) -> Iterator[str]:
        """Yield one listing line per satellite."""
        for sat in self.satellites:
            yield f"\t{sat.short_name}\t\t{sat.full_name}"