"""Rotor configuration and w_scan header flags from text files."""

from __future__ import annotations

import logging
import re
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from dvbtune.model import ScanType
from dvbtune.satellites import SatelliteList

_log = logging.getLogger(__name__)

_DELIMITERS = " \r\n\t"
_ROTOR_DELIMITERS = " \t=\r\n"
_SPLIT = re.compile(r"[ \r\n\t]+")
_LEADING_UINT = re.compile(r"\+?(\d+)")

# Source ids as used by VDR (satellite only).
ST_NONE = 0x0000
ST_SAT = 0x8000
ST_MASK = 0xC000
ST_NEG = 0x0800
ST_POS = 0x07FF

MAX_ROTOR_POSITION = 255

# States of the w_scan header parser.
_IGNORE, _VERSION, _TUNING_TIMEOUT, _FILTER_TIMEOUT, _FE_TYPE, _LIST_IDX = range(6)

# States of the rotor line parser.
(
    _ROTOR_POSITION,
    _SAT_ID,
    _END_OF_LINE,
    _READ_STOP,
    _PLUG_SAT_ID,
    _PLUG_ROTOR_POSITION,
    _PLUG_EOL,
) = range(7)


class RotorConfigError(ValueError):
    """Raised when rotor configuration data cannot be parsed."""


@dataclass
class WScanFlags:
    """Settings stored in the header line of an initial tuning data file."""

    version: str | None = None
    tuning_timeout: int = 0
    filter_timeout: int = 0
    scantype: ScanType = ScanType.UNDEFINED
    list_id: int = 0
    need_2g_fe: bool = False


def _tokens(text: str) -> list[str]:
    return [token for token in _SPLIT.split(text) if token]


def _leading_uint(token: str) -> int:
    match = _LEADING_UINT.match(token)
    return int(match.group(1)) if match else 0


def vdr_code_from_token(token: str) -> int:
    """Convert a satellite source token such as "S19.2E" to a VDR source id."""
    if not token or token[0].upper() != "S":
        raise RotorConfigError(f"could not parse source {token!r}")
    code = ST_SAT
    pos = 0
    dot = False
    neg = False
    for char in token[1:]:
        upper = char.upper()
        if upper in string.digits:
            pos = pos * 10 + int(upper)
        elif upper == ".":
            dot = True
        elif upper in ("E", "W"):
            if upper == "E":
                neg = True
            if not dot:
                pos *= 10
        else:
            raise RotorConfigError(f"unknown source character {char!r} in {token!r}")
    if neg:
        pos |= ST_NEG
    return code | pos


def vdr_source_to_str(code: int) -> str:
    """Convert a VDR source id back to its channels.conf notation."""
    if code & ST_MASK == ST_SAT:
        pos = code & ~ST_MASK & ~ST_NEG
        whole, tenth = divmod(pos, 10)
        degrees = f"{whole}.{tenth}" if tenth else f"{whole}"
        return f"S{degrees}{'E' if code & ST_NEG else 'W'}"
    return chr((code + ord("0")) & 0xFF)


def parse_w_scan_flags(line: str, scantype_from_text: Callable[[str], ScanType]) -> WScanFlags:
    """Read the settings of a "#! <w_scan> ... </w_scan>" header line.

    The first token of the line is the comment marker and is skipped.
    """
    flags = WScanFlags()
    tokens = _tokens(line)
    state = _IGNORE
    for token in tokens[1:]:
        lowered = token.lower()
        if lowered == "<w_scan>":
            state = _VERSION
            continue
        if lowered == "</w_scan>":
            state = _IGNORE
            continue
        current = state
        state += 1
        if current == _VERSION:
            flags.version = token
        elif current == _TUNING_TIMEOUT:
            flags.tuning_timeout = _leading_uint(token)
        elif current == _FILTER_TIMEOUT:
            flags.filter_timeout = _leading_uint(token)
        elif current == _FE_TYPE:
            flags.scantype = scantype_from_text(token)
        elif current == _LIST_IDX:
            flags.list_id = _leading_uint(token)
    return flags


def _first_token(line: str) -> tuple[str, str] | None:
    """Split off the first token using the rotor delimiters; return it and the rest."""
    start = 0
    while start < len(line) and line[start] in _ROTOR_DELIMITERS:
        start += 1
    if start == len(line):
        return None
    end = start
    while end < len(line) and line[end] not in _ROTOR_DELIMITERS:
        end += 1
    return line[start:end], line[end + 1:]


def parse_rotor_positions(
    lines: Iterable[str],
    satellites: SatelliteList,
    name_to_short: Callable[[str], str | None],
) -> list[tuple[int, str]]:
    """Read rotor positions and store them in the matching satellites.

    Accepts lines of the form "R <position> <satellite id>" as well as
    "S19.2E = <position>"; name_to_short maps a source name such as
    "S19.2E" to a satellite short name. Returns the (position, short name)
    pairs that were assigned, in file order.
    """
    assigned: list[tuple[int, str]] = []
    state = _END_OF_LINE
    position = 0
    sat_name: str | None = None

    for line in lines:
        first = _first_token(line)
        if first is None:
            continue
        token, rest = first
        lead = token[0].upper()
        if lead == "R":
            state = _ROTOR_POSITION
        elif lead == "S":
            sat_name = name_to_short(vdr_source_to_str(vdr_code_from_token(token)))
            state = _PLUG_ROTOR_POSITION
        elif lead == "#":
            continue
        else:
            raise RotorConfigError(f"could not parse line {line!r}")

        for token in _tokens(rest):
            current = state
            state += 1
            if current in (_ROTOR_POSITION, _PLUG_ROTOR_POSITION):
                if current == _PLUG_ROTOR_POSITION and token == "=":
                    state -= 1
                    continue
                if token[0] in string.digits:
                    position = _leading_uint(token)
                    if position < 1:
                        continue
                elif token[0] == "-":
                    position = -1
                    state = _END_OF_LINE
                    continue
                else:
                    raise RotorConfigError(f"could not parse line {line!r}")
                if current == _ROTOR_POSITION:
                    sat_name = token
                else:
                    state = _END_OF_LINE
            elif current == _SAT_ID:
                sat_name = token
            else:
                state = _END_OF_LINE
            if state in (_READ_STOP, _END_OF_LINE):
                break

        if position > 0:
            sat_id = satellites.txt_to_satellite(sat_name) if sat_name else None
            if sat_id is None:
                raise RotorConfigError(f"satellite ID {sat_name!r} not defined in line {line!r}")
            if position > MAX_ROTOR_POSITION:
                raise RotorConfigError(f"invalid satellite position {position} in line {line!r}")
            for satellite in satellites:
                if satellite.id == sat_id:
                    satellite.rotor_position = position
                    break
            assigned.append((position, sat_name))
            _log.info("rotor position %3d = %6s", position, sat_name)

    if not assigned:
        raise RotorConfigError("unexpected end of file: no rotor positions found")
    return assigned