"""Standard LNB types and decoding of LNB specifications."""

from __future__ import annotations

import string
from dataclasses import dataclass

_SPACE = " \t\n\v\f\r"
_DIGITS = string.digits
_HEX_DIGITS = string.hexdigits
_OCT_DIGITS = "01234567"


@dataclass(frozen=True)
class LnbType:
    """Local oscillator settings of an LNB, in MHz.

    A zero high_val or switch_val means the LNB has no high band.
    """

    name: str | None
    desc: tuple[str, ...]
    low_val: int
    high_val: int = 0
    switch_val: int = 0


_LNBS: tuple[LnbType, ...] = (
    LnbType(
        "UNIVERSAL",
        (
            "Europe",
            "10800 to 11800 MHz and 11600 to 12700 Mhz",
            "Dual LO, loband 9750, hiband 10600 MHz",
        ),
        9750,
        10600,
        11700,
    ),
    LnbType("DBS", ("Expressvu, North America", "12200 to 12700 MHz", "Single LO, 11250 MHz"), 11250),
    LnbType("STANDARD", ("10945 to 11450 Mhz", "Single LO, 10000 Mhz"), 10000),
    LnbType("ENHANCED", ("Astra", "10700 to 11700 MHz", "Single LO, 9750 MHz"), 9750),
    LnbType("C-BAND", ("Big Dish - Monopoint LNBf", "3700 to 4200 MHz", "Single LO, 5150 Mhz"), 5150),
    LnbType(
        "C-MULTI",
        ("Big Dish - Multipoint LNBf", "3700 to 4200 MHz", "Dual LO, 5150/5750 Mhz"),
        5150,
        5750,
    ),
    LnbType(
        "AUSTRALIA",
        ("Australia Single LO LNB", "11700 to 12750 MHz", "Single LO, 10700 MHz"),
        10700,
        11700,
        12750,
    ),
)


def lnb_types() -> tuple[LnbType, ...]:
    """Return all standard LNB types."""
    return _LNBS


def lnb_enum(index: int) -> LnbType | None:
    """Return the standard LNB type at index, or None past the end."""
    if 0 <= index < len(_LNBS):
        return _LNBS[index]
    return None


def _strtoul(text: str) -> tuple[int, str]:
    """Parse a leading unsigned number with automatic base; return value and rest."""
    if text[:2] in ("0x", "0X") and len(text) > 2 and text[2] in _HEX_DIGITS:
        base, digits, pos = 16, _HEX_DIGITS, 2
    elif text[:1] == "0":
        base, digits, pos = 8, _OCT_DIGITS, 0
    else:
        base, digits, pos = 10, _DIGITS, 0
    end = pos
    while end < len(text) and text[end] in digits:
        end += 1
    return int(text[pos:end], base), text[end:]


def _skip_separators(text: str) -> str:
    return text.lstrip(_SPACE + ",")


def lnb_decode(text: str) -> LnbType:
    """Decode an LNB given by standard name or as "low[,high[,switch]]".

    Raises ValueError if the text cannot be decoded.
    """
    rest = text.lstrip(_SPACE)
    if rest[:1] and rest[0] in string.ascii_letters:
        wanted = rest.upper()
        for lnb in _LNBS:
            if lnb.name == wanted:
                return lnb
        raise ValueError(f"unknown LNB type {text!r}")
    if not rest or rest[0] not in _DIGITS:
        raise ValueError(f"invalid LNB specification {text!r}")

    low, rest = _strtoul(rest)
    if low == 0:
        raise ValueError(f"invalid LNB low frequency in {text!r}")
    rest = _skip_separators(rest)
    if not rest:
        return LnbType(None, (), low)
    if rest[0] not in _DIGITS:
        raise ValueError(f"invalid LNB specification {text!r}")

    high, rest = _strtoul(rest)
    rest = _skip_separators(rest)
    if not rest:
        return LnbType(None, (), low, high)
    if rest[0] not in _DIGITS:
        raise ValueError(f"invalid LNB specification {text!r}")

    switch, _ = _strtoul(rest)
    return LnbType(None, (), low, high, switch)