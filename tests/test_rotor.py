import pytest

from dvbtune.model import ScanType
from dvbtune.rotor import (
    ST_MASK,
    ST_NEG,
    ST_SAT,
    RotorConfigError,
    WScanFlags,
    parse_rotor_positions,
    parse_w_scan_flags,
    vdr_code_from_token,
    vdr_source_to_str,
)
from dvbtune.satellites import Satellite, SatelliteList

VDR_NAMES = {"S4.8E": "S4E8", "S19.2E": "S19E2", "S13E": "S13E0"}


def make_satellites():
    return SatelliteList(
        [
            Satellite("S4E8", 0, "Astra 4.8 east"),
            Satellite("S13E0", 1, "Hotbird 13.0 east"),
            Satellite("S19E2", 2, "Astra 19.2 east"),
        ]
    )


@pytest.mark.parametrize("token", ["S19.2E", "S4.8E", "S13E", "S30W", "S0.8W"])
def test_source_round_trip(token):
    assert vdr_source_to_str(vdr_code_from_token(token)) == token


def test_source_code_flags():
    east = vdr_code_from_token("S19.2E")
    west = vdr_code_from_token("S30W")
    assert east & ST_MASK == ST_SAT
    assert west & ST_MASK == ST_SAT
    assert east & ST_NEG == ST_NEG
    assert west & ST_NEG == 0


def test_source_whole_degrees_equal_tenths():
    assert vdr_code_from_token("S13E") == vdr_code_from_token("S13.0E")


def test_source_lower_case():
    assert vdr_source_to_str(vdr_code_from_token("s19.2e")) == "S19.2E"


@pytest.mark.parametrize("token", ["X19.2E", "S19,2E", ""])
def test_source_invalid(token):
    with pytest.raises(RotorConfigError):
        vdr_code_from_token(token)


def test_w_scan_flags():
    line = "#! <w_scan> 20170107 1 0 TERRESTRIAL DE </w_scan>\n"
    flags = parse_w_scan_flags(line, lambda text: ScanType[text])
    assert flags.version == "20170107"
    assert flags.tuning_timeout == 1
    assert flags.filter_timeout == 0
    assert flags.scantype == ScanType.TERRESTRIAL
    assert flags.list_id == 0


def test_w_scan_flags_numeric_list_id():
    line = "#! <w_scan> 20170107 2 3 CABLE 5 </w_scan>"
    flags = parse_w_scan_flags(line, lambda text: ScanType[text])
    assert (flags.tuning_timeout, flags.filter_timeout, flags.list_id) == (2, 3, 5)
    assert flags.scantype == ScanType.CABLE


def test_w_scan_flags_empty_line():
    assert parse_w_scan_flags("   \n", lambda text: ScanType[text]) == WScanFlags()


def test_rotor_wscan_format():
    sats = make_satellites()
    lines = ["# R <position> <satellite id>\n", "R    1   S4E8\n", "R    7   S19E2  # comment\n"]
    result = parse_rotor_positions(lines, sats, VDR_NAMES.get)
    assert result == [(1, "S4E8"), (7, "S19E2")]
    assert sats[0].rotor_position == 1
    assert sats[2].rotor_position == 7
    assert sats[1].rotor_position == 0
    assert sats.rotor_position_to_index(7) == 2


def test_rotor_plugin_format():
    sats = make_satellites()
    lines = ["S4.8E = 1\n", "S19.2E=7\n", "S13E = 3"]
    result = parse_rotor_positions(lines, sats, VDR_NAMES.get)
    assert result == [(1, "S4E8"), (7, "S19E2"), (3, "S13E0")]
    assert sats[1].rotor_position == 3


def test_rotor_skipped_positions():
    sats = make_satellites()
    lines = ["R - S4E8", "R 0 S13E0", "R 2 S19E2"]
    result = parse_rotor_positions(lines, sats, VDR_NAMES.get)
    assert result == [(2, "S19E2")]
    assert sats[0].rotor_position == 0


def test_rotor_unknown_satellite():
    with pytest.raises(RotorConfigError):
        parse_rotor_positions(["R 1 S99W9"], make_satellites(), VDR_NAMES.get)


def test_rotor_position_too_large():
    with pytest.raises(RotorConfigError):
        parse_rotor_positions(["R 256 S4E8"], make_satellites(), VDR_NAMES.get)


def test_rotor_bad_line():
    with pytest.raises(RotorConfigError):
        parse_rotor_positions(["X 1 S4E8"], make_satellites(), VDR_NAMES.get)


def test_rotor_bad_position():
    with pytest.raises(RotorConfigError):
        parse_rotor_positions(["R abc S4E8"], make_satellites(), VDR_NAMES.get)


def test_rotor_no_positions():
    with pytest.raises(RotorConfigError):
        parse_rotor_positions(["# nothing here\n", "\n"], make_satellites(), VDR_NAMES.get)