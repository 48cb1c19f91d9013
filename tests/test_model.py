import pytest

from dvbtune.model import (
    Alpha,
    Cell,
    FrequencyType,
    Interleave,
    OfdmSymbolDuration,
    Polarization,
    SatelliteChannelRouting,
    ScanType,
    Service,
    SisoMiso,
    Transponder,
    Transposer,
    WestEastFlag,
)


def test_enum_values_follow_descriptor_order():
    assert Polarization(1) is Polarization.VERTICAL
    assert Polarization(3) is Polarization.CIRCULAR_RIGHT
    assert WestEastFlag(1) is WestEastFlag.WEST
    assert Interleave(2) is Interleave.AUTO
    assert Alpha(3) is Alpha.AUTO
    assert SisoMiso(1) is SisoMiso.MISO
    assert FrequencyType(2) is FrequencyType.INITIAL_TUNING_FOR_STATIC_DATA_SLICE
    assert OfdmSymbolDuration(1) is OfdmSymbolDuration.FFT_4K_6MHZ
    assert ScanType(4) is ScanType.TERRCABLE_ATSC


def test_transponder_coerces_enum_fields():
    tp = Transponder(polarization=1, type=2, west_east_flag=1)
    assert tp.polarization is Polarization.VERTICAL
    assert tp.type is ScanType.CABLE
    assert tp.west_east_flag is WestEastFlag.WEST


def test_transponder_rejects_unknown_enum_value():
    with pytest.raises(ValueError):
        Transponder(polarization=7)


def test_transponder_lists_are_independent():
    a = Transponder()
    b = Transponder()
    a.services.append(Service(service_id=5))
    assert b.services == []
    assert a.services[0].service_id == 5


def test_transponder_range_checks():
    with pytest.raises(ValueError):
        Transponder(orbital_position=0x1801)
    with pytest.raises(ValueError):
        Transponder(time_slicing=3)
    with pytest.raises(ValueError):
        Transponder(scrambling_sequence_index=1 << 18)
    with pytest.raises(ValueError):
        Transponder(plp_id=256)


def test_cell_limits():
    cell = Cell(cell_id=1, center_frequencies=[1, 2, 3, 4, 5, 6])
    assert len(cell.center_frequencies) == 6
    with pytest.raises(ValueError):
        Cell(center_frequencies=list(range(7)))
    with pytest.raises(ValueError):
        Cell(transposers=[Transposer() for _ in range(17)])


def test_service_parallel_lists_must_match():
    svc = Service(audio_pid=[100, 101], audio_stream_type=[3, 4], audio_lang=["deu", "eng"])
    assert svc.audio_pid == [100, 101]
    with pytest.raises(ValueError):
        Service(audio_pid=[100], audio_stream_type=[], audio_lang=[])


def test_service_limits():
    with pytest.raises(ValueError):
        Service(ca_id=list(range(17)))
    with pytest.raises(ValueError):
        Service(audio_pid=[1], audio_stream_type=[1], audio_lang=["long"])
    with pytest.raises(ValueError):
        Service(type=256)


def test_service_transponder_link_ignored_in_equality():
    tp = Transponder(frequency=474000000)
    assert Service(service_id=3, transponder=tp) == Service(service_id=3)


def test_satellite_channel_routing_ranges():
    scr = SatelliteChannelRouting(user_frequency=1210, slot=1, offset=-2, norm=1)
    assert scr.offset == -2
    with pytest.raises(ValueError):
        SatelliteChannelRouting(offset=200)
    with pytest.raises(ValueError):
        SatelliteChannelRouting(user_frequency=70000)