"""Tuning and service information data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

AUDIO_CHAN_MAX = 32
AC3_CHAN_MAX = 32
CA_SYSTEM_ID_MAX = 16
SUBTITLES_MAX = 32
CELL_CENTER_FREQUENCIES_MAX = 6
CELL_TRANSPOSERS_MAX = 16


class Polarization(IntEnum):
    """Satellite polarisation (satellite delivery system descriptor)."""

    HORIZONTAL = 0
    VERTICAL = 1
    CIRCULAR_LEFT = 2
    CIRCULAR_RIGHT = 3


class WestEastFlag(IntEnum):
    """Orbital position direction."""

    EAST = 0
    WEST = 1


class Interleave(IntEnum):
    """Terrestrial interleaver mode."""

    NATIVE = 0
    IN_DEPTH = 1
    AUTO = 2


class Alpha(IntEnum):
    """Terrestrial hierarchy alpha value."""

    ALPHA_1 = 0
    ALPHA_2 = 1
    ALPHA_4 = 2
    AUTO = 3


class SisoMiso(IntEnum):
    """Single or multiple input, single output."""

    SISO = 0
    MISO = 1
    RESERVED1 = 2
    RESERVED2 = 3


class FrequencyType(IntEnum):
    """Meaning of a DVB-C2 tuning frequency."""

    DATA_SLICE_TUNING_FREQUENCY = 0
    C2_SYSTEM_CENTER_FREQUENCY = 1
    INITIAL_TUNING_FOR_STATIC_DATA_SLICE = 2


class OfdmSymbolDuration(IntEnum):
    """Active OFDM symbol duration for DVB-C2."""

    FFT_4K_8MHZ = 0
    FFT_4K_6MHZ = 1


class ScanType(IntEnum):
    """Physical path of a scan."""

    UNDEFINED = 0
    SATELLITE = 1
    CABLE = 2
    TERRESTRIAL = 3
    TERRCABLE_ATSC = 4


def _check_len(name: str, values: list, limit: int) -> None:
    if len(values) > limit:
        raise ValueError(f"{name}: at most {limit} entries allowed, got {len(values)}")


def _check_parallel(*named: tuple[str, list]) -> None:
    lengths = {len(values) for _, values in named}
    if len(lengths) > 1:
        names = ", ".join(name for name, _ in named)
        raise ValueError(f"{names} must have equal lengths")


@dataclass
class Transposer:
    """A transposer of a terrestrial cell."""

    cell_id_extension: int = 0
    transposer_frequency: int = 0


@dataclass
class Cell:
    """A DVB-T/T2 cell with its centre frequencies and transposers."""

    cell_id: int = 0
    center_frequencies: list[int] = field(default_factory=list)
    transposers: list[Transposer] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_len("center_frequencies", self.center_frequencies, CELL_CENTER_FREQUENCIES_MAX)
        _check_len("transposers", self.transposers, CELL_TRANSPOSERS_MAX)


@dataclass
class Service:
    """A service (programme) carried by a transponder."""

    transport_stream_id: int = 0
    service_id: int = 0
    provider_name: str | None = None
    provider_short_name: str | None = None
    service_name: str | None = None
    service_short_name: str | None = None
    pmt_pid: int = 0
    pcr_pid: int = 0
    video_pid: int = 0
    video_stream_type: int = 0
    audio_pid: list[int] = field(default_factory=list)
    audio_stream_type: list[int] = field(default_factory=list)
    audio_lang: list[str] = field(default_factory=list)
    ca_id: list[int] = field(default_factory=list)
    teletext_pid: int = 0
    subtitling_pid: list[int] = field(default_factory=list)
    subtitling_lang: list[str] = field(default_factory=list)
    subtitling_type: list[int] = field(default_factory=list)
    composition_page_id: list[int] = field(default_factory=list)
    ancillary_page_id: list[int] = field(default_factory=list)
    ac3_pid: list[int] = field(default_factory=list)
    ac3_stream_type: list[int] = field(default_factory=list)
    ac3_lang: list[str] = field(default_factory=list)
    type: int = 0
    scrambled: bool = False
    visible_service: bool = True
    logical_channel_number: int = 0
    running: int = 0
    transponder: Transponder | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_len("audio_pid", self.audio_pid, AUDIO_CHAN_MAX)
        _check_parallel(
            ("audio_pid", self.audio_pid),
            ("audio_stream_type", self.audio_stream_type),
            ("audio_lang", self.audio_lang),
        )
        _check_len("ca_id", self.ca_id, CA_SYSTEM_ID_MAX)
        _check_len("subtitling_pid", self.subtitling_pid, SUBTITLES_MAX)
        _check_parallel(
            ("subtitling_pid", self.subtitling_pid),
            ("subtitling_lang", self.subtitling_lang),
            ("subtitling_type", self.subtitling_type),
            ("composition_page_id", self.composition_page_id),
            ("ancillary_page_id", self.ancillary_page_id),
        )
        _check_len("ac3_pid", self.ac3_pid, AC3_CHAN_MAX)
        _check_parallel(
            ("ac3_pid", self.ac3_pid),
            ("ac3_stream_type", self.ac3_stream_type),
            ("ac3_lang", self.ac3_lang),
        )
        for lang in (*self.audio_lang, *self.subtitling_lang, *self.ac3_lang):
            if len(lang) > 3:
                raise ValueError(f"language code {lang!r} longer than 3 characters")
        if not 0 <= self.type <= 0xFF:
            raise ValueError(f"service type {self.type} out of range")


@dataclass
class Transponder:
    """A transponder with its tuning parameters and network information.

    Frequencies are in Hz, except for satellite where they are in kHz.
    """

    frequency: int = 0
    inversion: int = 0
    symbolrate: int = 0
    bandwidth: int = 0
    orbital_position: int = 0
    input_stream_identifier: int = 0
    delsys: int = 0
    polarization: Polarization = Polarization.HORIZONTAL
    modulation: int = 0
    pilot: int = 0
    coderate: int = 0
    coderate_lp: int = 0
    guard: int = 0
    rolloff: int = 0
    transmission: int = 0
    west_east_flag: WestEastFlag = WestEastFlag.EAST
    hierarchy: int = 0
    time_slicing: int = 0
    scrambling_sequence_index: int = 0
    scrambling_sequence_selector: bool = False
    multiple_input_stream_flag: bool = False
    c2_tuning_frequency_type: FrequencyType = FrequencyType.DATA_SLICE_TUNING_FREQUENCY
    active_ofdm_symbol_duration: OfdmSymbolDuration = OfdmSymbolDuration.FFT_4K_8MHZ
    alpha: Alpha = Alpha.ALPHA_1
    terr_interleaver: Interleave = Interleave.NATIVE
    priority: bool = False
    mpe_fec: bool = False
    extended_info: bool = False
    siso_miso: SisoMiso = SisoMiso.SISO
    locks_with_params: bool = False
    tfs_flag: bool = False
    other_frequency_flag: bool = False
    last_tuning_failed: bool = False
    type: ScanType = ScanType.UNDEFINED
    source: int = 0
    system_id: int = 0
    plp_id: int = 0
    data_slice_id: int = 0
    network_pid: int = 0
    network_id: int = 0
    original_network_id: int = 0
    transport_stream_id: int = 0
    network_name: str | None = None
    network_change: int = 0
    services: list[Service] = field(default_factory=list)
    cells: list[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.polarization = Polarization(self.polarization)
        self.west_east_flag = WestEastFlag(self.west_east_flag)
        self.c2_tuning_frequency_type = FrequencyType(self.c2_tuning_frequency_type)
        self.active_ofdm_symbol_duration = OfdmSymbolDuration(self.active_ofdm_symbol_duration)
        self.alpha = Alpha(self.alpha)
        self.terr_interleaver = Interleave(self.terr_interleaver)
        self.siso_miso = SisoMiso(self.siso_miso)
        self.type = ScanType(self.type)
        if not 0 <= self.time_slicing <= 2:
            raise ValueError(f"time_slicing {self.time_slicing} out of range 0..2")
        if not 0 <= self.scrambling_sequence_index < (1 << 18):
            raise ValueError("scrambling_sequence_index does not fit in 18 bits")
        if not 0 <= self.orbital_position <= 0x1800:
            raise ValueError(f"orbital_position {self.orbital_position:#x} out of range")
        if not 0 <= self.input_stream_identifier <= 0xFF:
            raise ValueError("input_stream_identifier does not fit in 8 bits")
        if not 0 <= self.plp_id <= 0xFF:
            raise ValueError("plp_id does not fit in 8 bits")
        if not 0 <= self.data_slice_id <= 0xFF:
            raise ValueError("data_slice_id does not fit in 8 bits")
        if not 0 <= self.system_id <= 0xFFFF:
            raise ValueError("system_id does not fit in 16 bits")


@dataclass
class SatelliteChannelRouting:
    """Satellite channel routing (unicable) settings."""

    user_frequency: int = 0
    slot: int = 0
    pos: int = 0
    pin: int = 0
    offset: int = 0
    norm: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.user_frequency <= 0xFFFF:
            raise ValueError("user_frequency does not fit in 16 bits")
        if not 0 <= self.slot <= 0xFF:
            raise ValueError("slot does not fit in 8 bits")
        if not 0 <= self.pos <= 0xFF:
            raise ValueError("pos does not fit in 8 bits")
        if not 0 <= self.pin <= 0xFFFF:
            raise ValueError("pin does not fit in 16 bits")
        if not -128 <= self.offset <= 127:
            raise ValueError("offset does not fit in a signed byte")
        if not 0 <= self.norm <= 0xFF:
            raise ValueError("norm does not fit in 8 bits")