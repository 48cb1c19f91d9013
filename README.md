# dvbtune

Building blocks for DVB scanning tools, in plain Python with no
third-party dependencies.

## Modules

- `dvbtune.model` – enumerations for frontend parameters (`Polarization`,
  `WestEastFlag`, `Interleave`, `Alpha`, `SisoMiso`, `FrequencyType`,
  `OfdmSymbolDuration`, `ScanType`) and data classes `Transponder`,
  `Service`, `Cell`, `Transposer` and `SatelliteChannelRouting`. The data
  classes check their field ranges and list lengths on creation and raise
  `ValueError` when a value does not fit.
- `dvbtune.lnb` – the standard LNB types (`LnbType`, `lnb_types()`,
  `lnb_enum(index)`, which returns `None` past the end) and
  `lnb_decode(text)`, which accepts a type name such as `"universal"`
  (case-insensitive) or a `low[,high[,switch]]` triple in MHz, and raises
  `ValueError` on anything else.
- `dvbtune.charsets` – the tuple `ICONV_CODES` of known character set names,
  `iconv_codes_count()` and `is_known_charset(name)` (case-insensitive).
- `dvbtune.repetition` – `crc_check(data)` for sections ending in an MPEG
  CRC32, and `RepetitionCorrector`, which collects noisy copies of a section
  and infers its content by a per-bit majority vote.
- `dvbtune.satellites` – `SatelliteTransponder`, `Satellite` and
  `SatelliteList`, with lookups by short name (`txt_to_satellite`), by id
  (`short_name`, `full_name`, which return `"??"` when unknown) and by rotor
  position (`rotor_position_to_index`), plus `choose(name, fallback)` and
  `lines()` for a listing.
- `dvbtune.rotor` – VDR source id conversion (`vdr_code_from_token`,
  `vdr_source_to_str`), `parse_w_scan_flags` for `#! <w_scan> ... </w_scan>`
  header lines into `WScanFlags`, and `parse_rotor_positions`, which raises
  `RotorConfigError` on bad input.

## Installing

```
pip install .
```

## Examples

```python
from dvbtune.lnb import lnb_decode

lnb = lnb_decode("universal")
print(lnb.low_val, lnb.high_val, lnb.switch_val)   # 9750 10600 11700

custom = lnb_decode("10000,10750,11700")
```

```python
from dvbtune.rotor import vdr_code_from_token, vdr_source_to_str

code = vdr_code_from_token("S19.2E")
print(vdr_source_to_str(code))   # S19.2E
```

```python
from dvbtune.rotor import parse_rotor_positions
from dvbtune.satellites import Satellite, SatelliteList

satellites = SatelliteList([Satellite("S19E2", 0, "Astra 19.2E")])
assigned = parse_rotor_positions(["R 7 S19E2"], satellites, lambda name: None)
print(assigned)                           # [(7, 'S19E2')]
print(satellites[0].rotor_position)       # 7
```

```python
from dvbtune.repetition import RepetitionCorrector

corrector = RepetitionCorrector()
for copy in received_copies:   # bytes of the same section, each with its CRC
    corrected = corrector.attempt_correction(copy)
    if corrected is not None:
        break
corrector.reset()   # after tuning to another transponder
```

## What it does not do

The package does not talk to tuner hardware, tune, scan or read service
information from a transport stream, and it offers no command-line tool.
`SatelliteList` starts empty: no table of satellites or transponders is
included, so callers supply their own. Initial tuning data files are not
read; only their `#!` header line can be decoded with `parse_w_scan_flags`,
and the caller supplies the function that maps a frontend type name to a
`ScanType`.

## Running the tests

```
pip install .[test]
pytest
```