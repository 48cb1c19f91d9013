"""Repetition error correction: infer correct data from several noisy copies."""

from __future__ import annotations

from dataclasses import dataclass, field

CRC_LENGTH = 4
BITS_PER_BYTE = 8
_MISMATCH_LIMIT_PERCENT = 10


def _make_crc_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 24
        for _ in range(8):
            if crc & 0x80000000:
                crc = ((crc << 1) ^ 0x04C11DB7) & 0xFFFFFFFF
            else:
                crc = (crc << 1) & 0xFFFFFFFF
        table.append(crc)
    return tuple(table)


_CRC_TABLE = _make_crc_table()


def _crc32_mpeg(data: bytes) -> int:
    crc = 0xFFFFFFFF
    for byte in data:
        crc = ((crc << 8) & 0xFFFFFFFF) ^ _CRC_TABLE[((crc >> 24) ^ byte) & 0xFF]
    return crc


def crc_check(data: bytes) -> bool:
    """Tell whether a section, including its trailing CRC32, is intact."""
    return _crc32_mpeg(data) == 0


def _bits(data: bytes):
    """Yield the bits of data, most significant bit of each byte first."""
    for byte in data:
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


@dataclass
class _FuzzyBuf:
    """Per-bit balance counts of all copies seen of one buffer."""

    length: int
    counts: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.counts:
            self.counts = [0] * (self.length * BITS_PER_BYTE)

    def adjust(self, data: bytes) -> None:
        for pos, bit in enumerate(_bits(data)):
            self.counts[pos] += 1 if bit else -1

    def matches(self, data: bytes) -> bool:
        """Compare the CRC part of data with the current opinion on it."""
        if len(data) != self.length:
            return False
        tail_counts = self.counts[-CRC_LENGTH * BITS_PER_BYTE:]
        mismatches = sum(
            1
            for count, bit in zip(tail_counts, _bits(data[-CRC_LENGTH:]))
            if (count < 0 and bit) or (count > 0 and not bit)
        )
        percent = 100 * mismatches // (CRC_LENGTH * BITS_PER_BYTE)
        return percent < _MISMATCH_LIMIT_PERCENT

    def too_fuzzy(self) -> bool:
        return any(count == 0 for count in self.counts)

    def guess(self) -> bytes:
        result = bytearray()
        for start in range(0, len(self.counts), BITS_PER_BYTE):
            value = 0
            for count in self.counts[start:start + BITS_PER_BYTE]:
                value = (value << 1) | (1 if count > 0 else 0)
            result.append(value)
        return bytes(result)


class RepetitionCorrector:
    """Collects noisy copies of sections and infers the correct data."""

    def __init__(self) -> None:
        self._buffers: list[_FuzzyBuf] = []

    def reset(self) -> None:
        """Forget all collected data, e.g. after tuning to another channel."""
        self._buffers.clear()

    def attempt_correction(self, data: bytes) -> bytes | None:
        """Add a copy of data and try to infer the correct content.

        Returns the corrected data if the inferred content passes the CRC
        check, otherwise None.
        """
        data = bytes(data)
        if len(data) < CRC_LENGTH:
            raise ValueError(f"data must hold at least {CRC_LENGTH} bytes")
        for fuzzy in self._buffers:
            if fuzzy.matches(data):
                fuzzy.adjust(data)
                if fuzzy.too_fuzzy():
                    return None
                guess = fuzzy.guess()
                return guess if crc_check(guess) else None
        fuzzy = _FuzzyBuf(len(data))
        fuzzy.adjust(data)
        self._buffers.append(fuzzy)
        return None