import pytest

from dvbtune.repetition import RepetitionCorrector, crc_check

# CRC-32/MPEG-2 check value of "123456789".
GOOD = b"123456789" + bytes.fromhex("0376E6E7")


def flip(data: bytes, byte_pos: int, bit: int) -> bytes:
    changed = bytearray(data)
    changed[byte_pos] ^= 1 << bit
    return bytes(changed)


def test_crc_check_accepts_valid_section():
    assert crc_check(GOOD) is True


def test_crc_check_rejects_corrupted_section():
    assert crc_check(flip(GOOD, 3, 2)) is False


def test_first_copy_cannot_be_corrected():
    corrector = RepetitionCorrector()
    assert corrector.attempt_correction(GOOD) is None


def test_second_identical_copy_is_confirmed():
    corrector = RepetitionCorrector()
    corrector.attempt_correction(GOOD)
    assert corrector.attempt_correction(GOOD) == GOOD


def test_majority_vote_recovers_original():
    corrector = RepetitionCorrector()
    copies = [flip(GOOD, 0, 1), flip(GOOD, 4, 5), flip(GOOD, 7, 0)]
    assert corrector.attempt_correction(copies[0]) is None
    assert corrector.attempt_correction(copies[1]) is None
    assert corrector.attempt_correction(copies[2]) == GOOD


def test_tie_leaves_buffer_too_fuzzy_then_resolves():
    corrector = RepetitionCorrector()
    corrector.attempt_correction(GOOD)
    assert corrector.attempt_correction(flip(GOOD, 2, 3)) is None
    assert corrector.attempt_correction(GOOD) == GOOD


def test_bad_crc_is_not_reported_as_corrected():
    bad = flip(GOOD, 1, 6)
    corrector = RepetitionCorrector()
    corrector.attempt_correction(bad)
    assert corrector.attempt_correction(bad) is None


def test_reset_forgets_collected_copies():
    corrector = RepetitionCorrector()
    corrector.attempt_correction(GOOD)
    corrector.reset()
    assert corrector.attempt_correction(GOOD) is None
    assert corrector.attempt_correction(GOOD) == GOOD


def test_different_lengths_are_kept_apart():
    corrector = RepetitionCorrector()
    corrector.attempt_correction(GOOD)
    assert corrector.attempt_correction(b"\x00" + GOOD) is None
    assert corrector.attempt_correction(GOOD) == GOOD


def test_too_short_data_is_rejected():
    with pytest.raises(ValueError):
        RepetitionCorrector().attempt_correction(b"\x01\x02")