import pytest

from dvbtune.lnb import LnbType, lnb_decode, lnb_enum, lnb_types


def test_enum_first_is_universal():
    lnb = lnb_enum(0)
    assert lnb.name == "UNIVERSAL"
    assert (lnb.low_val, lnb.high_val, lnb.switch_val) == (9750, 10600, 11700)


def test_enum_walks_all_then_none():
    names = []
    index = 0
    while (lnb := lnb_enum(index)) is not None:
        names.append(lnb.name)
        index += 1
    assert names == [t.name for t in lnb_types()]
    assert "C-MULTI" in names
    assert lnb_enum(len(lnb_types())) is None


def test_decode_name_case_insensitive():
    assert lnb_decode("Universal") is lnb_enum(0)
    assert lnb_decode("  c-band").low_val == 5150


def test_decode_name_with_trailing_space_fails():
    with pytest.raises(ValueError):
        lnb_decode("universal ")


def test_decode_unknown_name():
    with pytest.raises(ValueError):
        lnb_decode("nonsense")


def test_decode_triple():
    assert lnb_decode("9750,10600,11700") == LnbType(None, (), 9750, 10600, 11700)


def test_decode_single_and_spaces():
    lnb = lnb_decode(" 10750")
    assert (lnb.low_val, lnb.high_val, lnb.switch_val) == (10750, 0, 0)
    assert lnb_decode("9750 , 10600").high_val == 10600


def test_decode_hex_value():
    assert lnb_decode("0x2616").low_val == 9750


def test_decode_trailing_garbage_after_switch_ignored():
    assert lnb_decode("9750,10600,11700junk").switch_val == 11700


@pytest.mark.parametrize("text", ["", "   ", "0", "9750,x", "9750abc", "-5", "9750,10600,x"])
def test_decode_errors(text):
    with pytest.raises(ValueError):
        lnb_decode(text)


def test_decoded_custom_has_no_name():
    lnb = lnb_decode("5150,5750")
    assert lnb.name is None
    assert lnb.desc == ()