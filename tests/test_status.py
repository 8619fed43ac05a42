import pytest

from mos6502model.status import Flag, StatusRegister


def test_new_register_has_only_interrupt_disable():
    reg = StatusRegister()
    assert reg.interrupt_disable is True
    assert not any(
        (reg.carry, reg.zero, reg.decimal, reg.overflow, reg.negative)
    )
    assert reg.raw == Flag.INTERRUPT_DISABLE


def test_masked_with_brk_and_expansion_on_new():
    reg = StatusRegister()
    assert reg.masked_with_brk_and_expansion() == (
        Flag.INTERRUPT_DISABLE | Flag.BRK | Flag.EXPANSION
    )


def test_set_drops_brk_and_expansion():
    reg = StatusRegister()
    reg.set(0xFF)
    assert not reg.raw & Flag.BRK
    assert not reg.raw & Flag.EXPANSION
    assert reg.masked_with_brk_and_expansion() == 0xFF


def test_set_then_masked_round_trip():
    reg = StatusRegister()
    value = Flag.CARRY | Flag.NEGATIVE | Flag.BRK | Flag.EXPANSION
    reg.set(value)
    assert reg.masked_with_brk_and_expansion() == value
    assert reg.carry and reg.negative
    assert not reg.interrupt_disable


def test_carry_and_carry_value():
    reg = StatusRegister()
    assert reg.carry_value == 0
    reg.carry = True
    assert reg.carry is True
    assert reg.carry_value == 1
    reg.carry = False
    assert reg.carry is False
    assert reg.carry_value == 0


@pytest.mark.parametrize(
    "name, flag",
    [
        ("carry", Flag.CARRY),
        ("zero", Flag.ZERO),
        ("decimal", Flag.DECIMAL),
        ("overflow", Flag.OVERFLOW),
        ("negative", Flag.NEGATIVE),
        ("interrupt_disable", Flag.INTERRUPT_DISABLE),
    ],
)
def test_flag_setters_touch_only_their_bit(name, flag):
    reg = StatusRegister()
    before = reg.raw
    setattr(reg, name, True)
    assert getattr(reg, name) is True
    assert reg.raw == before | flag
    setattr(reg, name, False)
    assert getattr(reg, name) is False
    assert reg.raw == before & ~flag


@pytest.mark.parametrize("value, expected", [(0, True), (1, False), (0x80, False)])
def test_set_zero_from_value(value, expected):
    reg = StatusRegister()
    reg.set_zero_from_value(value)
    assert reg.zero is expected


@pytest.mark.parametrize("value, expected", [(0x80, True), (0xFF, True), (0x7F, False), (0, False)])
def test_set_negative_from_value(value, expected):
    reg = StatusRegister()
    reg.carry = True
    reg.set_negative_from_value(value)
    assert reg.negative is expected
    assert reg.carry is True


def test_repr_of_new_register():
    assert repr(StatusRegister()) == "[N=0,V=0,D=0,I:1,Z:0,C:0]"


def test_repr_reflects_flags():
    reg = StatusRegister()
    reg.set(0xFF)
    assert repr(reg) == "[N=1,V=1,D=1,I:1,Z:1,C:1]"


def test_equality_follows_flags():
    a = StatusRegister()
    b = StatusRegister()
    assert a == b
    a.decimal = True
    assert not a == b