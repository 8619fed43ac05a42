"""The processor status register."""

from __future__ import annotations

from enum import IntFlag


class Flag(IntFlag):
    """Bits of the processor status register."""

    CARRY = 1 << 0
    ZERO = 1 << 1
    INTERRUPT_DISABLE = 1 << 2
    DECIMAL = 1 << 3
    BRK = 1 << 4
    EXPANSION = 1 << 5
    OVERFLOW = 1 << 6
    NEGATIVE = 1 << 7


# BRK and EXPANSION only exist on the copy pushed to the stack.
_MASK = 0xFF ^ int(Flag.BRK | Flag.EXPANSION)


class StatusRegister:
    """Processor flags, stored without the BRK and expansion bits."""

    __slots__ = ("_raw",)

    def __init__(self) -> None:
        self._raw = int(Flag.INTERRUPT_DISABLE)

    def __repr__(self) -> str:
        return (
            f"[N={int(self.negative)},V={int(self.overflow)},"
            f"D={int(self.decimal)},I:{int(self.interrupt_disable)},"
            f"Z:{int(self.zero)},C:{int(self.carry)}]"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusRegister):
            return NotImplemented
        return self._raw == other._raw

    __hash__ = None  # type: ignore[assignment]

    @property
    def raw(self) -> int:
        """The stored flag byte."""
        return self._raw

    def masked_with_brk_and_expansion(self) -> int:
        """The flag byte with BRK and expansion bits set, as pushed to the stack."""
        return self._raw | int(Flag.BRK | Flag.EXPANSION)

    def set(self, value: int) -> None:
        """Load all flags from a byte, dropping BRK and expansion bits."""
        self._raw = value & _MASK

    def _get(self, flag: Flag) -> bool:
        return bool(self._raw & flag)

    def _put(self, flag: Flag, on: bool) -> None:
        if on:
            self._raw |= int(flag)
        else:
            self._raw &= 0xFF ^ int(flag)

    @property
    def carry(self) -> bool:
        return self._get(Flag.CARRY)

    @carry.setter
    def carry(self, on: bool) -> None:
        self._put(Flag.CARRY, on)

    @property
    def carry_value(self) -> int:
        """The carry flag as 0 or 1."""
        return self._raw & Flag.CARRY

    @property
    def decimal(self) -> bool:
        return self._get(Flag.DECIMAL)

    @decimal.setter
    def decimal(self, on: bool) -> None:
        self._put(Flag.DECIMAL, on)

    @property
    def zero(self) -> bool:
        return self._get(Flag.ZERO)

    @zero.setter
    def zero(self, on: bool) -> None:
        self._put(Flag.ZERO, on)

    @property
    def overflow(self) -> bool:
        return self._get(Flag.OVERFLOW)

    @overflow.setter
    def overflow(self, on: bool) -> None:
        self._put(Flag.OVERFLOW, on)

    @property
    def negative(self) -> bool:
        return self._get(Flag.NEGATIVE)

    @negative.setter
    def negative(self, on: bool) -> None:
        self._put(Flag.NEGATIVE, on)

    @property
    def interrupt_disable(self) -> bool:
        return self._get(Flag.INTERRUPT_DISABLE)

    @interrupt_disable.setter
    def interrupt_disable(self, on: bool) -> None:
        self._put(Flag.INTERRUPT_DISABLE, on)

    def set_zero_from_value(self, value: int) -> None:
        """Set the zero flag if the byte is zero, clear it otherwise."""
        self.zero = (value & 0xFF) == 0

    def set_negative_from_value(self, value: int) -> None:
        """Copy bit 7 of the byte into the negative flag."""
        self.negative = bool(value & Flag.NEGATIVE)