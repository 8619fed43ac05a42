"""Memory interfaces seen by the processor, and address helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod

STACK_ADDRESS_HI = 0x01
"""High byte of every stack address: the stack lives in page one."""


def address_from_lo_hi(lo: int, hi: int) -> int:
    """Build a 16-bit address from its low and high bytes."""
    return ((hi & 0xFF) << 8) | (lo & 0xFF)


def address_lo(address: int) -> int:
    """The low byte of a 16-bit address."""
    return address & 0xFF


def address_hi(address: int) -> int:
    """The high byte of a 16-bit address."""
    return (address >> 8) & 0xFF


class Memory(ABC):
    """Address space the processor reads and writes; reads may have side effects.

    Subclasses supply ``read_u8`` and ``write_u8``; the other accessors are
    built on top of them.
    """

    @abstractmethod
    def read_u8(self, address: int) -> int:
        """Read one byte at a 16-bit address."""

    @abstractmethod
    def write_u8(self, address: int, data: int) -> None:
        """Write one byte at a 16-bit address."""

    def read_u16_le(self, address: int) -> int:
        """Read a little-endian word; the second byte's address wraps at 0xFFFF."""
        lo = self.read_u8(address)
        hi = self.read_u8((address + 1) & 0xFFFF)
        return (hi << 8) | lo

    def read_u8_zero_page(self, address: int) -> int:
        """Read one byte from the zero page."""
        return self.read_u8(address & 0xFF)

    def read_u16_le_zero_page(self, address: int) -> int:
        """Read a little-endian word from the zero page, wrapping within it."""
        lo = self.read_u8_zero_page(address)
        hi = self.read_u8_zero_page((address + 1) & 0xFF)
        return (hi << 8) | lo

    def read_u8_stack(self, stack_pointer: int) -> int:
        """Read the stack byte that the given stack pointer designates."""
        return self.read_u8(address_from_lo_hi(stack_pointer, STACK_ADDRESS_HI))

    def write_u8_zero_page(self, address: int, data: int) -> None:
        """Write one byte to the zero page."""
        self.write_u8(address & 0xFF, data)

    def write_u8_stack(self, stack_pointer: int, data: int) -> None:
        """Write the stack byte that the given stack pointer designates."""
        self.write_u8(address_from_lo_hi(stack_pointer, STACK_ADDRESS_HI), data)


class MemoryReadOnly(ABC):
    """View of memory that reading never changes, for debugging and testing."""

    @abstractmethod
    def read_u8_read_only(self, address: int) -> int:
        """Read one byte at a 16-bit address without side effects."""

    def read_u16_le_read_only(self, address: int) -> int:
        """Read a little-endian word without side effects."""
        lo = self.read_u8_read_only(address)
        hi = self.read_u8_read_only((address + 1) & 0xFFFF)
        return (hi << 8) | lo

    def read_u8_stack_read_only(self, stack_pointer: int) -> int:
        """Read a stack byte without side effects."""
        return self.read_u8_read_only(
            address_from_lo_hi(stack_pointer, STACK_ADDRESS_HI)
        )