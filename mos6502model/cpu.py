"""Processor registers, stack handling, reset and non-maskable interrupt."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .memory import Memory, MemoryReadOnly, address_from_lo_hi, address_hi, address_lo
from .status import StatusRegister

NMI_VECTOR = 0xFFFA
"""Address of the low byte of the non-maskable interrupt handler address."""

START_VECTOR = 0xFFFC
"""Address of the low byte of the address execution starts from."""


@dataclass
class Cpu:
    """Registers of the processor."""

    pc: int = 0
    sp: int = 0xFF
    acc: int = 0
    x: int = 0
    y: int = 0
    status: StatusRegister = field(default_factory=StatusRegister)

    def push_stack_u8(self, memory: Memory, value: int) -> None:
        """Write a byte at the stack pointer, then move the pointer down."""
        memory.write_u8_stack(self.sp, value & 0xFF)
        self.sp = (self.sp - 1) & 0xFF

    def pop_stack_u8(self, memory: Memory) -> int:
        """Move the stack pointer up, then read the byte it designates."""
        self.sp = (self.sp + 1) & 0xFF
        return memory.read_u8_stack(self.sp)

    def nmi(self, memory: Memory) -> None:
        """Push the return address and status, then jump to the NMI handler."""
        self.push_stack_u8(memory, address_hi(self.pc))
        self.push_stack_u8(memory, address_lo(self.pc))
        self.push_stack_u8(memory, self.status.masked_with_brk_and_expansion())
        self.pc = memory.read_u16_le(NMI_VECTOR)

    def start(self, memory: Memory) -> None:
        """Load the program counter from the start vector."""
        self.pc = memory.read_u16_le(START_VECTOR)

    def retrieve_nmi_return_address_during_nmi(
        self, memory: MemoryReadOnly
    ) -> Optional[int]:
        """The address an NMI will return to, if the processor is at the NMI handler."""
        if self.pc != memory.read_u16_le_read_only(NMI_VECTOR):
            return None
        lo = memory.read_u8_stack_read_only((self.sp + 2) & 0xFF)
        hi = memory.read_u8_stack_read_only((self.sp + 3) & 0xFF)
        return address_from_lo_hi(lo, hi)