"""Operand sizes of instructions."""

from __future__ import annotations

from enum import Enum


class Operand(Enum):
    """Kind of operand an instruction carries; the value is its total length."""

    NONE = 1
    BYTE = 2
    ADDRESS = 3

    def instruction_bytes(self) -> int:
        """Length of the whole instruction in bytes, opcode included."""
        return self.value