"""A model of MOS 6502 processor state: status flags, operands, opcode table, memory interface and CPU registers."""

__version__ = "0.1.0"
__all__ = ["cpu", "memory", "opcode", "operand", "status"]