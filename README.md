# mos6502model

A model of the MOS 6502 processor state. It covers the CPU registers, the
processor status register, the opcode table (official and common unofficial
opcodes), and a memory interface with zero-page and stack helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `mos6502model.status`
  - `Flag`: an `IntFlag` with the eight status bits (`CARRY`, `ZERO`,
    `INTERRUPT_DISABLE`, `DECIMAL`, `BRK`, `EXPANSION`, `OVERFLOW`,
    `NEGATIVE`).
  - `StatusRegister`: starts with only the interrupt-disable flag set. The
    flags `carry`, `zero`, `interrupt_disable`, `decimal`, `overflow` and
    `negative` are read and written as boolean properties. `carry_value` gives
    the carry as 0 or 1, and `raw` gives the stored byte. `set(value)` loads
    every flag from a byte. `set_zero_from_value(value)` and
    `set_negative_from_value(value)` set the zero and negative flags from a
    result byte. The BRK and expansion bits are never stored. They are added
    only by `masked_with_brk_and_expansion()`, which gives the byte as it is
    pushed to the stack. Registers compare equal when their stored bytes
    match. `repr()` shows the flags as `[N=0,V=0,D=0,I:1,Z:0,C:0]`.
- `mos6502model.operand`
  - `Operand`: `NONE`, `BYTE` or `ADDRESS`. `instruction_bytes()` gives the
    length of the whole instruction (1, 2 or 3).
- `mos6502model.opcode`
  - `AddressingMode`: the thirteen addressing modes.
  - `OpcodeEntry`: a frozen record of `mnemonic`, `mode`, `variant` and
    `byte`. `variant` is `None` for official opcodes and is the unofficial
    variant number otherwise. `official` tells the two apart.
  - `lookup(mnemonic, mode, variant=None)` returns the opcode byte. The mode
    may be an `AddressingMode` or its string value. An unknown combination
    raises `KeyError`.
  - `decode(byte)` returns the `OpcodeEntry` for a byte, or raises
    `UnknownOpcode`, which has the byte in its `opcode` attribute.
  - `entries()` returns every known opcode as a tuple.
- `mos6502model.memory`
  - `Memory`: an abstract base class. Subclasses implement `read_u8` and
    `write_u8`. It provides `read_u16_le`, `read_u8_zero_page`,
    `read_u16_le_zero_page` (which wraps within the zero page),
    `read_u8_stack`, `write_u8_zero_page` and `write_u8_stack`. The stack is
    in page one.
  - `MemoryReadOnly`: an abstract base class for reads without side effects.
    Subclasses implement `read_u8_read_only`. It provides
    `read_u16_le_read_only` and `read_u8_stack_read_only`.
  - `address_from_lo_hi(lo, hi)`, `address_lo(address)` and
    `address_hi(address)` build 16-bit addresses and split them into bytes.
- `mos6502model.cpu`
  - `Cpu`: a dataclass holding `pc`, `sp` (initially `0xFF`), `acc`, `x`, `y`
    and `status`. It has the following methods:
    - `push_stack_u8` writes at the stack pointer and then decrements it.
    - `pop_stack_u8` increments the stack pointer and then reads.
    - `start` loads `pc` from the start vector at `START_VECTOR` (`0xFFFC`).
    - `nmi` pushes the return address and the status, then jumps through
      `NMI_VECTOR` (`0xFFFA`).
    - `retrieve_nmi_return_address_during_nmi` reads the pushed return address
      from a `MemoryReadOnly` while `pc` is at the NMI handler. Otherwise it
      returns `None`.

## Example

```python
from mos6502model.cpu import Cpu
from mos6502model.memory import Memory
from mos6502model.opcode import decode, lookup


class Ram(Memory):
    def __init__(self):
        self.data = bytearray(0x10000)

    def read_u8(self, address):
        return self.data[address]

    def write_u8(self, address, data):
        self.data[address] = data


ram = Ram()
ram.data[0xFFFC] = 0x00  # start vector, low byte
ram.data[0xFFFD] = 0x80  # start vector, high byte

cpu = Cpu()
cpu.start(ram)
assert cpu.pc == 0x8000

cpu.push_stack_u8(ram, 0x42)
assert cpu.pop_stack_u8(ram) == 0x42

entry = decode(0xA9)
print(entry.mnemonic, entry.mode.value)  # lda immediate
assert lookup("lda", "immediate") == 0xA9
```

## What it does not do

The package models processor state and the opcode table, but it does not
execute instructions. `Cpu` has no method that fetches and runs an opcode or
counts cycles. The package ships no memory implementation and has no
command-line program. To use it, write a `Memory` subclass such as the one in
the example.