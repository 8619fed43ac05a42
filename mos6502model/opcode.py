"""Opcode bytes of the official and unofficial instructions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class AddressingMode(Enum):
    ABSOLUTE = "absolute"
    ABSOLUTE_X_INDEXED = "absolute_x_indexed"
    ABSOLUTE_Y_INDEXED = "absolute_y_indexed"
    ACCUMULATOR = "accumulator"
    IMMEDIATE = "immediate"
    IMPLIED = "implied"
    INDIRECT = "indirect"
    INDIRECT_Y_INDEXED = "indirect_y_indexed"
    RELATIVE = "relative"
    X_INDEXED_INDIRECT = "x_indexed_indirect"
    ZERO_PAGE = "zero_page"
    ZERO_PAGE_X_INDEXED = "zero_page_x_indexed"
    ZERO_PAGE_Y_INDEXED = "zero_page_y_indexed"


@dataclass(frozen=True)
class OpcodeEntry:
    """One opcode byte: its mnemonic, addressing mode and unofficial variant."""

    mnemonic: str
    mode: AddressingMode
    variant: Optional[int]
    byte: int

    @property
    def official(self) -> bool:
        return self.variant is None


class UnknownOpcode(Exception):
    """Raised for a byte that is not a known opcode."""

    def __init__(self, opcode: int) -> None:
        super().__init__(f"unknown opcode 0x{opcode:02X}")
        self.opcode = opcode


def _alu(abs_, absx, absy, imm, iyi, xii, zp, zpx):
    return dict(
        ABSOLUTE=abs_, ABSOLUTE_X_INDEXED=absx, ABSOLUTE_Y_INDEXED=absy,
        IMMEDIATE=imm, INDIRECT_Y_INDEXED=iyi, X_INDEXED_INDIRECT=xii,
        ZERO_PAGE=zp, ZERO_PAGE_X_INDEXED=zpx,
    )


def _rmw(xii, zp, abs_, iyi, zpx, absy, absx):
    return dict(
        X_INDEXED_INDIRECT=xii, ZERO_PAGE=zp, ABSOLUTE=abs_,
        INDIRECT_Y_INDEXED=iyi, ZERO_PAGE_X_INDEXED=zpx,
        ABSOLUTE_Y_INDEXED=absy, ABSOLUTE_X_INDEXED=absx,
    )


def _shift(abs_, absx, acc, zp, zpx):
    return dict(
        ABSOLUTE=abs_, ABSOLUTE_X_INDEXED=absx, ACCUMULATOR=acc,
        ZERO_PAGE=zp, ZERO_PAGE_X_INDEXED=zpx,
    )


def _implied(byte):
    return {None: dict(IMPLIED=byte)}


def _relative(byte):
    return {None: dict(RELATIVE=byte)}


_TABLE: dict[str, dict[Optional[int], dict[str, int]]] = {
    "adc": {None: _alu(0x6D, 0x7D, 0x79, 0x69, 0x71, 0x61, 0x65, 0x75)},
    "ahx": {0: dict(INDIRECT_Y_INDEXED=0x93, ABSOLUTE_Y_INDEXED=0x9F)},
    "anc": {0: dict(IMMEDIATE=0x0B), 1: dict(IMMEDIATE=0x2B)},
    "and": {None: _alu(0x2D, 0x3D, 0x39, 0x29, 0x31, 0x21, 0x25, 0x35)},
    "alr": {0: dict(IMMEDIATE=0x4B)},
    "arr": {0: dict(IMMEDIATE=0x6B)},
    "asl": {None: _shift(0x0E, 0x1E, 0x0A, 0x06, 0x16)},
    "axs": {0: dict(IMMEDIATE=0xCB)},
    "bcc": _relative(0x90),
    "bcs": _relative(0xB0),
    "beq": _relative(0xF0),
    "bmi": _relative(0x30),
    "bne": _relative(0xD0),
    "bpl": _relative(0x10),
    "brk": _implied(0x00),
    "bvc": _relative(0x50),
    "bvs": _relative(0x70),
    "bit": {None: dict(ZERO_PAGE=0x24, ABSOLUTE=0x2C)},
    "clc": _implied(0x18),
    "cld": _implied(0xD8),
    "cli": _implied(0x58),
    "clv": _implied(0xB8),
    "cmp": {None: _alu(0xCD, 0xDD, 0xD9, 0xC9, 0xD1, 0xC1, 0xC5, 0xD5)},
    "dcp": {0: _rmw(0xC3, 0xC7, 0xCF, 0xD3, 0xD7, 0xDB, 0xDF)},
    "dec": {None: dict(ABSOLUTE=0xCE, ABSOLUTE_X_INDEXED=0xDE, ZERO_PAGE=0xC6, ZERO_PAGE_X_INDEXED=0xD6)},
    "cpx": {None: dict(ABSOLUTE=0xEC, IMMEDIATE=0xE0, ZERO_PAGE=0xE4)},
    "cpy": {None: dict(ABSOLUTE=0xCC, IMMEDIATE=0xC0, ZERO_PAGE=0xC4)},
    "dex": _implied(0xCA),
    "dey": _implied(0x88),
    "eor": {None: _alu(0x4D, 0x5D, 0x59, 0x49, 0x51, 0x41, 0x45, 0x55)},
    "ign": {
        0: dict(ABSOLUTE=0x0C, ABSOLUTE_X_INDEXED=0x1C, ZERO_PAGE=0x04, ZERO_PAGE_X_INDEXED=0x14),
        1: dict(ABSOLUTE_X_INDEXED=0x3C, ZERO_PAGE=0x44, ZERO_PAGE_X_INDEXED=0x34),
        2: dict(ABSOLUTE_X_INDEXED=0x5C, ZERO_PAGE=0x64, ZERO_PAGE_X_INDEXED=0x54),
        3: dict(ABSOLUTE_X_INDEXED=0x7C, ZERO_PAGE_X_INDEXED=0x74),
        4: dict(ABSOLUTE_X_INDEXED=0xDC, ZERO_PAGE_X_INDEXED=0xD4),
        5: dict(ABSOLUTE_X_INDEXED=0xFC, ZERO_PAGE_X_INDEXED=0xF4),
    },
    "inc": {None: dict(ABSOLUTE=0xEE, ABSOLUTE_X_INDEXED=0xFE, ZERO_PAGE=0xE6, ZERO_PAGE_X_INDEXED=0xF6)},
    "inx": _implied(0xE8),
    "iny": _implied(0xC8),
    "isc": {0: _rmw(0xE3, 0xE7, 0xEF, 0xF3, 0xF7, 0xFB, 0xFF)},
    "jmp": {None: dict(ABSOLUTE=0x4C, INDIRECT=0x6C)},
    "jsr": {None: dict(ABSOLUTE=0x20)},
    "lax": {
        0: dict(
            ABSOLUTE=0xAF, ABSOLUTE_Y_INDEXED=0xBF, IMMEDIATE=0xAB,
            X_INDEXED_INDIRECT=0xA3, INDIRECT_Y_INDEXED=0xB3,
            ZERO_PAGE=0xA7, ZERO_PAGE_Y_INDEXED=0xB7,
        )
    },
    "lda": {None: _alu(0xAD, 0xBD, 0xB9, 0xA9, 0xB1, 0xA1, 0xA5, 0xB5)},
    "ldx": {
        None: dict(
            ABSOLUTE=0xAE, ABSOLUTE_Y_INDEXED=0xBE, IMMEDIATE=0xA2,
            ZERO_PAGE=0xA6, ZERO_PAGE_Y_INDEXED=0xB6,
        )
    },
    "ldy": {
        None: dict(
            ABSOLUTE=0xAC, ABSOLUTE_X_INDEXED=0xBC, IMMEDIATE=0xA0,
            ZERO_PAGE=0xA4, ZERO_PAGE_X_INDEXED=0xB4,
        )
    },
    "lsr": {None: _shift(0x4E, 0x5E, 0x4A, 0x46, 0x56)},
    "nop": {
        None: dict(IMPLIED=0xEA),
        0: dict(IMPLIED=0x1A),
        1: dict(IMPLIED=0x3A),
        2: dict(IMPLIED=0x5A),
        3: dict(IMPLIED=0x7A),
        4: dict(IMPLIED=0xDA),
        5: dict(IMPLIED=0xFA),
    },
    "ora": {None: _alu(0x0D, 0x1D, 0x19, 0x09, 0x11, 0x01, 0x05, 0x15)},
    "pha": _implied(0x48),
    "php": _implied(0x08),
    "pla": _implied(0x68),
    "plp": _implied(0x28),
    "rla": {0: _rmw(0x23, 0x27, 0x2F, 0x33, 0x37, 0x3B, 0x3F)},
    "rol": {None: _shift(0x2E, 0x3E, 0x2A, 0x26, 0x36)},
    "ror": {None: _shift(0x6E, 0x7E, 0x6A, 0x66, 0x76)},
    "rra": {0: _rmw(0x63, 0x67, 0x6F, 0x73, 0x77, 0x7B, 0x7F)},
    "rti": _implied(0x40),
    "rts": _implied(0x60),
    "sax": {0: dict(X_INDEXED_INDIRECT=0x83, ZERO_PAGE=0x87, ABSOLUTE=0x8F, ZERO_PAGE_Y_INDEXED=0x97)},
    "sbc": {
        None: _alu(0xED, 0xFD, 0xF9, 0xE9, 0xF1, 0xE1, 0xE5, 0xF5),
        0: dict(IMMEDIATE=0xEB),
    },
    "sec": _implied(0x38),
    "sed": _implied(0xF8),
    "sei": _implied(0x78),
    "skb": {
        0: dict(IMMEDIATE=0x80),
        1: dict(IMMEDIATE=0x82),
        2: dict(IMMEDIATE=0x89),
        3: dict(IMMEDIATE=0xC2),
        4: dict(IMMEDIATE=0xE2),
    },
    "slo": {0: _rmw(0x03, 0x07, 0x0F, 0x13, 0x17, 0x1B, 0x1F)},
    "sre": {0: _rmw(0x43, 0x47, 0x4F, 0x53, 0x57, 0x5B, 0x5F)},
    "sta": {
        None: dict(
            ABSOLUTE=0x8D, ABSOLUTE_X_INDEXED=0x9D, ABSOLUTE_Y_INDEXED=0x99,
            INDIRECT_Y_INDEXED=0x91, X_INDEXED_INDIRECT=0x81,
            ZERO_PAGE=0x85, ZERO_PAGE_X_INDEXED=0x95,
        )
    },
    "stx": {None: dict(ABSOLUTE=0x8E, ZERO_PAGE=0x86, ZERO_PAGE_Y_INDEXED=0x96)},
    "sty": {None: dict(ABSOLUTE=0x8C, ZERO_PAGE=0x84, ZERO_PAGE_X_INDEXED=0x94)},
    "sxa": {0: dict(ABSOLUTE_Y_INDEXED=0x9E)},
    "sya": {0: dict(ABSOLUTE_X_INDEXED=0x9C)},
    "tax": _implied(0xAA),
    "tay": _implied(0xA8),
    "tsx": _implied(0xBA),
    "txa": _implied(0x8A),
    "txs": _implied(0x9A),
    "tya": _implied(0x98),
}

_ENTRIES: tuple[OpcodeEntry, ...] = tuple(
    OpcodeEntry(mnemonic, AddressingMode[mode_name], variant, byte)
    for mnemonic, variants in _TABLE.items()
    for variant, modes in variants.items()
    for mode_name, byte in modes.items()
)

_BY_KEY = {(e.mnemonic, e.mode, e.variant): e.byte for e in _ENTRIES}
_BY_BYTE = {e.byte: e for e in _ENTRIES}


def lookup(
    mnemonic: str,
    mode: Union[AddressingMode, str],
    variant: Optional[int] = None,
) -> int:
    """Return the opcode byte for an instruction; variant None means official."""
    key = (mnemonic.lower(), AddressingMode(mode), variant)
    try:
        return _BY_KEY[key]
    except KeyError:
        raise KeyError(
            f"no opcode for {mnemonic} {key[1].value}"
            + ("" if variant is None else f" (unofficial {variant})")
        ) from None


def decode(byte: int) -> OpcodeEntry:
    """Return the entry for an opcode byte, or raise UnknownOpcode."""
    try:
        return _BY_BYTE[byte]
    except KeyError:
        raise UnknownOpcode(byte) from None


def entries() -> tuple[OpcodeEntry, ...]:
    """All known opcodes."""
    return _ENTRIES