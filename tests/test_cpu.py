import pytest

from mos6502model.cpu import NMI_VECTOR, START_VECTOR, Cpu
from mos6502model.memory import Memory, MemoryReadOnly
from mos6502model.status import StatusRegister


class Ram(Memory, MemoryReadOnly):
    def __init__(self):
        self.data = bytearray(0x10000)

    def read_u8(self, address):
        return self.data[address]

    def write_u8(self, address, data):
        self.data[address] = data

    def read_u8_read_only(self, address):
        return self.data[address]

    def set_word(self, address, value):
        self.data[address] = value & 0xFF
        self.data[address + 1] = value >> 8


@pytest.fixture
def ram():
    return Ram()


def test_new_cpu_registers():
    cpu = Cpu()
    assert (cpu.pc, cpu.sp, cpu.acc, cpu.x, cpu.y) == (0, 0xFF, 0, 0, 0)
    assert cpu.status == StatusRegister()


def test_push_writes_into_page_one(ram):
    cpu = Cpu()
    cpu.push_stack_u8(ram, 0x42)
    assert ram.data[0x01FF] == 0x42
    assert cpu.sp == 0xFE


def test_push_pop_round_trip(ram):
    cpu = Cpu()
    for value in (1, 2, 3):
        cpu.push_stack_u8(ram, value)
    assert [cpu.pop_stack_u8(ram) for _ in range(3)] == [3, 2, 1]
    assert cpu.sp == 0xFF


def test_start_loads_vector(ram):
    ram.set_word(START_VECTOR, 0xC000)
    cpu = Cpu()
    cpu.start(ram)
    assert cpu.pc == 0xC000


def test_nmi_pushes_state_and_jumps(ram):
    ram.set_word(NMI_VECTOR, 0x9000)
    cpu = Cpu(pc=0x1234)
    cpu.status.carry = True
    expected_status = cpu.status.masked_with_brk_and_expansion()
    cpu.nmi(ram)
    assert cpu.pc == 0x9000
    assert cpu.sp == 0xFC
    assert ram.data[0x01FF] == 0x12
    assert ram.data[0x01FE] == 0x34
    assert ram.data[0x01FD] == expected_status


def test_nmi_return_address_round_trip(ram):
    ram.set_word(NMI_VECTOR, 0x9000)
    cpu = Cpu(pc=0xABCD)
    cpu.nmi(ram)
    assert cpu.retrieve_nmi_return_address_during_nmi(ram) == 0xABCD


def test_nmi_return_address_none_outside_handler(ram):
    ram.set_word(NMI_VECTOR, 0x9000)
    cpu = Cpu(pc=0x8000)
    assert cpu.retrieve_nmi_return_address_during_nmi(ram) is None


def test_nmi_return_address_does_not_change_memory(ram):
    ram.set_word(NMI_VECTOR, 0x9000)
    cpu = Cpu(pc=0x0456)
    cpu.nmi(ram)
    before = bytes(ram.data)
    sp = cpu.sp
    cpu.retrieve_nmi_return_address_during_nmi(ram)
    assert bytes(ram.data) == before
    assert cpu.sp == sp