import pytest

from mos6502model.operand import Operand


@pytest.mark.parametrize(
    "operand, size",
    [(Operand.NONE, 1), (Operand.BYTE, 2), (Operand.ADDRESS, 3)],
)
def test_instruction_bytes(operand, size):
    assert operand.instruction_bytes() == size


def test_sizes_increase_with_operand_width():
    sizes = [op.instruction_bytes() for op in (Operand.NONE, Operand.BYTE, Operand.ADDRESS)]
    assert sizes == sorted(sizes)
    assert len(set(sizes)) == 3


def test_lookup_by_size():
    assert Operand(2) is Operand.BYTE
    with pytest.raises(ValueError):
        Operand(4)