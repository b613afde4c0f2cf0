import pytest
from src.mips_asm.regs import REGISTERS, reg_num
from src.mips_asm.diagnostics import AssemblyError

@pytest.mark.parametrize("name, num", [
    ("$zero", 0), ("$at", 1), ("$v0", 2), ("$v1", 3),
    ("$a0", 4), ("$a3", 7), ("$t0", 8), ("$t7", 15),
    ("$s0", 16), ("$s7", 23), ("$t8", 24), ("$t9", 25),
    ("$gp", 28), ("$sp", 29), ("$fp", 30), ("$ra", 31),
])
def test_register_table(name, num):
    assert reg_num(name) == num

def test_k_registers_share_codes_with_a2_a3():
    assert reg_num("$k0") == reg_num("$a2") == 6
    assert reg_num("$k1") == reg_num("$a3") == 7

def test_pure_and_fits_five_bits():
    for name in REGISTERS:
        assert reg_num(name) == reg_num(name)
        assert 0 <= reg_num(name) < 32

@pytest.mark.parametrize("bad", ["$x9", "$s8", "t0", "$T0", "$32", ""])
def test_invalid(bad):
    with pytest.raises(AssemblyError) as e1:
        reg_num(bad)
    with pytest.raises(AssemblyError) as e2:
        reg_num(bad)
    assert str(e1.value) == str(e2.value)
    assert "Registro inválido" in str(e1.value)
