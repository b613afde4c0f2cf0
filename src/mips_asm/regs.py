'''
tabla fija de nombres de registro MIPS -> número de 5 bits
'''

from __future__ import annotations
from typing import Dict

from .diagnostics import AssemblyError

# $k0/$k1 comparten código con $a2/$a3; se conserva tal cual.
REGISTERS: Dict[str, int] = {
    "$zero": 0, "$at": 1,
    "$v0": 2, "$v1": 3,
    "$a0": 4, "$a1": 5, "$a2": 6, "$a3": 7,
    "$t0": 8, "$t1": 9, "$t2": 10, "$t3": 11,
    "$t4": 12, "$t5": 13, "$t6": 14, "$t7": 15,
    "$s0": 16, "$s1": 17, "$s2": 18, "$s3": 19,
    "$s4": 20, "$s5": 21, "$s6": 22, "$s7": 23,
    "$t8": 24, "$t9": 25,
    "$k0": 6, "$k1": 7,
    "$gp": 28, "$sp": 29, "$fp": 30, "$ra": 31,
}

def reg_num(token: str) -> int:
    """Devuelve el número 0..31 del registro o lanza AssemblyError."""
    t = token.strip()
    if t not in REGISTERS:
        raise AssemblyError(f"Registro inválido: {token}",
                            hint="use $zero, $at, $vN, $aN, $tN, $sN, $kN, $gp, $sp, $fp o $ra")
    return REGISTERS[t]
