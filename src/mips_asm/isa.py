'''
tabla del subconjunto MIPS soportado (opcode, funct, forma de operandos)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

@dataclass(frozen=True)
class OpSpec:
    """Especificación de una instrucción del subconjunto MIPS.

    - itype: 'R','RS','MF','JR','I','B','MEM','J','SYS','NOP'
    - opcode: campo de 6 bits (bits 31..26)
    - funct: campo de 6 bits (bits 5..0) cuando aplica
    - forms: forma de operandos a nivel mnemónico (sólo forma, no rango)
    """
    itype: str
    opcode: int
    funct: Optional[int] = None
    forms: Optional[List[str]] = None

# Constantes de opcode
OP_SPECIAL = 0b000000
OP_J       = 0b000010
OP_JAL     = 0b000011
OP_BEQ     = 0b000100
OP_BNE     = 0b000101
OP_ADDIU   = 0b001001
OP_LW      = 0b100011
OP_SW      = 0b101011

# Palabra fija de nop (sll $zero, $zero, 0)
NOP_WORD = 0x00000000

# Número de operandos esperados por tipo
ARITY: Dict[str, int] = {
    "R": 3, "RS": 2, "MF": 1, "JR": 1, "I": 3,
    "B": 3, "MEM": 2, "J": 1, "SYS": 0, "NOP": 0,
}

SPEC: Dict[str, OpSpec] = {}

def _add(name: str, spec: OpSpec, forms: List[str]):
    SPEC[name] = OpSpec(**{**spec.__dict__, "forms": forms})

# Registro-registro
_add("addu", OpSpec("R", OP_SPECIAL, funct=0b100001), ["rd,rs,rt"])
_add("subu", OpSpec("R", OP_SPECIAL, funct=0b100011), ["rd,rs,rt"])
_add("and",  OpSpec("R", OP_SPECIAL, funct=0b100100), ["rd,rs,rt"])
_add("or",   OpSpec("R", OP_SPECIAL, funct=0b100101), ["rd,rs,rt"])
_add("slt",  OpSpec("R", OP_SPECIAL, funct=0b101010), ["rd,rs,rt"])

# Multiplicación / división (resultado en HI/LO)
_add("mult", OpSpec("RS", OP_SPECIAL, funct=0b011000), ["rs,rt"])
_add("div",  OpSpec("RS", OP_SPECIAL, funct=0b011010), ["rs,rt"])

# Lectura de HI/LO
_add("mfhi", OpSpec("MF", OP_SPECIAL, funct=0b010000), ["rd"])
_add("mflo", OpSpec("MF", OP_SPECIAL, funct=0b010010), ["rd"])

# Salto a registro
_add("jr",   OpSpec("JR", OP_SPECIAL, funct=0b001000), ["rs"])

# Inmediatos
_add("addiu", OpSpec("I", OP_ADDIU), ["rt,rs,imm"])

# Saltos condicionales
_add("beq", OpSpec("B", OP_BEQ), ["rs,rt,label"])
_add("bne", OpSpec("B", OP_BNE), ["rs,rt,label"])

# Carga / almacenamiento
_add("lw", OpSpec("MEM", OP_LW), ["rt,offset(rs)"])
_add("sw", OpSpec("MEM", OP_SW), ["rt,offset(rs)"])

# Saltos incondicionales
_add("j",   OpSpec("J", OP_J),   ["label"])
_add("jal", OpSpec("J", OP_JAL), ["label"])

# Sistema
_add("syscall", OpSpec("SYS", OP_SPECIAL, funct=0b001100), ["none"])
_add("nop",     OpSpec("NOP", OP_SPECIAL), ["none"])

def spec(mnemonic: str) -> OpSpec:
    """Devuelve la especificación de una instrucción por mnemónico."""
    m = mnemonic.lower()
    if m not in SPEC:
        raise KeyError(f"Instrucción desconocida: {mnemonic}")
    return SPEC[m]
