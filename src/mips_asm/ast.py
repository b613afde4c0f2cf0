'''
dataclases de AST (Instruction, Label, Directive, DataItems, Operand)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Union, Optional

# ---- Nodos a nivel de fuente (AST/IR) ----

@dataclass(frozen=True)
class Label:
    """Etiqueta en el código fuente (p.ej., 'loop:')."""
    name: str
    line: int
    col: int
    section: Optional[str] = None    # '.text' o '.data'

@dataclass(frozen=True)
class Directive:
    """Directiva del ensamblador (p.ej., .text, .data, .word, .space)."""
    name: str
    args: List[str]
    line: int
    col: int
    section: Optional[str] = None

@dataclass(frozen=True)
class DataItems:
    """Línea de literales sueltos dentro de .data (continuación de la directiva anterior)."""
    values: List[str]
    line: int
    col: int
    section: Optional[str] = ".data"

@dataclass(frozen=True)
class Instruction:
    """Instrucción con mnemónico y operandos tipados."""
    mnemonic: str
    operands: List['Operand']
    line: int
    col: int
    section: Optional[str] = None

Node = Union[Label, Directive, DataItems, Instruction]

# ---- Operandos ----

@dataclass(frozen=True)
class Reg:
    """Registro por nombre ('$t0') con su número de 5 bits."""
    name: str
    num: int

@dataclass(frozen=True)
class Imm:
    """Inmediato numérico."""
    value: int

@dataclass(frozen=True)
class Sym:
    """Símbolo (etiqueta) referenciado por una instrucción."""
    name: str

@dataclass(frozen=True)
class Mem:
    """Dirección base+desplazamiento: offset(rs); el offset puede ser una etiqueta."""
    base: Reg
    offset: Union[Imm, Sym]

Operand = Union[Reg, Imm, Sym, Mem]

# ---- Salida ----

@dataclass(frozen=True)
class Encoded:
    """Palabra de 32 bits ya codificada, con su dirección de palabra."""
    word: int       # u32
    addr: int       # dirección de palabra (índice en el programa)
    line: int
    mnemonic: str   # mnemónico o directiva de origen
