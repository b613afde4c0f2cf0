'''
cálculo de campos de dirección: destino de salto, desplazamiento de rama y offset de memoria
'''

from __future__ import annotations
from typing import Dict, List, Optional, Union

from .ast import Imm, Sym, Operand
from .diagnostics import AssemblyError, Diagnostic, warning
from .linker import DATA_LABEL
from .utils import fit_bits, is_signed_nbit, is_unsigned_nbit

JUMP_BITS = 26
BRANCH_BITS = 16
OFFSET_BITS = 16

def lookup(name: str, symtab: Dict[str, int]) -> int:
    """Dirección de una etiqueta; si no existe, error fatal."""
    if name not in symtab:
        raise AssemblyError(f"Etiqueta no definida: {name}")
    return symtab[name]

def _signed_field(value: int, bits: int, what: str, diags: Optional[List[Diagnostic]]) -> int:
    if diags is not None and not is_signed_nbit(value, bits):
        diags.append(warning(f"{what} {value} fuera de rango para {bits} bits con signo; se trunca"))
    return fit_bits(value, bits)

def jump_target(op: Operand, symtab: Dict[str, int], *,
                diags: Optional[List[Diagnostic]] = None) -> int:
    """Campo de 26 bits sin signo con la dirección de palabra destino.

    Acepta una etiqueta o un entero literal (dirección absoluta).
    """
    if isinstance(op, Sym):
        addr = lookup(op.name, symtab)
    elif isinstance(op, Imm):
        addr = op.value
    else:
        raise AssemblyError("Destino de salto inválido (se esperaba etiqueta o inmediato)")
    if diags is not None and not is_unsigned_nbit(addr, JUMP_BITS):
        diags.append(warning(f"Destino de salto {addr} fuera de rango para {JUMP_BITS} bits; se trunca"))
    return fit_bits(addr, JUMP_BITS)

def branch_offset(pc: int, op: Operand, symtab: Dict[str, int], *,
                  diags: Optional[List[Diagnostic]] = None) -> int:
    """Campo de 16 bits con signo: destino - (pc + 1).

    El +1 refleja que el salto es relativo a la instrucción siguiente.
    Un entero literal se toma directamente como desplazamiento.
    """
    if isinstance(op, Sym):
        disp = lookup(op.name, symtab) - (pc + 1)
    elif isinstance(op, Imm):
        disp = op.value
    else:
        raise AssemblyError("Operando de rama inválido (se esperaba etiqueta o inmediato)")
    return _signed_field(disp, BRANCH_BITS, "Desplazamiento de rama", diags)

def memory_offset(op: Union[Imm, Sym], symtab: Dict[str, int], *,
                  diags: Optional[List[Diagnostic]] = None) -> int:
    """Campo de 16 bits con signo para lw/sw.

    Una etiqueta se resuelve relativa al inicio de .data; si no, el
    operando es un entero literal.
    """
    if isinstance(op, Sym):
        if DATA_LABEL not in symtab:
            raise AssemblyError(f"Offset con etiqueta '{op.name}' sin segmento .data",
                                hint="las etiquetas en lw/sw se miden desde .data")
        off = lookup(op.name, symtab) - symtab[DATA_LABEL]
    elif isinstance(op, Imm):
        off = op.value
    else:
        raise AssemblyError("Offset de memoria inválido")
    return _signed_field(off, OFFSET_BITS, "Offset de memoria", diags)
