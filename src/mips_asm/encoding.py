# src/mips_asm/encoding.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .ast import Instruction, Encoded, Node, Reg, Imm, Mem, Operand
from .isa import ARITY, NOP_WORD, OpSpec, spec as isa_spec
from .resolvers import branch_offset, jump_target, memory_offset
from .utils import u32, is_signed_nbit, fit_bits
from .diagnostics import AssemblyError, Diagnostic, has_errors, error, warning

log = logging.getLogger(__name__)

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    next_addr: int      # dirección siguiente a la última instrucción
    diagnostics: List[Diagnostic]
    fatal: bool = False # error no recuperable: words queda vacío

    @property
    def ok(self) -> bool:
        return not has_errors(self.diagnostics)

# ---------------- Helpers de empaquetado de bits ----------------
# Campos MSB -> LSB:
#   R: opcode(6) rs(5) rt(5) rd(5) shamt(5) funct(6)
#   I: opcode(6) rs(5) rt(5) imm(16)
#   J: opcode(6) target(26)

def _pack_R(opc: int, rs: int, rt: int, rd: int, shamt: int, funct: int) -> int:
    return u32((opc & 0x3F) << 26 |
               (rs & 0x1F) << 21 |
               (rt & 0x1F) << 16 |
               (rd & 0x1F) << 11 |
               (shamt & 0x1F) << 6 |
               (funct & 0x3F))

def _pack_I(opc: int, rs: int, rt: int, imm16: int) -> int:
    return u32((opc & 0x3F) << 26 |
               (rs & 0x1F) << 21 |
               (rt & 0x1F) << 16 |
               (imm16 & 0xFFFF))

def _pack_J(opc: int, target26: int) -> int:
    return u32((opc & 0x3F) << 26 | (target26 & 0x3FFFFFF))

# ---------------- Helpers semánticos ----------------

def _reg(op: Operand) -> int:
    if isinstance(op, Reg):
        return op.num
    raise AssemblyError(f"Se esperaba registro, obtuve {op!r}")

def _mem(op: Operand) -> Mem:
    if isinstance(op, Mem):
        return op
    raise AssemblyError("Operando de memoria inválido", hint="esperado offset($rs)")

def encode_one(ins: Instruction, sp: OpSpec, pc: int, symtab: Dict[str, int],
               diags: Optional[List[Diagnostic]] = None) -> int:
    """Codifica una instrucción reconocida en su palabra de 32 bits.

    Lanza AssemblyError si faltan operandos o su tipo no corresponde.
    """
    mnem = ins.mnemonic
    ops = ins.operands
    expected = ARITY[sp.itype]
    if len(ops) != expected:
        raise AssemblyError(f"{mnem} espera {expected} operandos ({sp.forms[0]}), recibió {len(ops)}")

    if sp.itype == "R":
        # rd, rs, rt
        rd, rs, rt = _reg(ops[0]), _reg(ops[1]), _reg(ops[2])
        return _pack_R(sp.opcode, rs, rt, rd, 0, sp.funct or 0)

    if sp.itype == "RS":
        # mult/div rs, rt
        return _pack_R(sp.opcode, _reg(ops[0]), _reg(ops[1]), 0, 0, sp.funct or 0)

    if sp.itype == "MF":
        # mfhi/mflo rd
        return _pack_R(sp.opcode, 0, 0, _reg(ops[0]), 0, sp.funct or 0)

    if sp.itype == "JR":
        return _pack_R(sp.opcode, _reg(ops[0]), 0, 0, 0, sp.funct or 0)

    if sp.itype == "I":
        # addiu rt, rs, imm
        rt, rs = _reg(ops[0]), _reg(ops[1])
        if not isinstance(ops[2], Imm):
            raise AssemblyError(f"{mnem}: el inmediato debe ser numérico")
        imm = ops[2].value
        if diags is not None and not is_signed_nbit(imm, 16):
            diags.append(warning(f"Inmediato {imm} fuera de rango para 16 bits con signo; se trunca"))
        return _pack_I(sp.opcode, rs, rt, fit_bits(imm, 16))

    if sp.itype == "B":
        # beq/bne rs, rt, etiqueta
        rs, rt = _reg(ops[0]), _reg(ops[1])
        return _pack_I(sp.opcode, rs, rt, branch_offset(pc, ops[2], symtab, diags=diags))

    if sp.itype == "MEM":
        # lw/sw rt, offset(rs)
        rt = _reg(ops[0])
        mem = _mem(ops[1])
        return _pack_I(sp.opcode, mem.base.num, rt, memory_offset(mem.offset, symtab, diags=diags))

    if sp.itype == "J":
        return _pack_J(sp.opcode, jump_target(ops[0], symtab, diags=diags))

    if sp.itype == "SYS":
        return _pack_R(sp.opcode, 0, 0, 0, 0, sp.funct or 0)

    if sp.itype == "NOP":
        return NOP_WORD

    raise AssemblyError(f"Tipo de instrucción no soportado: {sp.itype}")

# ---------------- Codificador principal (pasada 2) ----------------

def encode(
    nodes: List[Node],
    symtab: Dict[str, int],
    *,
    text_base: int = 0,
) -> EncodeResult:
    """Recorre las instrucciones en orden y asigna una palabra por dirección.

    Un mnemónico desconocido se reporta con su dirección y la dirección avanza
    igualmente, para que las etiquetas posteriores sigan siendo válidas.
    Cualquier otro error es fatal: se devuelve sin palabras.
    """
    diags: List[Diagnostic] = []
    words: List[Encoded] = []
    pc = text_base

    for n in nodes:
        if not isinstance(n, Instruction):
            continue

        try:
            sp = isa_spec(n.mnemonic)
        except KeyError:
            diags.append(error(f"Instrucción no válida en la dirección {pc}: {n.mnemonic}",
                               line=n.line, col=n.col))
            log.debug("instrucción no válida en %d: %s", pc, n.mnemonic)
            pc += 1
            continue

        local: List[Diagnostic] = []
        try:
            word = encode_one(n, sp, pc, symtab, local)
        except AssemblyError as ex:
            diags.append(ex.at(n.line).diagnostic)
            return EncodeResult(words=[], next_addr=pc, diagnostics=diags, fatal=True)
        # los avisos de los resolvedores no conocen la línea
        diags.extend(warning(d.message, line=n.line, col=n.col) for d in local)

        words.append(Encoded(word=word, addr=pc, line=n.line, mnemonic=n.mnemonic))
        pc += 1

    log.debug("pasada 2: %d instrucciones codificadas", len(words))
    return EncodeResult(words=words, next_addr=pc, diagnostics=diags)
