# src/mips_asm/parser.py
from __future__ import annotations
import logging
import re
from typing import Iterable, List, Tuple, Optional, Union

from .lexer import strip_comment, split_label, is_directive, tokenize
from .ast import Label, Directive, DataItems, Instruction, Node, Reg, Imm, Sym, Mem, Operand
from .isa import SPEC
from .regs import reg_num
from .utils import is_int_literal, parse_int
from .diagnostics import AssemblyError, Diagnostic

log = logging.getLogger(__name__)

SYMBOL_RE  = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

SECTION_DIRS = (".text", ".data")

def _parse_imm(token: str) -> Union[Imm, Sym]:
    t = token.strip()
    if is_int_literal(t):
        return Imm(parse_int(t))
    if SYMBOL_RE.match(t):
        return Sym(t)
    raise AssemblyError(f"Inmediato/símbolo inválido: {token}")

def _parse_reg(token: str) -> Reg:
    name = token.strip()
    return Reg(name=name, num=reg_num(name))

def _parse_operand(tok: str) -> Operand:
    if tok.startswith('$'):
        return _parse_reg(tok)
    try:
        return _parse_imm(tok)
    except AssemblyError:
        raise AssemblyError(f"Operando inválido: '{tok}'") from None

def _parse_operands(mnemonic: str, args: List[str]) -> List[Operand]:
    """Operandos tipados de una instrucción reconocida.

    Los paréntesis ya no están en los tokens, así que 'offset($rs)' llega
    como dos tokens; en lw/sw se rearman como Mem. '($rs)' equivale a 0($rs).
    """
    if SPEC[mnemonic].itype == "MEM":
        if len(args) == 3:
            return [_parse_reg(args[0]), Mem(base=_parse_reg(args[2]), offset=_parse_imm(args[1]))]
        if len(args) == 2 and args[1].startswith('$'):
            return [_parse_reg(args[0]), Mem(base=_parse_reg(args[1]), offset=Imm(0))]
    # el número y tipo de operandos se valida al codificar
    return [_parse_operand(t) for t in args]

def parse(lines: Iterable[str], *, filename: Optional[str] = None) -> Tuple[List[Node], List[Diagnostic]]:
    """
    Clasifica cada línea de fuente sólo por su sintaxis y la sección actual.

    Devuelve (nodes, diagnostics) donde nodes es una lista de:
      - Directive(name, args, line, col, section)
      - Label(name, line, col, section)
      - DataItems(values, line, col)       literales sueltos dentro de .data
      - Instruction(mnemonic, operands, line, col, section)

    Reglas:
      - Comentarios: '#' hasta fin de línea; líneas vacías se ignoran.
      - Tokens separados por espacios, comas o paréntesis.
      - Etiquetas: 'name:' al inicio de línea (permite 'name: .word ...' y 'name: instr ...').
      - Directivas: línea que empieza con '.'.
      - Dentro de .data, cualquier otra línea es una lista de literales.
      - Instrucciones: resto (mnemónico + operandos).

    El primer error detiene el análisis; diagnostics contiene entonces ese error.
    """
    nodes: List[Node] = []
    diags: List[Diagnostic] = []
    section = ".text"

    def _directive(core: str, lineno: int) -> None:
        nonlocal section
        parts = tokenize(core)
        dname = parts[0].lower()
        if dname in SECTION_DIRS:
            section = dname
        nodes.append(Directive(name=dname, args=parts[1:], line=lineno, col=1, section=section))

    lineno = 0
    try:
        for lineno, raw in enumerate(lines, start=1):
            core = strip_comment(raw)
            if not core:
                continue

            # 1) 'label:' y 'label: <resto>'
            label, rest = split_label(core)
            if label:
                nodes.append(Label(name=label, line=lineno, col=1, section=section))
                if not rest:
                    continue
                core = rest
            elif ':' in core:
                raise AssemblyError(f"Etiqueta inválida: '{core}'")

            # 2) Línea que comienza con .directiva
            if is_directive(core):
                _directive(core, lineno)
                continue

            # 3) Literales de continuación dentro de .data
            if section == ".data":
                nodes.append(DataItems(values=tokenize(core), line=lineno, col=1))
                continue

            # 4) Instrucción: mnemónico + operandos
            tokens = tokenize(core)
            if not tokens:
                raise AssemblyError(f"Línea sin mnemónico: '{core}'")
            mnemonic, args = tokens[0].lower(), tokens[1:]
            operands: List[Operand] = []
            if mnemonic in SPEC:
                operands = _parse_operands(mnemonic, args)
            else:
                # se reporta en la pasada 2 como instrucción no válida
                log.debug("mnemónico desconocido en la línea %d: %s", lineno, mnemonic)
            nodes.append(Instruction(mnemonic=mnemonic, operands=operands, line=lineno, col=1, section=section))
    except AssemblyError as ex:
        diags.append(ex.at(lineno).diagnostic.with_file(filename))
        log.debug("análisis detenido en la línea %d: %s", lineno, ex)

    return nodes, diags
