# src/mips_asm/data.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List

from .ast import Directive, DataItems, Encoded, Node
from .diagnostics import AssemblyError, Diagnostic, has_errors, warning
from .utils import u32, is_signed_nbit, is_unsigned_nbit, parse_int

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class DataResult:
    words: List[Encoded]
    diagnostics: List[Diagnostic]

    @property
    def ok(self) -> bool:
        return not has_errors(self.diagnostics)

def _int_arg(tok: str, what: str, *, line: int) -> int:
    try:
        return parse_int(tok)
    except ValueError:
        raise AssemblyError(f"{what} inválido: '{tok}'", line=line,
                            hint="se esperaba un entero decimal o 0x..") from None

def _space_count(n: Directive) -> int:
    if not n.args:
        raise AssemblyError(".space requiere un tamaño", line=n.line)
    count = _int_arg(n.args[0], "Tamaño de .space", line=n.line)
    if count < 0:
        raise AssemblyError(f"Tamaño de .space negativo: {count}", line=n.line)
    return count

def data_words(n: Node) -> List[int]:
    """Valores de las palabras que produce un nodo de .data (vacío si no produce ninguna).

    - .word a, b, c   -> [a, b, c]
    - .space N        -> N ceros (N se cuenta en palabras, no en bytes)
    - literales sueltos -> un valor por literal
    """
    if isinstance(n, DataItems):
        return [_int_arg(v, "Literal", line=n.line) for v in n.values]
    if isinstance(n, Directive) and n.name == ".word":
        return [_int_arg(v, "Literal de .word", line=n.line) for v in n.args]
    if isinstance(n, Directive) and n.name == ".space":
        return [0] * _space_count(n)
    return []

def word_count(n: Node) -> int:
    """Número de palabras de un nodo de .data, validado igual que data_words.

    No materializa los ceros de .space.
    """
    if isinstance(n, Directive) and n.name == ".space":
        return _space_count(n)
    return len(data_words(n))

def linearize_data(nodes: List[Node], *, base: int) -> DataResult:
    """Vuelca el segmento de datos a palabras a partir de la dirección 'base'.

    Se ejecuta tras la pasada 2; 'base' es la dirección siguiente a la última
    instrucción, de modo que código y datos forman una secuencia densa.
    Las etiquetas y los marcadores .data/.text no producen palabras.
    """
    diags: List[Diagnostic] = []
    words: List[Encoded] = []
    addr = base

    try:
        for n in nodes:
            if n.section != ".data":
                continue
            name = n.name if isinstance(n, Directive) else ".word"
            for value in data_words(n):
                if not (is_signed_nbit(value, 32) or is_unsigned_nbit(value, 32)):
                    diags.append(warning(f"Valor {value} no cabe en 32 bits; se trunca", line=n.line))
                words.append(Encoded(word=u32(value), addr=addr, line=n.line, mnemonic=name))
                addr += 1
    except AssemblyError as ex:
        diags.append(ex.diagnostic)
        words = []

    log.debug("datos: %d palabras desde la dirección %d", len(words), base)
    return DataResult(words=words, diagnostics=diags)
