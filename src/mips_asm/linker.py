# src/mips_asm/linker.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .ast import Label, Directive, Instruction, Node
from .diagnostics import AssemblyError, Diagnostic, has_errors, warning
from .data import word_count

log = logging.getLogger(__name__)

# Paso de los desplazamientos dentro de .data: 4 unidades por palabra,
# mientras que las direcciones de código avanzan de 1 en 1.
DATA_STRIDE = 4

# Pseudo-etiqueta que marca el inicio del segmento de datos en la tabla
DATA_LABEL = ".data"

DATA_DIRS = {".word", ".space"}
SECTION_DIRS = {".text", ".data"}

# ---------- Resultados de la pasada 1 ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: Dict[str, int]
    text_size: int              # instrucciones (palabras de código)
    data_size: int              # palabras de datos
    diagnostics: List[Diagnostic]

    @property
    def ok(self) -> bool:
        return not has_errors(self.diagnostics)

# ---------- Pasada 1 (tabla de etiquetas) ----------

def first_pass(
    nodes: List[Node],
    *,
    data_stride: int = DATA_STRIDE,
) -> LinkResult:
    """Asigna una dirección de palabra a cada etiqueta.

    Etiquetas de código: número de instrucciones que las preceden.
    Etiquetas de datos: inicio de .data + desplazamiento acumulado, que avanza
    data_stride por cada palabra de .word/.space/literal.
    La primera directiva .data se registra como etiqueta '.data'.
    """
    symtab: Dict[str, int] = {}
    diags: List[Diagnostic] = []

    lc_text = 0
    data_start: Optional[int] = None
    data_offset = 0
    data_count = 0

    def define(name: str, addr: int, line: int) -> None:
        if name in symtab:
            raise AssemblyError(f"Etiqueta redefinida: {name}", line=line)
        symtab[name] = addr

    try:
        for n in nodes:
            if isinstance(n, Instruction):
                if n.section != ".text":
                    raise AssemblyError("Instrucción fuera de la sección .text", line=n.line)
                lc_text += 1
                continue

            if isinstance(n, Label):
                if n.section == ".data":
                    # data_start ya está fijado: la sección sólo cambia con '.data'
                    define(n.name, data_start + data_offset, n.line)
                else:
                    define(n.name, lc_text, n.line)
                continue

            if isinstance(n, Directive) and n.name in SECTION_DIRS:
                if n.name == ".data" and data_start is None:
                    data_start = lc_text
                    define(DATA_LABEL, data_start, n.line)
                continue

            if isinstance(n, Directive) and n.name not in DATA_DIRS:
                diags.append(warning(f"Directiva no soportada, se ignora: {n.name}", line=n.line, col=n.col))
                continue

            if n.section != ".data":
                raise AssemblyError(f"{n.name if isinstance(n, Directive) else 'Dato'} sólo permitido en .data",
                                    line=n.line)
            words = word_count(n)
            data_offset += data_stride * words
            data_count += words
    except AssemblyError as ex:
        diags.append(ex.diagnostic)
        log.debug("pasada 1 detenida: %s", ex)

    log.debug("pasada 1: %d etiquetas, %d instrucciones, %d palabras de datos",
              len(symtab), lc_text, data_count)
    return LinkResult(
        symtab=symtab,
        text_size=lc_text,
        data_size=data_count,
        diagnostics=diags,
    )
