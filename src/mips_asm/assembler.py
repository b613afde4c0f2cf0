from __future__ import annotations
import argparse, logging, sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .ast import Encoded
from .parser import parse
from .linker import first_pass
from .encoding import encode
from .data import linearize_data
from .diagnostics import Diagnostic, has_errors
from .writers import write_hex

log = logging.getLogger(__name__)

@dataclass
class AssembleResult:
    """Resultado completo del ensamblado.

    words contiene código y datos en orden de dirección; queda vacío si
    alguna etapa terminó con un error fatal (fatal=True).
    """
    words: List[Encoded] = field(default_factory=list)
    symtab: Dict[str, int] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    fatal: bool = False

    @property
    def ok(self) -> bool:
        return not has_errors(self.diagnostics)

def assemble_lines(lines: Iterable[str], *, filename: str | None = None) -> AssembleResult:
    """Analiza, hace PASADA 1, PASADA 2 y vuelca el segmento de datos.

    Se detiene en la primera etapa con error fatal, sin resultado parcial.
    """
    res = AssembleResult()

    def _add(diags: Iterable[Diagnostic]) -> None:
        res.diagnostics.extend(d.with_file(filename) for d in diags)

    nodes, diags_parse = parse(lines, filename=filename)
    _add(diags_parse)
    if has_errors(diags_parse):
        res.fatal = True
        return res

    link = first_pass(nodes)
    _add(link.diagnostics)
    res.symtab = dict(link.symtab)
    if not link.ok:
        res.fatal = True
        return res

    enc = encode(nodes, link.symtab)
    _add(enc.diagnostics)
    # una instrucción no válida no es fatal: se reporta y se sigue
    if enc.fatal:
        res.fatal = True
        return res

    data = linearize_data(nodes, base=enc.next_addr)
    _add(data.diagnostics)
    if not data.ok:
        res.fatal = True
        return res

    res.words = list(enc.words) + list(data.words)
    log.debug("ensamblado: %d palabras (%d direcciones de código, %d de datos)",
              len(res.words), link.text_size, link.data_size)
    return res

def assemble_text(text: str, *, filename: str | None = None) -> AssembleResult:
    return assemble_lines(text.splitlines(), filename=filename)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="MIPS subset two-pass assembler")
    ap.add_argument("source", help="archivo .asm/.s de entrada")
    args = ap.parse_args(argv)

    logging.basicConfig(format="%(levelname)s:%(name)s: %(message)s",
                        level=logging.WARNING, stream=sys.stderr)

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    res = assemble_text(text, filename=args.source)

    for d in res.diagnostics:
        print(d, file=sys.stderr)

    if res.fatal:
        return 1

    write_hex(res.words, sys.stdout)
    return 0 if res.ok else 1

if __name__ == "__main__":
    raise SystemExit(main())
