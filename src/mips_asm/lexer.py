'''
separación de una línea MIPS en comentario, etiqueta y tokens
'''

from __future__ import annotations
import re
from typing import List, Optional, Tuple

# En MIPS el único comentario es '#' hasta fin de línea
COMMENT_CHAR = "#"

LABEL_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*):\s*(.*)$")

# Separadores de tokens: espacios, comas y paréntesis.
# 'lw $t0, 4($sp)' y 'lw $t0 4 $sp' dan los mismos tokens.
TOKEN_SPLIT_RE = re.compile(r"[\s,()]+")

def strip_comment(line: str) -> str:
    return line.split(COMMENT_CHAR, 1)[0].strip()

def split_label(line: str) -> Tuple[Optional[str], str]:
    """(etiqueta, resto) si la línea empieza con 'nombre:'; si no, (None, línea)."""
    m = LABEL_RE.match(line)
    if not m:
        return None, line
    return m.group(1), m.group(2).strip()

def is_directive(line: str) -> bool:
    return line.lstrip().startswith('.')

def tokenize(line: str) -> List[str]:
    """Trocea una instrucción, directiva o línea de datos; descarta tokens vacíos.

    Es el único tokenizador: el mnemónico o la directiva queda en la posición 0.
    """
    return [t for t in TOKEN_SPLIT_RE.split(line.strip()) if t]
