'''
 bit-twiddling (u32, campos de ancho fijo, enteros literales) y formato hexadecimal
'''

from __future__ import annotations
import re

# Máscara para 32 bits sin signo
U32_MASK = 0xFFFFFFFF

HEX_INT_RE = re.compile(r"^[+-]?0[xX][0-9a-fA-F]+$")
DEC_INT_RE = re.compile(r"^[+-]?\d+$")

# Tabla de conversión nibble -> dígito hexadecimal
_HEX_DIGITS = "0123456789abcdef"

def u32(x: int) -> int:
    """Fuerza el valor al rango de 32 bits sin signo."""
    return x & U32_MASK

def fit_bits(x: int, bits: int) -> int:
    """Trunca x a 'bits' bits (complemento a dos para negativos)."""
    if bits <= 0:
        raise ValueError("bits debe ser positivo")
    return x & ((1 << bits) - 1)

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def is_signed_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [-(2^(n-1)), 2^(n-1)-1] (con signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    lo = -(1 << (n - 1))
    hi = (1 << (n - 1)) - 1
    return lo <= x <= hi

def is_int_literal(token: str) -> bool:
    t = token.strip()
    return bool(HEX_INT_RE.match(t) or DEC_INT_RE.match(t))

def parse_int(token: str) -> int:
    """Entero literal decimal o hexadecimal (0x..), con signo opcional.

    Lanza ValueError si el token no es un literal entero.
    """
    t = token.strip()
    if HEX_INT_RE.match(t):
        return int(t, 16)
    if DEC_INT_RE.match(t):
        return int(t, 10)
    raise ValueError(f"Literal entero inválido: '{token}'")

def to_hex32(x: int) -> str:
    """Representación hexadecimal de 32 bits en minúsculas, nibble a nibble.

    Recorre los ocho grupos de 4 bits empezando por el más significativo y
    traduce cada uno con una tabla fija de 16 entradas. No interpreta signo:
    es sólo un cambio de base del patrón de bits.
    """
    w = u32(x)
    digits = []
    for shift in range(28, -1, -4):
        digits.append(_HEX_DIGITS[(w >> shift) & 0xF])
    return "".join(digits)
