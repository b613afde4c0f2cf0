'''
clase Diagnostic, helpers de error/advertencia y excepción de error fatal
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores y advertencias, con ubicación opcional (archivo, línea y columna)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

    def with_file(self, file: Optional[str]) -> "Diagnostic":
        """Copia del diagnóstico con el archivo indicado (si no tenía uno)."""
        if file is None or self.file is not None:
            return self
        return Diagnostic(self.severity, self.message, self.line, self.col, self.hint, file)

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

def warning(message: str, *, line: int | None = None, col: int | None = None,
            file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, line, col, hint, file)

def has_errors(diags) -> bool:
    return any(d.severity == "error" for d in diags)


class AssemblyError(ValueError):
    """Error fatal: detiene la pasada en curso sin producir resultado parcial.

    Lleva el diagnóstico asociado; las pasadas lo capturan en su nivel
    superior y lo devuelven dentro de su resultado.
    """

    def __init__(self, message: str, *, line: int | None = None,
                 hint: str | None = None):
        super().__init__(message)
        self.diagnostic = error(message, line=line, hint=hint)

    def at(self, line: int | None) -> "AssemblyError":
        """Completa la línea del diagnóstico si aún no la tenía."""
        d = self.diagnostic
        if d.line is None and line is not None:
            self.diagnostic = error(d.message, line=line, hint=d.hint)
        return self
