from src.mips_asm.diagnostics import error, warning, has_errors, AssemblyError

def test_error_str():
    d = error("inmediato fuera de rango", line=12, col=8, file="prog.asm", hint="use 16 bits con signo")
    s = str(d)
    assert "prog.asm:12:8:" in s
    assert "ERROR: inmediato fuera de rango" in s
    assert "(pista: use 16 bits con signo)" in s

def test_warning_is_not_error():
    diags = [warning("valor truncado", line=3)]
    assert str(diags[0]) == "3: ADVERTENCIA: valor truncado"
    assert not has_errors(diags)
    assert has_errors(diags + [error("x")])

def test_assembly_error_carries_diagnostic():
    ex = AssemblyError("Registro inválido: $x9", hint="use $t0..$t9")
    assert isinstance(ex, ValueError)
    assert ex.diagnostic.severity == "error"
    assert ex.diagnostic.line is None
    ex.at(7)
    assert ex.diagnostic.line == 7
    # una línea ya fijada no se sobrescribe
    ex.at(9)
    assert ex.diagnostic.line == 7
    assert ex.diagnostic.with_file("a.s").file == "a.s"
