from src.mips_asm.parser import parse
from src.mips_asm.linker import first_pass, DATA_STRIDE, DATA_LABEL

def _link(lines):
    nodes, diags = parse(lines)
    assert not diags
    return first_pass(nodes)

def test_code_labels_count_preceding_instructions():
    r = _link([
        ".text",
        "start:",
        "  addiu $t0, $zero, 1",
        "  addu $t1, $t0, $t0",
        "loop:",
        "end:",
        "  beq $t1, $zero, loop",
    ])
    assert r.ok
    assert r.symtab == {"start": 0, "loop": 2, "end": 2}
    assert r.text_size == 3
    assert DATA_LABEL not in r.symtab

def test_label_on_first_line_without_text_marker():
    r = _link(["main:", "addiu $t0, $zero, 1", "syscall"])
    assert r.symtab["main"] == 0

def test_label_and_instruction_on_same_line():
    r = _link(["syscall", "loop: addu $t0, $t0, $t1", "j loop"])
    assert r.symtab["loop"] == 1
    assert r.text_size == 3

def test_unknown_mnemonic_still_takes_an_address():
    r = _link(["foo $t0", "after:", "syscall"])
    assert r.symtab["after"] == 1

def test_data_layout_uses_stride():
    r = _link([
        ".text",
        "main: lw $t0, b($gp)",
        "  syscall",
        ".data",
        "a: .word 7",
        "b: .word 1, 2",
        "   9",
        "c: .space 2",
        "d: .word -1",
    ])
    assert r.ok
    assert DATA_STRIDE == 4
    assert r.symtab[DATA_LABEL] == 2
    assert r.symtab["a"] == 2
    assert r.symtab["b"] == 2 + 1 * DATA_STRIDE
    assert r.symtab["c"] == 2 + 4 * DATA_STRIDE
    assert r.symtab["d"] == 2 + 6 * DATA_STRIDE
    assert r.data_size == 7

def test_data_before_text():
    r = _link([".data", "arr: .word 1, 2, 3", ".text", "lw $t0, arr($gp)", "next:", "syscall"])
    assert r.symtab[DATA_LABEL] == 0
    assert r.symtab["arr"] == 0
    assert r.symtab["next"] == 1

def test_custom_stride():
    nodes, _ = parse([".data", "a: .word 1, 2", "b: .word 3"])
    r = first_pass(nodes, data_stride=1)
    assert r.symtab["b"] == 2

def test_duplicate_label():
    nodes, _ = parse(["L: syscall", "L: syscall"])
    r = first_pass(nodes)
    assert not r.ok
    assert any("redefinida" in d.message for d in r.diagnostics)
    assert r.diagnostics[-1].line == 2

def test_bad_space_count_is_fatal():
    nodes, _ = parse([".data", "buf: .space abc", "ok: .word 1"])
    r = first_pass(nodes)
    assert not r.ok
    assert "Tamaño de .space inválido" in r.diagnostics[0].message
    assert "ok" not in r.symtab

def test_missing_space_count_is_fatal():
    nodes, _ = parse([".data", "buf: .space"])
    r = first_pass(nodes)
    assert not r.ok
    assert ".space requiere" in r.diagnostics[0].message

def test_word_outside_data_is_fatal():
    nodes, _ = parse([".word 3"])
    r = first_pass(nodes)
    assert not r.ok

def test_unsupported_directive_is_a_warning():
    nodes, _ = parse([".globl main", "main: syscall"])
    r = first_pass(nodes)
    assert r.ok
    assert r.diagnostics[0].severity == "advertencia"
    assert r.symtab["main"] == 0
