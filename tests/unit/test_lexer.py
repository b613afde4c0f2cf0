import pytest
from src.mips_asm.lexer import strip_comment, split_label, is_directive, tokenize

# --- strip_comment ---
@pytest.mark.parametrize("src, expected", [
    ("addu $t0,$t1,$t2 # cmt", "addu $t0,$t1,$t2"),
    ("syscall#pegado", "syscall"),
    ("# full comment", ""),
    ("   addu $t0,$t1,$t2   ", "addu $t0,$t1,$t2"),
    ("", ""),
])
def test_strip_comment(src, expected):
    assert strip_comment(src) == expected

# --- split_label ---
@pytest.mark.parametrize("src, label, rest", [
    ("loop: addu $t0,$t1,$t2", "loop", "addu $t0,$t1,$t2"),
    ("main:", "main", ""),
    ("arr: .word 1, 2", "arr", ".word 1, 2"),
    ("notlabel :", None, "notlabel :"),
    (".data", None, ".data"),
])
def test_split_label(src, label, rest):
    got_label, got_rest = split_label(src)
    assert got_label == label
    assert got_rest == rest

@pytest.mark.parametrize("src, expected", [
    (".text", True),
    ("  .data", True),
    ("addu $t0,$t1,$t2", False),
])
def test_is_directive(src, expected):
    assert is_directive(src) == expected

# --- tokenize ---
@pytest.mark.parametrize("src, expected", [
    ("lw $t0, arr($gp)", ["lw", "$t0", "arr", "$gp"]),
    ("lw $t0 4 ( $sp )", ["lw", "$t0", "4", "$sp"]),
    ("addu $t2 $t0,$t1", ["addu", "$t2", "$t0", "$t1"]),
    ("sw $t0, -4($sp)", ["sw", "$t0", "-4", "$sp"]),
    (".word 1,2 , 3", [".word", "1", "2", "3"]),
    ("\tsyscall  ", ["syscall"]),
    ("", []),
])
def test_tokenize(src, expected):
    assert tokenize(src) == expected
