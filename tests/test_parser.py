"""
Tests for core/parser.py and core/printer.py canonicalization.
"""

import pytest

from core.parser import ParseError, parse
from core.printer import render
from core.token_system import make_token


class TestRender:

    def test_operand(self):
        assert render([make_token("p")]) == "p"

    def test_negation_has_no_space(self):
        assert render([make_token("p"), make_token("∼")]) == "(∼p)"

    def test_binary_operand_order(self):
        seq = [make_token(n) for n in ["p", "q", "→"]]
        assert render(seq) == "(p → q)"


class TestParse:

    @pytest.mark.parametrize("raw, canonical", [
        ("p", "p"),
        ("p ∨ q ∧ r", "(p ∨ (q ∧ r))"),
        ("p → q ∨ r", "(p → (q ∨ r))"),
        ("(p → q) ∨ r", "((p → q) ∨ r)"),
        ("∼p ∧ q", "((∼p) ∧ q)"),
        ("∼(p ∧ q)", "(∼(p ∧ q))"),
        ("p ∧ q ∧ r", "((p ∧ q) ∧ r)"),
        ("((p))", "p"),
        ("_p ∧ q2", "(_p ∧ q2)"),
        ("T ∨ p", "(T ∨ p)"),
    ])
    def test_canonical_form(self, raw, canonical):
        assert parse(raw).canonical == canonical

    @pytest.mark.parametrize("raw", ["∧ p", "p ∧", "∼", "()", "1p ∧ q", "p q", "(p ∧ q", "p & q", "∼∼p"])
    def test_rejected(self, raw):
        with pytest.raises(ParseError):
            parse(raw)

    def test_unmatched_close_paren_is_accepted(self):
        parsed = parse("p ∧ q)")
        assert parsed.canonical == "(p ∧ q)"
        assert [t.name for t in parsed.postfix] == ["p", "q", "∧"]

    def test_double_negation_after_binary_operator(self):
        # 第二个 ∼ 按 ≥ 规则先弹出第一个 ∼，结果作用到左操作数上
        parsed = parse("p ∧ ∼ ∼ q")
        assert [t.name for t in parsed.postfix] == ["p", "∼", "q", "∼", "∧"]
        assert parsed.canonical == "((∼p) ∧ (∼q))"

    def test_error_carries_context(self):
        with pytest.raises(ParseError) as excinfo:
            parse("p ∧")
        assert excinfo.value.raw_text == "p ∧"
        assert [t.name for t in excinfo.value.postfix] == ["p", "∧"]
        assert str(excinfo.value) == "Invalid expression."

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_blank_input_is_idle(self, raw):
        assert parse(raw) is None

    @pytest.mark.parametrize("raw", [
        "p ∨ q ∧ r",
        "∼p → ∼(q ∨ r) ∧ s",
        "a → b → c",
        "∼(∼p)",
        "((x ∧ y) ∨ ∼z) → w",
    ])
    def test_canonical_form_is_a_fixed_point(self, raw):
        first = parse(raw)
        second = parse(first.canonical)
        assert second.canonical == first.canonical
        assert second.postfix == first.postfix
