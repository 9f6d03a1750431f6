"""
Tests for core/converter.py (infix to postfix).
"""

from core.converter import infix_to_postfix
from core.lexer import lex, tokenize


def names(raw):
    return [t.name for t in infix_to_postfix(lex(raw))]


class TestInfixToPostfix:

    def test_simple_binary(self):
        assert names("p ∧ q") == ["p", "q", "∧"]

    def test_precedence(self):
        assert names("p ∨ q ∧ r") == ["p", "q", "r", "∧", "∨"]
        assert names("p → q ∨ r") == ["p", "q", "r", "∨", "→"]

    def test_equal_precedence_is_left_associative(self):
        assert names("p ∧ q ∧ r") == ["p", "q", "∧", "r", "∧"]
        assert names("p → q → r") == ["p", "q", "→", "r", "→"]

    def test_parentheses_override_precedence(self):
        assert names("(p ∨ q) ∧ r") == ["p", "q", "∨", "r", "∧"]

    def test_negation_binds_tightest(self):
        assert names("∼p ∧ q") == ["p", "∼", "q", "∧"]
        assert names("p ∧ ∼q") == ["p", "q", "∼", "∧"]
        assert names("∼(p ∧ q)") == ["p", "q", "∧", "∼"]

    def test_accepts_plain_strings(self):
        assert [t.name for t in infix_to_postfix(tokenize("p ∨ q"))] == ["p", "q", "∨"]

    def test_unmatched_close_paren_is_tolerated(self):
        assert names("p ∧ q)") == ["p", "q", "∧"]

    def test_unmatched_open_paren_is_emitted(self):
        assert names("(p ∧ q") == ["p", "q", "∧", "("]

    def test_empty_parentheses(self):
        assert names("()") == []
