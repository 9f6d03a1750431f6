"""核心模块 - Token系统、转换、校验、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, LITERALS,
    NOT, AND, OR, IMPLIES, is_valid_identifier, RPNValidator
)
from .lexer import tokenize, lex
from .converter import infix_to_postfix
from .printer import render
from .operators import Operators
from .rpn_evaluator import RPNEvaluator
from .parser import parse, ParseError, ParsedExpression

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'LITERALS',
    'NOT', 'AND', 'OR', 'IMPLIES', 'is_valid_identifier', 'RPNValidator',
    'tokenize', 'lex', 'infix_to_postfix', 'render',
    'Operators', 'RPNEvaluator',
    'parse', 'ParseError', 'ParsedExpression'
]
