"""core/token_system.py"""
import re
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class TokenType(Enum):
    SPECIAL = "special"  # ( )
    OPERAND = "operand"  # 变量名（或非法文本，留给校验器处理）
    OPERATOR = "operator"  # 操作符


class Token:
    def __init__(self, token_type, name, arity=0, precedence=0):
        self.type = token_type
        self.name = name
        self.arity = arity
        self.precedence = precedence  # 结合强度，非操作符为0

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.name == other.name

    def __hash__(self):
        return hash((self.type, self.name))

    def __repr__(self):
        return f"Token({self.type.value}, {self.name!r})"


NOT = '∼'
AND = '∧'
OR = '∨'
IMPLIES = '→'
LPAREN = '('
RPAREN = ')'

# Token定义字典（固定符号，不接受ASCII别名）
TOKEN_DEFINITIONS = {
    # 括号
    LPAREN: Token(TokenType.SPECIAL, LPAREN),
    RPAREN: Token(TokenType.SPECIAL, RPAREN),

    # 一元操作符
    NOT: Token(TokenType.OPERATOR, NOT, arity=1, precedence=4),

    # 二元操作符（左结合）
    AND: Token(TokenType.OPERATOR, AND, arity=2, precedence=3),
    OR: Token(TokenType.OPERATOR, OR, arity=2, precedence=2),
    IMPLIES: Token(TokenType.OPERATOR, IMPLIES, arity=2, precedence=1),
}

# 保留字面量：合法标识符，但不是自由变量
LITERALS = {'T': True, 'F': False}

_IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def make_token(text):
    """把一段词法文本映射为Token；未知文本一律视为操作数"""
    token = TOKEN_DEFINITIONS.get(text)
    if token is not None:
        return token
    return Token(TokenType.OPERAND, text)


def precedence(token):
    return token.precedence if token.type == TokenType.OPERATOR else 0


def is_valid_identifier(text):
    """首字符为字母或下划线，其余为字母、数字或下划线"""
    return isinstance(text, str) and _IDENTIFIER_PATTERN.fullmatch(text) is not None


def is_literal(token):
    return token.type == TokenType.OPERAND and token.name in LITERALS


class RPNValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """
        计算栈中剩余的值个数。
        操作符出栈不足时返回 -1。
        """
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.OPERATOR:
                if stack_size < token.arity:
                    return -1
                stack_size = stack_size - token.arity + 1
            else:
                stack_size += 1
        return stack_size

    @staticmethod
    def is_well_formed(token_sequence):
        """
        模拟栈检查后缀表达式：
        - 操作数必须是合法标识符
        - 操作符的操作数个数必须足够
        - 结束时栈中恰好剩一个值
        """
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.OPERATOR:
                if stack_size < token.arity:
                    logger.debug(f"Insufficient operands for {token.name}")
                    return False
                stack_size = stack_size - token.arity + 1
            elif token.type == TokenType.OPERAND:
                if not is_valid_identifier(token.name):
                    logger.debug(f"Illegal identifier: {token.name!r}")
                    return False
                stack_size += 1
            else:
                # 残留括号
                logger.debug(f"Unexpected token in postfix: {token.name!r}")
                return False

        if stack_size != 1:
            logger.debug(f"Stack has {stack_size} elements after validation, expected 1")
            return False
        return True
