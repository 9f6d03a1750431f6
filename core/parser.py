"""解析入口：原始字符串 -> 规范表达式 + 后缀序列"""
import logging

from core.lexer import lex
from core.converter import infix_to_postfix
from core.printer import render
from core.token_system import RPNValidator

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """表达式不合法"""

    def __init__(self, raw_text, postfix=None, message="Invalid expression."):
        super().__init__(message)
        self.raw_text = raw_text
        self.postfix = postfix or []


class ParsedExpression:
    """parse() 的成功结果"""

    def __init__(self, canonical, postfix, tokens):
        self.canonical = canonical  # 全括号中缀
        self.postfix = postfix
        self.tokens = tokens

    def __repr__(self):
        return f"ParsedExpression({self.canonical!r})"


def parse(raw_text):
    """
    Args:
        raw_text: 用户输入
    Returns:
        ParsedExpression；输入为空或只有空白时返回 None（空闲状态，不是错误）
    Raises:
        ParseError: 后缀校验失败
    """
    if raw_text is None or not raw_text.strip():
        return None

    tokens = lex(raw_text)
    postfix = infix_to_postfix(tokens)

    if not RPNValidator.is_well_formed(postfix):
        logger.info(f"Rejected expression {raw_text!r} (postfix: {' '.join(t.name for t in postfix)}, "
                    f"stack size: {RPNValidator.calculate_stack_size(postfix)})")
        raise ParseError(raw_text, postfix)

    canonical = render(postfix)
    logger.debug(f"Parsed {raw_text!r} -> {canonical}")
    return ParsedExpression(canonical, postfix, tokens)
