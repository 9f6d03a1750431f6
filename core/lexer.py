"""词法分析 - 按操作符、括号和空白切分输入"""
import re
import logging

from core.token_system import TOKEN_DEFINITIONS, make_token

logger = logging.getLogger(__name__)

# 操作符/括号作为捕获组保留，空白丢弃
_SPLIT_PATTERN = re.compile(
    '([' + ''.join(re.escape(symbol) for symbol in TOKEN_DEFINITIONS) + r'])|\s+'
)


def tokenize(raw_text):
    """
    Args:
        raw_text: 用户输入的原始字符串
    Returns:
        非空、已去空白的子串列表，顺序与输入一致
    """
    if not raw_text:
        return []
    pieces = _SPLIT_PATTERN.split(raw_text)
    return [piece for piece in pieces if piece and piece.strip()]


def lex(raw_text):
    """tokenize 之后把每段文本映射为 Token"""
    tokens = [make_token(piece) for piece in tokenize(raw_text)]
    logger.debug(f"Lexed {len(tokens)} tokens: {' '.join(t.name for t in tokens)}")
    return tokens
