"""中缀 -> 后缀（调度场算法）"""
import logging

from core.token_system import TokenType, LPAREN, RPAREN, make_token, precedence

logger = logging.getLogger(__name__)


def infix_to_postfix(tokens):
    """
    把中缀Token序列转换为后缀（RPN）序列。
    这里不做任何语义检查：括号不匹配、缺少操作数等都会照常产出序列，
    由 RPNValidator 统一拒绝。
    Args:
        tokens: Token 列表（也接受 tokenize 得到的字符串列表）
    Returns:
        后缀顺序的 Token 列表
    """
    stack = []
    result = []

    for token in tokens:
        if isinstance(token, str):
            token = make_token(token)

        if token.type == TokenType.SPECIAL and token.name == LPAREN:
            stack.append(token)
        elif token.type == TokenType.SPECIAL and token.name == RPAREN:
            while stack and stack[-1].name != LPAREN:
                result.append(stack.pop())
            if stack:
                stack.pop()  # 丢弃 '('
            else:
                logger.debug("Unmatched ')' ignored during conversion")
        elif token.type == TokenType.OPERATOR:
            # 相同优先级先出栈 => 左结合
            while stack and stack[-1].name != LPAREN and precedence(stack[-1]) >= precedence(token):
                result.append(stack.pop())
            stack.append(token)
        else:
            result.append(token)

    # 剩余的操作符（以及多余的 '('）全部输出
    while stack:
        result.append(stack.pop())

    return result
