"""后缀 -> 全括号中缀"""
from core.token_system import TokenType, NOT


def render(token_sequence):
    """每一次操作符应用都显式加括号，例如 p q r ∧ ∨ -> (p ∨ (q ∧ r))"""
    stack = []
    for token in token_sequence:
        if token.type == TokenType.OPERATOR:
            if token.name == NOT:
                stack.append(f"({NOT}{stack.pop()})")
            else:
                right = stack.pop()
                left = stack.pop()
                stack.append(f"({left} {token.name} {right})")
        else:
            stack.append(token.name)
    return stack.pop()
