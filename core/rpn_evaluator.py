"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.token_system import TokenType, LITERALS
from core.operators import UNARY_OPERATORS, BINARY_OPERATORS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _run(token_sequence, assignment):
        """
        栈机主循环；assignment 的值可以是 bool，也可以是等长的 numpy 布尔数组。
        变量缺失时抛出 KeyError（调用方应保证 assignment 覆盖全部自由变量）。
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                if token.name in assignment:
                    stack.append(assignment[token.name])
                elif token.name in LITERALS:
                    stack.append(LITERALS[token.name])
                else:
                    raise KeyError(token.name)

            elif token.type == TokenType.OPERATOR:
                if len(stack) < token.arity:
                    logger.error(f"Insufficient operands for {token.name}")
                    return None

                if token.arity == 1:
                    operand = stack.pop()
                    stack.append(UNARY_OPERATORS[token.name](operand))
                else:
                    # 先弹右操作数，再弹左操作数（→ 不可交换）
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.append(BINARY_OPERATORS[token.name](operand1, operand2))

            else:
                logger.error(f"Unexpected token during evaluation: {token.name!r}")
                return None

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.error(f"RPN expression: {' '.join(t.name for t in token_sequence)}")
            return None
        return stack[0]

    @staticmethod
    def evaluate(token_sequence, assignment):
        """
        Args:
            token_sequence: 已通过校验的后缀Token序列
            assignment: {变量名: bool}
        Returns:
            bool；序列不合法时返回 None
        """
        result = RPNEvaluator._run(token_sequence, assignment)
        if result is None:
            return None
        return bool(result)

    @staticmethod
    def evaluate_columns(token_sequence, columns, length):
        """
        一次栈遍历计算所有行。
        Args:
            token_sequence: 已通过校验的后缀Token序列
            columns: {变量名: 长度为 length 的布尔数组}
            length: 行数（无变量时 columns 为空，需要显式给出）
        Returns:
            长度为 length 的 numpy 布尔数组；序列不合法时返回 None
        """
        result = RPNEvaluator._run(token_sequence, columns)
        if result is None:
            return None
        if not isinstance(result, np.ndarray):
            # 只含字面量的表达式
            return np.full(length, bool(result))
        return result.astype(bool)
