"""core/operators.py"""
import numpy as np
import logging

from core.token_system import NOT, AND, OR, IMPLIES

logger = logging.getLogger(__name__)


def _unwrap(result):
    """标量输入返回 Python bool，数组输入原样返回"""
    if isinstance(result, np.ndarray):
        return result
    return bool(result)


class Operators:
    """所有连接词的静态方法集合；操作数可以是 bool 或 numpy 布尔数组"""

    @staticmethod
    def _align_operands(operand1, operand2):
        """对齐两个操作数的形状（标量常量与整列混算时使用）"""
        if isinstance(operand1, np.ndarray) and not isinstance(operand2, np.ndarray):
            operand2 = np.full(operand1.shape, bool(operand2))
        elif isinstance(operand2, np.ndarray) and not isinstance(operand1, np.ndarray):
            operand1 = np.full(operand2.shape, bool(operand1))
        return operand1, operand2

    # 一元操作符====================

    @staticmethod
    def negate(operand):
        return _unwrap(np.logical_not(operand))

    # 二元操作符====================

    @staticmethod
    def conjunction(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return _unwrap(np.logical_and(operand1, operand2))

    @staticmethod
    def disjunction(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return _unwrap(np.logical_or(operand1, operand2))

    @staticmethod
    def implication(operand1, operand2):
        """实质蕴含: a → b == ¬a ∨ b"""
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return _unwrap(np.logical_or(np.logical_not(operand1), operand2))


# 符号 -> 实现
UNARY_OPERATORS = {
    NOT: Operators.negate,
}

BINARY_OPERATORS = {
    AND: Operators.conjunction,
    OR: Operators.disjunction,
    IMPLIES: Operators.implication,
}
