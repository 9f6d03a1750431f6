"""真值表生成 - 自由变量发现、赋值枚举、逐行求值"""
import logging
from collections import namedtuple

import numpy as np
import pandas as pd

from config.config import TABLE_CONFIG
from core.token_system import TokenType, is_literal
from core.printer import render
from core.rpn_evaluator import RPNEvaluator
from utils.formatting import format_bool

logger = logging.getLogger(__name__)

Row = namedtuple('Row', ['values', 'result'])


class TruthTableLimitError(ValueError):
    """自由变量过多，表太大"""

    def __init__(self, num_variables, max_variables):
        super().__init__(
            f"Expression has {num_variables} free variables; "
            f"at most {max_variables} are allowed ({2 ** num_variables} rows requested)"
        )
        self.num_variables = num_variables
        self.max_variables = max_variables


class TruthTable:
    """
    生成结果，构造后只读。
    variables: 自由变量（按后缀序列中首次出现的顺序）
    expression: 规范表达式，作为最后一列表头
    rows: Row(values, result) 元组，共 2^n 行
    """

    def __init__(self, variables, expression, rows):
        self._variables = tuple(variables)
        self._expression = expression
        self._rows = tuple(rows)

    @property
    def variables(self):
        return list(self._variables)

    @property
    def expression(self):
        return self._expression

    @property
    def rows(self):
        return list(self._rows)

    @property
    def header(self):
        return list(self._variables) + [self._expression]

    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def to_records(self):
        """每行格式化为 'T'/'F' 字符串列表"""
        return [[format_bool(v) for v in row.values] + [format_bool(row.result)] for row in self._rows]

    def to_frame(self, as_text=True):
        """
        Args:
            as_text: True 时单元格为 'T'/'F'，否则为 bool
        Returns:
            pd.DataFrame，列为 header
        """
        if as_text:
            data = self.to_records()
        else:
            data = [list(row.values) + [row.result] for row in self._rows]
        # 变量名可能与规范表达式重名（如单变量表达式 "p"），不能用 dict 构造
        frame = pd.DataFrame(data, columns=range(len(self.header)))
        frame.columns = self.header
        return frame


class TruthTableGenerator:

    def __init__(self, max_variables=None, warn_variables=None):
        self.max_variables = TABLE_CONFIG["max_variables"] if max_variables is None else max_variables
        self.warn_variables = TABLE_CONFIG["warn_variables"] if warn_variables is None else warn_variables

    @staticmethod
    def free_variables(token_sequence):
        """操作数中去掉字面量，保留首次出现顺序"""
        seen = []
        for token in token_sequence:
            if token.type != TokenType.OPERAND or is_literal(token):
                continue
            if token.name not in seen:
                seen.append(token.name)
        return seen

    @staticmethod
    def assignment_columns(variables):
        """
        第 i 行中 variables[j] 取 i 的第 j 位；
        variables[0] 对应最低位，变化最快。
        """
        num_rows = 1 << len(variables)
        indices = np.arange(num_rows, dtype=np.int64)
        columns = {}
        for j, name in enumerate(variables):
            columns[name] = ((indices >> j) & 1).astype(bool)
        return columns, num_rows

    def _check_size(self, num_variables):
        if num_variables > self.max_variables:
            logger.error(f"Refusing to build a table with {num_variables} variables (max {self.max_variables})")
            raise TruthTableLimitError(num_variables, self.max_variables)
        if num_variables > self.warn_variables:
            logger.warning(f"Building a table with {num_variables} variables ({1 << num_variables} rows)")

    def generate(self, token_sequence, expression=None):
        """
        Args:
            token_sequence: 已通过校验的后缀Token序列
            expression: 规范表达式；为 None 时由 render() 生成
        Returns:
            TruthTable
        """
        variables = self.free_variables(token_sequence)
        self._check_size(len(variables))

        if expression is None:
            expression = render(token_sequence)

        columns, num_rows = self.assignment_columns(variables)
        results = RPNEvaluator.evaluate_columns(token_sequence, columns, num_rows)
        if results is None:
            raise ValueError(f"Cannot evaluate postfix sequence: {' '.join(t.name for t in token_sequence)}")

        # 整列转换为 Python bool 列表，再按行拼接
        value_lists = [columns[name].tolist() for name in variables]
        if value_lists:
            value_rows = zip(*value_lists)
        else:
            value_rows = [()] * num_rows
        rows = [Row(tuple(values), result) for values, result in zip(value_rows, results.tolist())]

        logger.debug(f"Generated {num_rows} rows for {expression}")
        return TruthTable(variables, expression, rows)


def truth_table(token_sequence, expression=None, max_variables=None):
    """便捷函数"""
    return TruthTableGenerator(max_variables=max_variables).generate(token_sequence, expression)
