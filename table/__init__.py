"""真值表模块"""
from .generator import TruthTable, TruthTableGenerator, TruthTableLimitError, Row, truth_table

__all__ = ['TruthTable', 'TruthTableGenerator', 'TruthTableLimitError', 'Row', 'truth_table']
