"""Numeric Core - Operators"""

from .arithmetic import Operator, OperatorSet, OPERATOR_ORDER

__all__ = [
    'Operator', 'OperatorSet', 'OPERATOR_ORDER',
]
