#!/usr/bin/env python3
"""
Numeric Core - Arithmetic Operators
===================================

The first operand always seeds the accumulator; the three remaining operands
each consume one of SUB, MUL, DIV exactly once.

| Op    | Validity                               |
| ----- | -------------------------------------- |
| `SUB` | Result must not go below zero          |
| `MUL` | Always valid, up to CORE_MAX           |
| `DIV` | Result must be a whole number          |
"""

from enum import Enum
from typing import Optional, Iterator, FrozenSet, Iterable

from ..core.types import CORE_MAX
from ..errors import CoreOverflowError


class Operator(Enum):
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, a: int, b: int) -> Optional[int]:
        """Compute `a OP b`, or None when the operation is not valid."""
        if self is Operator.SUB:
            return a - b if a >= b else None
        if self is Operator.MUL:
            out = a * b
            if out > CORE_MAX:
                raise CoreOverflowError(f"Core value overflow: {a} * {b} exceeds {CORE_MAX}")
            return out
        # DIV
        if b == 0 or a % b != 0:
            return None
        return a // b


# Fixed iteration order
OPERATOR_ORDER = (Operator.SUB, Operator.MUL, Operator.DIV)


class OperatorSet:
    """
    Immutable set of operators still available along an evaluation chain.

    remove() returns a new, smaller set; the set never grows.
    """
    __slots__ = ('_ops',)

    def __init__(self, ops: Iterable[Operator] = ()):
        ops = frozenset(ops)
        for op in ops:
            if not isinstance(op, Operator):
                raise TypeError(f"Expected Operator, got {op!r}")
        self._ops: FrozenSet[Operator] = ops

    @classmethod
    def all(cls) -> "OperatorSet":
        return cls(OPERATOR_ORDER)

    def remove(self, op: Operator) -> "OperatorSet":
        if op not in self._ops:
            raise ValueError(f"Operator {op.name} already consumed")
        return OperatorSet(self._ops - {op})

    def __iter__(self) -> Iterator[Operator]:
        return (op for op in OPERATOR_ORDER if op in self._ops)

    def __contains__(self, op) -> bool:
        return op in self._ops

    def __len__(self) -> int:
        return len(self._ops)

    def __bool__(self) -> bool:
        return bool(self._ops)

    def __eq__(self, other) -> bool:
        return isinstance(other, OperatorSet) and self._ops == other._ops

    def __hash__(self) -> int:
        return hash(self._ops)

    def __repr__(self) -> str:
        return f"OperatorSet({{{', '.join(op.name for op in self)}}})"
