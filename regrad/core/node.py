# regrad/core/node.py
from __future__ import annotations

import numbers
from enum import Enum
from typing import Optional, Tuple


class Operation(Enum):
    """
    Closed set of primitive operations a non-leaf Value can be produced by.

    Each tag carries its own propagation rule (see ``propagate``), so the
    reverse pass dispatches on the tag instead of on a stored callback.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"

    def propagate(self, node: "Value") -> None:
        """
        Distribute ``node.gradient`` onto its operands according to the local
        derivative of this operation. Contributions are added, never assigned.
        """
        g = node.gradient
        u, v = node.operands
        if self is Operation.ADD:
            # d(u+v)/du = 1, d(u+v)/dv = 1
            u._accumulate(g)
            v._accumulate(g)
        elif self is Operation.SUB:
            # d(u-v)/du = 1, d(u-v)/dv = -1
            u._accumulate(g)
            v._accumulate(-g)
        elif self is Operation.MUL:
            # product rule on forward values; read both before writing (u may be v)
            u_val, v_val = u.value, v.value
            u._accumulate(g * v_val)
            v._accumulate(g * u_val)
        else:  # pragma: no cover - exhaustive over the enum
            raise ValueError(f"No propagation rule for {self!r}")


class Value:
    """
    Scalar node of the differentiation graph.

    Attributes
    ----------
    value : float
        Forward (primal) value.
    gradient : float
        Accumulated d(root)/d(self) from the last reverse pass(es); starts at 0.
    operation : Operation | None
        Primitive that produced this node, None for leaves.
    operands : tuple[Value, ...]
        Inputs of ``operation`` in left-to-right order; empty for leaves.
        Operands are shared references, so one node may feed many consumers.
    label : Optional[str]
        Optional debug name.

    Equality and hashing are structural over (value, gradient, operation,
    label, operands). Both change when the gradient changes, so graph
    traversal keys on ``id(node)`` instead.
    """

    def __init__(self, value, *, label: Optional[str] = None):
        # numbers.Real also covers numpy integer/floating scalars
        if not is_number(value):
            raise TypeError(
                f"Value only accepts real numbers (int, float, numpy scalar), "
                f"but got {type(value)}"
            )
        self._value = float(value)
        self._gradient = 0.0
        self.operation: Optional[Operation] = None
        self.operands: Tuple[Value, ...] = ()
        self.label = label

    @classmethod
    def from_float(cls, value, *, label: Optional[str] = None) -> "Value":
        """Build a leaf from a plain number."""
        return cls(value, label=label)

    @classmethod
    def _from_operation(cls, value, operation: Operation, operands: Tuple["Value", ...]) -> "Value":
        # only the builders in regrad.ops create internal nodes
        out = cls(value)
        out.operation = operation
        out.operands = tuple(operands)
        return out

    @property
    def value(self) -> float:
        return self._value

    @property
    def gradient(self) -> float:
        return self._gradient

    @property
    def is_leaf(self) -> bool:
        return self.operation is None

    def zero_grad(self):
        """Reset this node's gradient to 0. Operands are left untouched."""
        self._gradient = 0.0

    def update(self, factor: float):
        """
        One gradient-descent style step: ``value += factor * gradient``.
        Pass a negative learning rate to descend. The gradient is kept.
        """
        self._value += factor * self._gradient

    def backward(self, seed: float = 1.0):
        """Run reverse-mode differentiation rooted at this node."""
        from .engine import backward
        backward(self, seed=seed)

    def _accumulate(self, delta: float):
        self._gradient += delta

    def _seed(self, seed: float):
        self._gradient = float(seed)

    def __float__(self):
        return self._value

    def __repr__(self):
        op = self.operation.value if self.operation is not None else "leaf"
        return (f"Value({self._value!r}, grad={self._gradient!r}, op={op}, "
                f"label={self.label!r})")

    def _local_key(self):
        return (self._value, self._gradient, self.operation, self.label, len(self.operands))

    def __eq__(self, other):
        """
        Structural comparison of the two graphs, walked pairwise with an
        explicit stack. Each (node, node) pair is compared once, so shared
        sub-expressions and deep chains stay linear.
        """
        if not isinstance(other, Value):
            return NotImplemented
        seen = set()
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b or (id(a), id(b)) in seen:
                continue
            seen.add((id(a), id(b)))
            if a._local_key() != b._local_key():
                return False
            stack.extend(zip(a.operands, b.operands))
        return True

    def __hash__(self):
        # digests built producers first, one per node keyed on id
        from .engine import topological_order
        digest = {}
        for node in reversed(topological_order(self)):
            digest[id(node)] = hash(
                node._local_key() + tuple(digest[id(p)] for p in node.operands)
            )
        return digest[id(self)]

    # Operator overloading for arithmetic operations; foreign types fall
    # through to the other operand's reflected method (e.g. Tensor.__rmul__)
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other) if _is_operand(other) else NotImplemented

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self) if _is_operand(other) else NotImplemented

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self) if _is_operand(other) else NotImplemented

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self) if _is_operand(other) else NotImplemented

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)


def is_number(x) -> bool:
    """True for plain real numbers (including numpy scalars), False for bools and Values."""
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def _is_operand(x) -> bool:
    return isinstance(x, Value) or is_number(x)
