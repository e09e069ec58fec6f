# regrad/ops/arithmetic.py
from ..core.node import Operation, Value, is_number


def as_value(x):
    """Ensure x is a Value; otherwise wrap a plain number as a constant leaf."""
    if isinstance(x, Value):
        return x
    if is_number(x):
        return Value(x)
    raise TypeError(f"unsupported operand type for regrad arithmetic: {type(x)}")


def _binary(x, y, f, operation):
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value)
      - records (x, y) as operands in that order
      - the propagation rule comes from ``operation``
    Inputs are never mutated; the new node starts with gradient 0.
    """
    x = as_value(x)
    y = as_value(y)
    return Value._from_operation(f(x.value, y.value), operation, (x, y))


def add(x, y): return _binary(x, y, lambda a, b: a + b, Operation.ADD)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, Operation.SUB)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Operation.MUL)


def neg(x):
    """
    Unary negation, recorded as ``mul(x, -1)``.

    The graph gains a constant leaf holding -1.0; its gradient is
    ``x.value`` times the upstream gradient and is of no interest.
    """
    return mul(x, Value(-1.0))
