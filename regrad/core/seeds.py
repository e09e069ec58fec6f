# regrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Every helper here builds fresh leaves, so no
# gradient from an earlier call can leak into the result.
#-----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from .engine import backward
from .node import Value


def value(x: Any) -> Any:
    """Return the numeric value of a Value; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Value) else x


def _leaf(v: Any, *, name: str) -> Value:
    """Fresh leaf carrying the numeric value of ``v`` (a number or a Value)."""
    return Value(v.value if isinstance(v, Value) else v, label=name)


def _as_output(y: Any) -> Value:
    # f may return a plain number when it ignores its inputs
    return y if isinstance(y, Value) else Value(y, label="y")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Value], Value], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Runs one reverse pass over a freshly built graph.
    """
    x = _leaf(x0, name="x")
    y = _as_output(f(x))
    backward(y)
    return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Value]], Value],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Value} and returning a Value
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    vars_ad: Dict[str, Value] = {k: _leaf(v, name=k) for k, v in inputs.items()}
    y = _as_output(f(vars_ad))
    backward(y)
    return {k: vars_ad[k].gradient for k in inputs.keys()}


def grads_list(f: Callable[[List[Value]], Value],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Value] = [_leaf(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _as_output(f(xs))
    backward(y)
    return [x.gradient for x in xs]
