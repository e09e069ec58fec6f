"""
Finite-difference bumping.

Central differences used to cross-check reverse-mode gradients:

    df/dx_i ~ [f(x + eps*e_i) - f(x - eps*e_i)] / (2*eps)

Every evaluation rebuilds the graph from fresh leaves, so bumping never
touches the gradients of an existing graph.
"""

from typing import Callable, List, Sequence, Tuple

import numpy as np

from .config import RegradConfig
from .core.node import Value
from .core.seeds import grads_list
from .logger import get_logger

logger = get_logger(__name__)


def _evaluate(f: Callable[[List[Value]], Value], xs: Sequence[float]) -> float:
    y = f([Value(float(x)) for x in xs])
    return y.value if isinstance(y, Value) else float(y)


def bump_gradients(f: Callable[[List[Value]], Value], xs: Sequence[float],
                   eps: float = RegradConfig.BUMP_EPSILON) -> np.ndarray:
    """
    Central-difference gradient of y=f(xs) w.r.t. every input.

    Args:
        f: function taking a list of Values and returning a Value
        xs: point at which to differentiate
        eps: bump size

    Returns:
        np.ndarray of partials in the order of ``xs``. Costs 2*len(xs) evaluations.
    """
    x0 = np.asarray(xs, dtype=np.float64)
    out = np.zeros_like(x0)
    for i in range(x0.size):
        up = x0.copy()
        down = x0.copy()
        up[i] += eps
        down[i] -= eps
        out[i] = (_evaluate(f, up) - _evaluate(f, down)) / (2 * eps)
    return out


def bump_gradient(f: Callable[[Value], Value], x0: float,
                  eps: float = RegradConfig.BUMP_EPSILON) -> float:
    """Single-input form of ``bump_gradients``."""
    return float(bump_gradients(lambda xs: f(xs[0]), [x0], eps)[0])


def check_gradients(f: Callable[[List[Value]], Value], xs: Sequence[float],
                    eps: float = RegradConfig.BUMP_EPSILON,
                    rtol: float = RegradConfig.CHECK_RTOL,
                    atol: float = RegradConfig.CHECK_ATOL) -> Tuple[bool, np.ndarray, np.ndarray]:
    """
    Compare reverse-mode gradients of f at xs against bumping.

    Returns:
        (ok, analytic, numeric) where ok is ``np.allclose(analytic, numeric, rtol, atol)``.
    """
    analytic = np.asarray(grads_list(f, xs), dtype=np.float64)
    numeric = bump_gradients(f, xs, eps)
    ok = bool(np.allclose(analytic, numeric, rtol=rtol, atol=atol))
    if not ok:
        logger.warning("gradient check failed: analytic=%s numeric=%s", analytic, numeric)
    return ok, analytic, numeric
