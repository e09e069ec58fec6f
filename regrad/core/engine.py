# regrad/core/engine.py
from __future__ import annotations

from typing import List

from ..config import RegradConfig
from ..logger import get_logger
from .node import Value

logger = get_logger(__name__)


def topological_order(root: Value) -> List[Value]:
    """
    Return every node reachable from ``root`` in reverse topological order.

    Each node appears exactly once and only after every reachable node that
    lists it as an operand, so the root comes first and leaves come last.

    Algorithm: iterative post-order DFS over the operand edges with a visited
    set keyed on ``id(node)``. A node is emitted once all of its operands have
    been emitted; reversing the emission order yields consumers before
    producers. A node reached through several consumers at different depths
    is still placed after all of them, which a visited-set BFS does not
    guarantee.
    """
    if not isinstance(root, Value):
        raise TypeError(f"topological_order expects a Value, got {type(root)}")

    visited = set()
    post_order: List[Value] = []
    # (node, operands_expanded) frames stand in for the recursion
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            post_order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        for operand in reversed(node.operands):
            if id(operand) not in visited:
                stack.append((operand, False))

    post_order.reverse()
    return post_order


def backward(root: Value, seed: float = RegradConfig.DEFAULT_SEED):
    """
    Run a single reverse pass from ``root``.

    Args:
        root: scalar output node.
        seed: adjoint planted at the root (d(root)/d(root) = 1 by default).
              The root gradient is set to ``seed``, not added to it.

    Notes:
        - For each node, operands receive ``operand.gradient += node.gradient * d(node)/d(operand)``.
        - Gradients of all other nodes accumulate on top of whatever they
          already hold. Call ``zero_grad`` between independent passes over
          shared leaves, or gradients from both passes are summed.
    """
    order = topological_order(root)
    root._seed(seed)
    logger.debug("backward: %d nodes reachable from %r", len(order), root)

    for node in order:
        if node.operation is None:
            continue  # leaf: sink of the sweep
        node.operation.propagate(node)


def zero_grad(root: Value):
    """
    Set the gradient of every node reachable from ``root`` to zero.

    ``Value.zero_grad`` only resets a single node; this walks the graph.
    """
    order = topological_order(root)
    for node in order:
        node.zero_grad()
    logger.debug("zero_grad: reset %d nodes", len(order))
