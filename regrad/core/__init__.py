# regrad/core/__init__.py

"""
Core public API of regrad.

Exports:
    Value             : Differentiable scalar node.
    Operation         : Tag of the primitive that produced a node.
    backward          : Run a reverse pass rooted at a node.
    zero_grad         : Reset gradients of every node reachable from a root.
    topological_order : Consumers-before-producers ordering used by backward.
    grad, grads, grads_list, value : Convenience wrappers around one reverse pass.
"""

from .node import Operation, Value
from .engine import backward, topological_order, zero_grad
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Operation", "Value",
    "backward", "topological_order", "zero_grad",
    "grad", "grads", "grads_list", "value",
]
