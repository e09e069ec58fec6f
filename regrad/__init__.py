# regrad/__init__.py
# Reverse-mode automatic differentiation over scalar nodes

__version__ = "0.1.0"

from .core.node import Operation, Value
from .core.engine import backward, topological_order, zero_grad
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import get_graph_stats, print_graph_summary, print_computation_graph
from .ops.arithmetic import add, sub, mul, neg
from .tensor import Tensor, compute_strides
from .bumping import bump_gradient, bump_gradients, check_gradients
from .config import RegradConfig
from .errors import RegradError, ShapeMismatchError

__all__ = [
    # Core
    'Value',
    'Operation',
    # Engine
    'backward',
    'topological_order',
    'zero_grad',
    # Builders
    'add',
    'sub',
    'mul',
    'neg',
    # Tensor
    'Tensor',
    'compute_strides',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'bump_gradient',
    'bump_gradients',
    'check_gradients',
    'get_graph_stats',
    'print_graph_summary',
    'print_computation_graph',
    # Config / errors
    'RegradConfig',
    'RegradError',
    'ShapeMismatchError',
]
