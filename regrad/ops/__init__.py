# regrad/ops/__init__.py

# Convenience re-exports so users can do: from regrad.ops import add, mul, ...
from .arithmetic import add, sub, mul, neg

__all__ = ["add", "sub", "mul", "neg"]
