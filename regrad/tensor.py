# regrad/tensor.py
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .core.node import Value, is_number
from .errors import ShapeMismatchError
from .ops import arithmetic


def compute_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Row-major strides: stride[i] = prod(shape[i+1:]), last stride 1.

    Example:
        (2, 3, 4) -> (12, 4, 1)
    """
    if len(shape) == 0:
        return ()
    tail = np.cumprod([1] + [int(s) for s in shape[:0:-1]])
    return tuple(int(s) for s in tail[::-1])


def _size(shape: Sequence[int]) -> int:
    return int(np.prod(shape, dtype=np.int64))


def _as_shape(shape: Sequence[int]) -> Tuple[int, ...]:
    """Normalise to a tuple of ints; every dimension must be non-negative."""
    shape = tuple(int(s) for s in shape)
    if any(s < 0 for s in shape):
        raise ShapeMismatchError(f"negative dimension in shape {shape}", got=shape)
    return shape


class Tensor:
    """
    N-dimensional arrangement of shared ``Value`` nodes.

    A Tensor owns no numeric storage: ``elements`` are references to graph
    nodes, so an element updated through one tensor is updated for every
    tensor and expression that shares it. Arithmetic is element-wise and
    builds one new node per element.

    Attributes:
        elements: flat row-major list of Value, ``len(elements) == size``
        shape:    tuple of dimension sizes
        strides:  row-major strides derived from shape
        size:     product of shape
    """

    def __init__(self, elements: Iterable[Value], shape: Sequence[int]):
        elements = list(elements)
        shape = _as_shape(shape)
        size = _size(shape)
        if len(elements) != size:
            raise ShapeMismatchError(
                f"{len(elements)} elements cannot fill shape {shape} (size {size})",
                expected=size, got=len(elements),
            )
        for e in elements:
            if not isinstance(e, Value):
                raise TypeError(f"Tensor elements must be Value, got {type(e)}")
        self.elements: List[Value] = elements
        self.shape = shape
        self.strides = compute_strides(shape)
        self.size = size

    @classmethod
    def zeros(cls, shape: Sequence[int]) -> "Tensor":
        """Tensor of distinct leaves holding 0.0."""
        shape = _as_shape(shape)
        return cls([Value(0.0) for _ in range(_size(shape))], shape)

    @classmethod
    def ones(cls, shape: Sequence[int]) -> "Tensor":
        """Tensor of distinct leaves holding 1.0."""
        shape = _as_shape(shape)
        return cls([Value(1.0) for _ in range(_size(shape))], shape)

    @classmethod
    def from_values(cls, data) -> "Tensor":
        """
        Build a tensor of fresh leaves from nested sequences or an ndarray.

        EXAMPLE:
        >>> t = Tensor.from_values([[1, 2, 3], [4, 5, 6]])
        >>> t.shape, t.strides
        ((2, 3), (3, 1))
        """
        arr = np.asarray(data, dtype=np.float64)
        return cls([Value(float(x)) for x in arr.ravel()], arr.shape)

    def __repr__(self):
        return f"Tensor(values={self.numpy().tolist()}, shape={self.shape})"

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self.elements)

    def numpy(self) -> np.ndarray:
        """Snapshot of the element values as a float64 array of ``shape``."""
        return np.array([e.value for e in self.elements], dtype=np.float64).reshape(self.shape)

    def grad_numpy(self) -> np.ndarray:
        """Snapshot of the element gradients as a float64 array of ``shape``."""
        return np.array([e.gradient for e in self.elements], dtype=np.float64).reshape(self.shape)

    def item(self, *index: int) -> Value:
        """Element at a multi-index, located through the strides."""
        if len(index) != len(self.shape):
            raise IndexError(f"expected {len(self.shape)} indices for shape {self.shape}, got {len(index)}")
        flat = 0
        for i, dim, stride in zip(index, self.shape, self.strides):
            if not 0 <= i < dim:
                raise IndexError(f"index {index} out of range for shape {self.shape}")
            flat += i * stride
        return self.elements[flat]

    def reshape(self, shape: Sequence[int]) -> "Tensor":
        """
        View the same element nodes under a new shape.

        Raises ShapeMismatchError when the element count would change.
        """
        shape = _as_shape(shape)
        if _size(shape) != self.size:
            raise ShapeMismatchError(
                f"cannot reshape size {self.size} tensor {self.shape} into {shape}",
                expected=self.size, got=_size(shape),
            )
        return Tensor(self.elements, shape)

    # ---------------- element-wise arithmetic ---------------- #
    def _check_same_shape(self, other: "Tensor", op: str):
        if not isinstance(other, Tensor):
            raise TypeError(f"{op}: expected Tensor, got {type(other)}")
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"{op}: shape mismatch {self.shape} vs {other.shape}",
                expected=self.shape, got=other.shape,
            )

    def _elementwise(self, other: "Tensor", builder, op: str) -> "Tensor":
        self._check_same_shape(other, op)
        data = [builder(u, v) for u, v in zip(self.elements, other.elements)]
        return Tensor(data, self.shape)

    def add(self, other: "Tensor") -> "Tensor":
        return self._elementwise(other, arithmetic.add, "add")

    def mul(self, other) -> "Tensor":
        """
        Element-wise product with a same-shaped tensor, or with a scalar.

        A scalar (Value or number) is broadcast by filling a tensor of this
        shape with the same node reference, so its gradient collects the sum
        over all elements.
        """
        if isinstance(other, Tensor):
            return self._elementwise(other, arithmetic.mul, "mul")
        if isinstance(other, Value) or is_number(other):
            scalar = arithmetic.as_value(other)
            return self._elementwise(Tensor([scalar] * self.size, self.shape), arithmetic.mul, "mul")
        raise TypeError(f"cannot multiply Tensor by {type(other)}")

    def neg(self) -> "Tensor":
        return self.mul(Value(-1.0))

    def sub(self, other: "Tensor") -> "Tensor":
        self._check_same_shape(other, "sub")
        return self.add(other.neg())

    def __add__(self, other):
        return self.add(other) if isinstance(other, Tensor) else NotImplemented

    def __sub__(self, other):
        return self.sub(other) if isinstance(other, Tensor) else NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Tensor, Value)) or is_number(other):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other):
        # scalar * tensor; multiplication of nodes commutes in value and gradient
        if isinstance(other, Value) or is_number(other):
            return self.mul(other)
        return NotImplemented

    def __neg__(self):
        return self.neg()

    # ---------------- gradients ---------------- #
    def gradient(self) -> "Tensor":
        """Snapshot tensor of fresh leaves holding each element's current gradient."""
        return Tensor([Value(e.gradient) for e in self.elements], self.shape)

    def zero_grad(self):
        for e in self.elements:
            e.zero_grad()

    def update(self, factor: float):
        for e in self.elements:
            e.update(factor)

    def backward(self):
        """Reducing a tensor to a scalar root is not supported."""
        raise NotImplementedError("Tensor backward")
