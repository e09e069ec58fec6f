import numpy as np
import pytest

from regrad import (Value, bump_gradient, bump_gradients, check_gradients, grad, grads,
                    grads_list, value)


def test_value_helper():
    assert value(Value(2.0)) == 2.0
    assert value(3.5) == 3.5


def test_grad_single_input():
    assert grad(lambda x: x * x * x, 2.0) == 12.0


def test_grads_dict():
    g = grads(lambda v: v["a"] * v["b"] - v["a"], {"a": 2.0, "b": 5.0})
    assert list(g) == ["a", "b"]
    assert g == {"a": 4.0, "b": 2.0}


def test_grads_list_docstring_example():
    assert grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0]) == [4.0, 3.0]


def test_helpers_build_fresh_leaves():
    x = Value(3.0)
    x.backward()
    assert grad(lambda v: v * v, x) == 6.0
    assert x.gradient == 1.0


def test_constant_output_has_zero_gradient():
    assert grads_list(lambda xs: 7.0, [1.0, 2.0]) == [0.0, 0.0]


def test_bump_gradient():
    assert bump_gradient(lambda x: x * x, 3.0) == pytest.approx(6.0, rel=1e-6)


EXPRESSIONS = [
    (lambda xs: xs[0] * xs[1] + xs[2], [1.5, -2.0, 0.7]),
    (lambda xs: (xs[0] - xs[1]) * (xs[0] + xs[1]), [3.0, 1.25]),
    (lambda xs: -(xs[0] * xs[0] * xs[1]) - xs[2] * xs[0], [0.4, 2.2, -1.1]),
    (lambda xs: (xs[0] * xs[0]) * (xs[0] * xs[1]) - xs[1], [1.2, 3.4]),
]


@pytest.mark.parametrize("f, xs", EXPRESSIONS)
def test_reverse_mode_matches_bumping(f, xs):
    ok, analytic, numeric = check_gradients(f, xs)
    assert ok
    assert np.allclose(analytic, numeric, rtol=1e-5, atol=1e-6)


@pytest.mark.parametrize("f, xs", EXPRESSIONS)
def test_forward_value_matches_plain_floats(f, xs):
    y = f([Value(x) for x in xs])
    assert y.value == pytest.approx(f(list(xs)))


def test_check_gradients_reports_mismatch():
    # central difference of x**3 carries an eps**2 error term
    ok, analytic, numeric = check_gradients(lambda xs: xs[0] * xs[0] * xs[0], [1.0], eps=0.5)
    assert not ok
    assert analytic.tolist() == [3.0]
    assert numeric[0] == pytest.approx(3.25)


def test_bump_gradients_shape():
    out = bump_gradients(lambda xs: xs[0] + xs[1] * xs[2], [1.0, 2.0, 3.0])
    assert out.shape == (3,)
    np.testing.assert_allclose(out, [1.0, 3.0, 2.0], rtol=1e-6)
