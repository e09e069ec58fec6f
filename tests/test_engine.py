import pytest

from regrad import Value, backward, topological_order, zero_grad


def test_reference_scenario():
    a = Value(1.2)
    b = Value(3.4)
    c = (a * a) * b
    assert c.value == pytest.approx(4.896)

    c.backward()
    assert a.gradient == pytest.approx(8.16)
    assert b.gradient == pytest.approx(1.44)
    assert c.gradient == 1.0


def test_shared_operand_sums_contributions():
    x = Value(3.0)
    y = x * x
    y.backward()
    assert x.gradient == 2 * x.value


def test_add_and_sub_gradients():
    u, v = Value(2.0), Value(7.0)
    out = u - v + u
    out.backward()
    assert u.gradient == 2.0
    assert v.gradient == -1.0


def test_diamond_reached_at_different_depths():
    # y feeds w directly and through z -> a; a breadth-first sweep that
    # visits y once would propagate it before z has contributed
    x = Value(2.0)
    y = x * x
    z = y * 3.0
    a = z * 1.0
    w = a + y
    w.backward()
    assert y.gradient == 4.0
    assert x.gradient == 16.0


def test_sub_matches_composed_negation():
    u1, v1 = Value(1.7), Value(-0.3)
    u2, v2 = Value(1.7), Value(-0.3)
    direct = (u1 - v1) * v1
    composed = (u2 + (-v2)) * v2
    direct.backward()
    composed.backward()
    assert direct.value == composed.value
    assert u1.gradient == u2.gradient
    assert v1.gradient == v2.gradient


def test_root_gradient_is_seeded_not_accumulated():
    x = Value(1.0)
    y = x * 2.0
    y.backward()
    y.backward()
    assert y.gradient == 1.0


def test_second_backward_accumulates_without_zero_grad():
    a, b = Value(2.0), Value(5.0)
    c = a * b
    c.backward()
    c.backward()
    assert a.gradient == 10.0
    assert b.gradient == 4.0


def test_custom_seed():
    x = Value(4.0)
    y = x * x
    backward(y, seed=0.5)
    assert y.gradient == 0.5
    assert x.gradient == 4.0


def test_backward_on_leaf():
    x = Value(5.0)
    x.backward()
    assert x.gradient == 1.0


def test_topological_order_puts_consumers_first():
    x = Value(2.0)
    y = x * x
    z = y * 3.0
    w = z + y
    order = topological_order(w)

    assert order[0] is w
    ids = [id(n) for n in order]
    assert len(ids) == len(set(ids))
    position = {id(n): i for i, n in enumerate(order)}
    for node in order:
        for operand in node.operands:
            assert position[id(node)] < position[id(operand)]
    # w, z, y, x and the constant 3.0
    assert len(order) == 5


def test_topological_order_rejects_non_values():
    with pytest.raises(TypeError):
        topological_order(3.0)


def test_zero_grad_resets_whole_graph():
    a, b = Value(1.2), Value(3.4)
    m = a * a
    c = m * b
    c.backward()
    c.backward()
    zero_grad(c)
    for node in (a, b, m, c):
        assert node.gradient == 0.0

    c.backward()
    assert a.gradient == pytest.approx(8.16)


def test_deep_chain_does_not_hit_recursion_limit():
    x = Value(1.0)
    y = x
    for _ in range(5000):
        y = y + x
    y.backward()
    assert x.gradient == 5001.0
