"""
Graph inspection utilities.
Print and analyse the structure of the DAG reachable from a root Value.
"""

from collections import Counter
from typing import Dict

import numpy as np

from .engine import topological_order
from .node import Value


def get_graph_stats(root: Value) -> Dict:
    """
    Collect statistics of the graph rooted at ``root`` (no printing).

    Returns:
        dict with node/leaf/edge counts, fan-in and fan-out figures and a
        per-operation count. Fan-in is the number of operands of a node,
        fan-out the number of consumers it has inside this graph.
    """
    order = topological_order(root)
    index = {id(node): i for i, node in enumerate(order)}

    fan_ins = [len(node.operands) for node in order]
    fan_outs = [0] * len(order)
    for node in order:
        for operand in node.operands:
            fan_outs[index[id(operand)]] += 1

    op_counter = Counter(node.operation.value for node in order if node.operation is not None)

    return {
        'nodes': len(order),
        'leaves': sum(1 for node in order if node.is_leaf),
        'edges': int(sum(fan_ins)),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def print_graph_summary(root: Value) -> Dict:
    """
    Print a summary of the graph rooted at ``root``.

    Returns:
        The same dict as ``get_graph_stats``.
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 70 + "\n")

    return stats


def print_computation_graph(root: Value, max_nodes: int = 20) -> None:
    """
    Print the graph one node per line, root first.

    Args:
        root: output node
        max_nodes: how many nodes to print at most
    """
    order = topological_order(root)
    index = {id(node): i for i, node in enumerate(order)}

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("=" * 70)

    for i, node in enumerate(order[:max_nodes]):
        tag = node.label or ""
        if node.operands:
            operand_info = ", ".join(f"Node{index[id(p)]}" for p in node.operands)
            print(f"Node {i:4d}: {node.operation.value:6s} {tag:8s} "
                  f"({node.value:10.6f}, grad {node.gradient:10.6f}) <- [{operand_info}]")
        else:
            print(f"Node {i:4d}: {'leaf':6s} {tag:8s} "
                  f"({node.value:10.6f}, grad {node.gradient:10.6f})")

    if len(order) > max_nodes:
        print(f"... ({len(order) - max_nodes} more nodes)")

    print("=" * 70 + "\n")
