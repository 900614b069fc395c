"""Indented, one-line-per-node depiction of a parse tree.

Rule nodes print their rule name, terminals print their literal text. Each
level of nesting adds one `indent` unit, so siblings always line up and a
child always sits one unit right of its parent. Only syntax is consulted,
so programs that would fail to evaluate still render.
"""
from __future__ import annotations

import sys
from typing import List, Optional, TextIO, Tuple

from .tree import Node, is_token, tree_children, tree_label


def _node_line(node: Node, token_types: bool) -> str:
    if is_token(node):
        if token_types:
            return f"{node.type.lower()}  {node.value}"
        return str(node.value)

    label = tree_label(node)
    if label is None:
        raise TypeError(f"not a parse tree node: {node!r}")

    return label


def render_lines(node: Node, depth: int = 0, indent: str = "  ", token_types: bool = False) -> List[str]:
    lines: List[str] = []
    # (node, depth) pairs; children pushed reversed so they pop in source order
    pending: List[Tuple[Node, int]] = [(node, depth)]

    while pending:
        current, level = pending.pop()
        lines.append(f"{indent * level}{_node_line(current, token_types)}")
        pending.extend((child, level + 1) for child in reversed(tree_children(current)))

    return lines


def render(tree: Node, indent: str = "  ", token_types: bool = False) -> List[str]:
    return render_lines(tree, 0, indent, token_types)


def print_tree(tree: Node, out: Optional[TextIO] = None, indent: str = "  ", token_types: bool = False) -> None:
    stream = out if out is not None else sys.stdout

    for line in render(tree, indent=indent, token_types=token_types):
        stream.write(line + "\n")
