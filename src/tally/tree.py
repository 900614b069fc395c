"""Shared helpers for working with lark Tree/Token nodes.

Rule nodes are `lark.Tree` (label in `.data`), terminal nodes are
`lark.Token` (kind in `.type`, text in `.value`).
"""
from __future__ import annotations

from typing import Any, List, Optional, Tuple, Union

from lark import Token, Tree
from typing_extensions import TypeAlias, TypeGuard

Node: TypeAlias = Union[Tree, Token]


def is_tree(node: Any) -> TypeGuard[Tree]:
    return isinstance(node, Tree)

def is_token(node: Any) -> TypeGuard[Token]:
    return isinstance(node, Token)

def tree_label(node: Any) -> Optional[str]:
    return str(node.data) if is_tree(node) else None

def token_kind(node: Any) -> Optional[str]:
    return str(node.type) if is_token(node) else None

def tree_children(node: Any) -> List[Node]:
    if not is_tree(node):
        return []

    return list(node.children)

def node_position(node: Any) -> Tuple[Optional[int], Optional[int]]:
    """Best-effort (line, column) of a node; tokens carry it directly."""
    if is_token(node):
        return getattr(node, "line", None), getattr(node, "column", None)

    if is_tree(node):
        meta = node.meta
        if not getattr(meta, "empty", True):
            return getattr(meta, "line", None), getattr(meta, "column", None)

        for child in node.children:
            line, column = node_position(child)
            if line is not None:
                return line, column

    return None, None
