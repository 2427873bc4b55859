"""Comment reply tree construction.

Turns the flat comment rows of one subject into a nested reply tree:
newest top-level comments first, replies oldest first at every depth.
Pure and synchronous; the tree is rebuilt from scratch on every fetch.
"""

from collections.abc import Iterable
from datetime import datetime

from dami.domain.model.comment import Comment, CommentNode
from dami.domain.value import CommentId

# Parent-walk marks
_ON_PATH = 1
_DONE = 2


def _chronological(node: CommentNode) -> tuple[datetime, str]:
    """Sort key: creation time, ties broken by id."""
    return (node.created_at, str(node.id))


def _cycle_breakers(nodes: dict[CommentId, CommentNode]) -> set[CommentId]:
    """Ids whose parent link would close a loop.

    Each comment has at most one parent, so every loop in the parent links
    is a simple cycle. Each is cut at its latest member (by creation time,
    then id). Every node is walked once.
    """
    marks: dict[CommentId, int] = {}
    breakers: set[CommentId] = set()

    for start in nodes:
        if start in marks:
            continue
        path: list[CommentId] = []
        position: dict[CommentId, int] = {}
        current: CommentId | None = start
        while current is not None and current in nodes and current not in marks:
            marks[current] = _ON_PATH
            position[current] = len(path)
            path.append(current)
            current = nodes[current].parent_id

        if current is not None and marks.get(current) == _ON_PATH:
            cycle = path[position[current]:]
            latest = max(cycle, key=lambda node_id: _chronological(nodes[node_id]))
            breakers.add(latest)

        for node_id in path:
            marks[node_id] = _DONE

    return breakers


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build the reply tree for one subject's eligible comments.

    Algorithm:
    1. Index pass: one fresh node per comment id
    2. Attach pass: each node goes under its parent when the parent is in
       the input, otherwise into the root list. Malformed parent chains
       (self references, loops) are cut first at their most recent member,
       which becomes a root, so the result is always a tree.
    3. Sort pass: roots newest first, replies oldest first at every depth

    A comment whose parent is missing from the input (unapproved or deleted)
    becomes a root. Exact timestamp ties are ordered by id so the result
    does not depend on input order.

    Args:
        comments: Flat comments of one subject, in any order

    Returns:
        Root nodes, each with recursively populated and sorted replies
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        nodes[comment.id] = CommentNode(comment=comment)

    breakers = _cycle_breakers(nodes)

    roots: list[CommentNode] = []
    for node in nodes.values():
        parent = nodes.get(node.parent_id) if node.parent_id is not None else None
        if parent is None or node.id in breakers:
            roots.append(node)
        else:
            parent.replies.append(node)

    # Newest first, ties by id ascending (sort is stable under reverse)
    roots.sort(key=lambda node: str(node.id))
    roots.sort(key=lambda node: node.created_at, reverse=True)

    pending = list(roots)
    while pending:
        node = pending.pop()
        node.replies.sort(key=_chronological)
        pending.extend(node.replies)

    return roots


def count_nodes(roots: Iterable[CommentNode]) -> int:
    """Total number of comments in a tree."""
    return sum(1 for root in roots for _ in root.walk())
