"""Reply trees: replies to a tweet, each of which may carry replies of its own."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from burbir.clock import DateTime

INDENT_WIDTH = 5


@dataclass
class Reply:
    """A single reply with its author and the moment it was written."""

    reply_id: int
    content: str
    author: str
    user_id: int
    time: DateTime
    parent_id: int = -1


def create_reply(content: str, author: str, user_id: int, reply_id: int) -> Reply:
    """Return a reply stamped with the current date and time."""
    return Reply(
        reply_id=reply_id,
        content=content,
        author=author,
        user_id=user_id,
        time=DateTime.now(),
    )


class ReplyNode:
    """A node of a reply tree; its children are kept in the order added."""

    def __init__(self, data: Reply) -> None:
        self.data = data
        self.parent: ReplyNode | None = None
        self._children: list[ReplyNode] = []

    @property
    def children(self) -> tuple[ReplyNode, ...]:
        return tuple(self._children)

    def __repr__(self) -> str:
        return f"ReplyNode({self.data!r}, children={len(self._children)})"

    def add_child(self, reply: Reply) -> ReplyNode:
        """Attach a reply after the existing children and return its node."""
        node = ReplyNode(reply)
        node.parent = self
        self._children.append(node)
        return node

    def remove(self) -> None:
        """Detach this node, with its whole subtree, from its parent.

        A root node has no parent to be detached from and stays as it is.
        """
        if self.parent is None:
            return
        siblings = self.parent._children
        for index, sibling in enumerate(siblings):
            if sibling is self:
                del siblings[index]
                break
        self.parent = None

    def _walk(self) -> Iterator[ReplyNode]:
        yield self
        for child in self._children:
            yield from child._walk()

    def search(self, reply_id: int) -> ReplyNode | None:
        """Return the first node, in pre-order, whose reply has the given id."""
        for node in self._walk():
            if node.data.reply_id == reply_id:
                return node
        return None

    def render(self, depth: int = 0) -> str:
        """Return the subtree as text, each level indented further."""
        pad = " " * (depth * INDENT_WIDTH)
        reply = self.data
        text = (
            f"{pad}| ID = {reply.reply_id}\n"
            f"{pad}| {reply.author}\n"
            f"{pad}| {reply.time}\n"
            f"{pad}| {reply.content}\n\n"
        )
        return text + "".join(child.render(depth + 1) for child in self._children)

    def __iter__(self) -> Iterator[Reply]:
        """Yield the replies of the subtree in pre-order."""
        return (node.data for node in self._walk())


def insert_first(tree: ReplyNode | None, reply: Reply) -> ReplyNode:
    """Return a new root holding the reply, with the old tree as its first child."""
    root = ReplyNode(reply)
    if tree is not None:
        tree.remove()
        tree.parent = root
        root._children.append(tree)
    return root