"""Title extraction from a parsed markdown document tree"""

from typing import Optional

from markdown_it.tree import SyntaxTreeNode


TEXT_NODES = {'text', 'text_special', 'code_inline'}
BREAK_NODES = {'softbreak', 'hardbreak'}


def is_heading(node: SyntaxTreeNode) -> bool:
    return node.type == 'heading'


def find_first_heading(node: Optional[SyntaxTreeNode]) -> Optional[SyntaxTreeNode]:
    """Return the first heading in document order, searching depth-first.

    The node itself is checked first. After that each sibling, starting with
    the node, has its subtree searched before it is checked itself, so a
    heading nested under an earlier sibling (e.g. inside a blockquote) wins
    over a later top-level heading.
    """
    if node is None:
        return None
    if is_heading(node):
        return node

    while node is not None:
        if node.children:
            found = find_first_heading(node.children[0])
            if found is not None:
                return found
        if is_heading(node):
            return node
        node = node.next_sibling

    return None


def heading_text(node: SyntaxTreeNode) -> str:
    """Plain text of a heading: inline markup dropped, line breaks as spaces."""
    parts = []
    for n in node.walk(include_self=False):
        if n.type in TEXT_NODES:
            parts.append(n.content)
        elif n.type in BREAK_NODES:
            parts.append(' ')
    return ''.join(parts).strip()
