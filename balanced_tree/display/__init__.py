# The module responsible for showing trees and diagnostics to humans
from __future__ import annotations
from ..tree import BalancedSearchTree, Diagnostics
from ..util import is_ipython

BRANCH = "|   "
BLANK = "    "
LEFT_CONNECTOR = "└── "
RIGHT_CONNECTOR = "┌── "

def render_tree(tree: BalancedSearchTree) -> str:
    """Renders the shape of the tree sideways: right subtrees above their parent, left subtrees below.
    The root is drawn as a left child. Returns an empty string for an empty tree."""
    if tree.root is None:
        return ""

    lines: list[str] = []
    # (node, prefix, is_left, expanded). A node is expanded once its right subtree has been scheduled.
    stack: list[tuple[BalancedSearchTree.Node, str, bool, bool]] = [(tree.root, "", True, False)]
    while stack:
        node, prefix, is_left, expanded = stack.pop()
        if expanded:
            lines.append(f"{prefix}{LEFT_CONNECTOR if is_left else RIGHT_CONNECTOR}{node.key}")
            continue
        if node.left is not None:
            stack.append((node.left, prefix + (BLANK if is_left else BRANCH), True, False))
        stack.append((node, prefix, is_left, True))
        if node.right is not None:
            stack.append((node.right, prefix + (BRANCH if is_left else BLANK), False, False))
    return "\n".join(lines)

def format_diagnostics(results: Diagnostics) -> str:
    return "\n".join([
        f"Is balanced: {results.is_balanced}",
        f"Level Order: {results.level_order}",
        f"Pre Order: {results.pre_order}",
        f"Post Order: {results.post_order}",
        f"In Order: {results.in_order}",
    ])

def _show(text: str, skip_display: bool):
    if skip_display:
        return
    if is_ipython():
        from IPython.display import display, HTML
        import html
        display(HTML(f"<pre>{html.escape(text)}</pre>"))
        return
    print(text)

def print_tree(tree: BalancedSearchTree, skip_display: bool = False):
    """Prints the tree shape and returns the rendered text. Inside a notebook it is displayed as preformatted HTML instead."""
    text = render_tree(tree)
    _show(text, skip_display)
    return text

def print_diagnostics(results: Diagnostics, skip_display: bool = False):
    text = format_diagnostics(results)
    _show(text, skip_display)
    return text
