"""Plain-text rendering of difference trees."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from matcher_combinators.diff_tree import DiffNode, DiffTag, NodeKind, UnmatchedEntry

_BRACKETS = {
    NodeKind.MAP: ("{", "}"),
    NodeKind.SEQUENCE: ("[", "]"),
    NodeKind.SET: ("#{", "}"),
}


def render_diff(diff: DiffNode, indent: int = 2) -> str:
    """Render ``diff`` in the shape of the actual value with failures inline."""
    return "\n".join(_render_lines(diff, label="", depth=0, indent=indent))


def format_leaf(node: DiffNode) -> str:
    """Describe one leaf, e.g. ``(mismatch (expected 1) (actual 2))``."""
    if node.tag == DiffTag.OK:
        return display_value(node.actual)
    if node.tag == DiffTag.MISSING:
        text = f"(missing {display_value(node.expected)})"
    elif node.tag == DiffTag.UNEXPECTED:
        text = f"(unexpected {display_value(node.actual)})"
    else:
        text = (
            f"(mismatch (expected {display_value(node.expected)}) "
            f"(actual {display_value(node.actual)}))"
        )
    if node.note:
        text = f"{text} ; {node.note}"
    return text


def format_path(path: Sequence[Hashable]) -> str:
    """Format a diff path as ``user.tags[0]``; the root is ``$``."""
    text = ""
    for key in path:
        if isinstance(key, int | UnmatchedEntry) and not isinstance(key, bool):
            text += f"[{key!r}]"
        else:
            text += f".{key}" if text else str(key)
    return text or "$"


def display_value(value: object) -> str:
    return repr(value)


def _render_lines(node: DiffNode, *, label: str, depth: int, indent: int) -> list[str]:
    pad = " " * (indent * depth)
    if node.is_leaf:
        return [f"{pad}{label}{format_leaf(node)}"]

    opener, closer = _BRACKETS[node.kind]
    lines = [f"{pad}{label}{opener}"]
    for key, child in node.children.items():
        child_label = f"{key!r}: " if node.kind == NodeKind.MAP else ""
        lines.extend(_render_lines(child, label=child_label, depth=depth + 1, indent=indent))
    lines.append(f"{pad}{closer}")
    return lines
