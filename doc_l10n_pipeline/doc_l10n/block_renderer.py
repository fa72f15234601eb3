# doc_l10n/block_renderer.py
"""
Minimal rich-text (block/span) to HTML renderer.

Nodes are plain mappings. `block` nodes carry `children` spans, an optional
`style`, `markDefs`, and `listItem`/`level` for list entries. Every other node
type is rendered through the serializer table; a type with no entry raises
UnknownTypeError unless the table has an `unknown_type` fallback.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .errors import RenderError, UnknownTypeError
from .serializer_table import EMPTY_TABLE, SerializerTable
from .utils import Markup, escape_attr, escape_text

HEADING_RE = re.compile(r"^h\d$")

DECORATOR_TAGS: Dict[str, tuple] = {
    "strong": ("strong", None),
    "em": ("em", None),
    "code": ("code", None),
    "underline": ("span", {"style": "text-decoration:underline"}),
    "strike-through": ("del", None),
}

ATTR_ALIASES = {"className": "class"}


def h(tag: str, attrs: Optional[Mapping[str, Any]] = None, *children: Any) -> Markup:
    """Build an element. Children are already-rendered markup; attribute values are escaped."""
    attrs = dict(attrs or {})
    inner = attrs.pop("innerHTML", None)

    parts = []
    for k, v in attrs.items():
        if v is None or v is False:
            continue
        parts.append(f' {ATTR_ALIASES.get(k, k)}="{escape_attr(v)}"')

    if inner is None:
        inner = "".join(str(c) for c in children if c is not None)
    return Markup(f"<{tag}{''.join(parts)}>{inner}</{tag}>")


@dataclass
class _ListEntry:
    block: Mapping[str, Any]
    sublists: List["_ListNode"] = field(default_factory=list)


@dataclass
class _ListNode:
    list_type: str
    level: int
    key: Optional[str]
    entries: List[_ListEntry] = field(default_factory=list)


def _is_list_block(node: Any) -> bool:
    return isinstance(node, Mapping) and node.get("_type") == "block" and bool(node.get("listItem"))


def nest_lists(nodes: Sequence[Any]) -> List[Union[Mapping[str, Any], _ListNode]]:
    """Group consecutive list-item blocks into (possibly nested) lists."""
    tree: List[Union[Mapping[str, Any], _ListNode]] = []
    stack: List[_ListNode] = []

    for node in nodes:
        if not _is_list_block(node):
            stack = []
            tree.append(node)
            continue

        level = int(node.get("level") or 1)
        list_type = node["listItem"]
        while stack and (stack[-1].level > level or (stack[-1].level == level and stack[-1].list_type != list_type)):
            stack.pop()

        if stack and stack[-1].level == level:
            stack[-1].entries.append(_ListEntry(node))
            continue

        key = node.get("_key")
        lst = _ListNode(list_type, level, f"{key}-parent" if key else None)
        if stack and stack[-1].entries:
            stack[-1].entries[-1].sublists.append(lst)
        else:
            tree.append(lst)
        lst.entries.append(_ListEntry(node))
        stack.append(lst)

    return tree


def _render_span_text(text: str) -> str:
    return "<br/>".join(escape_text(line) for line in text.split("\n"))


def _render_span(span: Mapping[str, Any], mark_defs: Mapping[str, Mapping[str, Any]]) -> str:
    out = _render_span_text(str(span.get("text") or ""))
    # innermost mark last so the first mark ends up outermost
    for mark in reversed(list(span.get("marks") or [])):
        if mark in DECORATOR_TAGS:
            tag, attrs = DECORATOR_TAGS[mark]
            out = h(tag, attrs, out)
            continue
        mdef = mark_defs.get(mark)
        if mdef and mdef.get("_type") == "link" and mdef.get("href"):
            out = h("a", {"href": mdef["href"]}, out)
    return out


def _render_children(block: Mapping[str, Any]) -> str:
    mark_defs = {m.get("_key"): m for m in (block.get("markDefs") or []) if isinstance(m, Mapping)}
    out = []
    for child in block.get("children") or []:
        if isinstance(child, str):
            out.append(escape_text(child))
        elif isinstance(child, Mapping):
            out.append(_render_span(child, mark_defs))
    return "".join(out)


def default_block(node: Mapping[str, Any], children: Optional[str]) -> Markup:
    style = node.get("style") or "normal"
    if HEADING_RE.match(style):
        return h(style, None, children)
    if style == "blockquote":
        return h("blockquote", None, children)
    return h("p", None, children)


def _render_block(node: Mapping[str, Any], table: SerializerTable) -> str:
    fn = table.get("block") or default_block
    return fn(node, _render_children(node))


def _render_list(lst: _ListNode, table: SerializerTable) -> str:
    items = []
    for entry in lst.entries:
        block = entry.block
        style = block.get("style") or "normal"
        children = _render_children(block)
        if style != "normal":
            # plain list text stays bare, anything styled goes through the block renderer
            children = (table.get("block") or default_block)(block, children)
        children += "".join(_render_list(sub, table) for sub in entry.sublists)
        if table.list_item is not None:
            items.append(table.list_item(block, children))
        else:
            items.append(h("li", None, children))

    body = "".join(str(i) for i in items)
    if table.list is not None:
        return table.list(lst.list_type, lst.key, body)
    return h("ul" if lst.list_type == "bullet" else "ol", None, body)


def _render_node(node: Any, table: SerializerTable) -> str:
    if isinstance(node, _ListNode):
        return _render_list(node, table)
    if isinstance(node, str):
        return escape_text(node)
    if not isinstance(node, Mapping):
        raise RenderError(f"Cannot render node of kind {type(node).__name__}")

    node_type = node.get("_type")
    if node_type == "block":
        return _render_block(node, table)
    if node_type == "span" and not table.has_type("span"):
        return _render_span(node, {})

    fn = table.get(node_type) or table.unknown_type
    if fn is None:
        raise UnknownTypeError(node_type)
    return fn(node, None)


def render_blocks(nodes: Sequence[Any], table: SerializerTable = EMPTY_TABLE) -> Markup:
    out = []
    for item in nest_lists(nodes):
        rendered = _render_node(item, table)
        if rendered:
            out.append(str(rendered))
    return Markup("".join(out))
