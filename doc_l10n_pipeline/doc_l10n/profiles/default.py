from __future__ import annotations
import re
from typing import Any, Mapping, Optional

from . import SerializerProfile
from ..block_renderer import h
from ..serializer_table import SerializerTable

HEADING_RE = re.compile(r"^h\d$")

def _block(node: Mapping[str, Any], children: Optional[str]) -> str:
    key = {"id": node.get("_key")}
    style = node.get("style") or "normal"

    if HEADING_RE.match(style):
        return h(style, key, children)

    return h("blockquote", key, children) if style == "blockquote" else h("p", key, children)

def _list(list_type: str, key: Optional[str], children: str) -> str:
    tag = "ul" if list_type == "bullet" else "ol"
    return h(tag, {"id": key.replace("-parent", "") if key else None}, children)

def _list_item(node: Mapping[str, Any], children: Optional[str]) -> str:
    return h("li", {"id": node.get("_key")}, children)

def _unknown_type(node: Mapping[str, Any], children: Optional[str]) -> str:
    return h("div", {"className": node.get("_type")}, "")

def default_profile() -> SerializerProfile:
    # every element keeps its _key as id so translated HTML maps back onto blocks
    return SerializerProfile(
        id="default",
        table=SerializerTable(
            types={"block": _block},
            list=_list,
            list_item=_list_item,
            unknown_type=_unknown_type,
        ),
        description="Block/list elements carry their _key as id; unknown types render as empty divs.",
    )
