# doc_l10n/serializer_table.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

# (node, children_markup) -> markup
RenderFn = Callable[[Mapping[str, Any], Optional[str]], str]
# (list_type, key, children_markup) -> markup
ListRenderFn = Callable[[str, Optional[str], str], str]


def _frozen(types: Optional[Mapping[str, RenderFn]]) -> Mapping[str, RenderFn]:
    return MappingProxyType(dict(types or {}))


@dataclass(frozen=True)
class SerializerTable:
    """
    Per-type render functions handed to the block renderer.

    Tables are values: `with_type` returns a new table and leaves the receiver
    untouched, so a renderer synthesized for one subtree is never visible to a
    sibling or an ancestor.
    """
    types: Mapping[str, RenderFn] = field(default_factory=dict)
    list: Optional[ListRenderFn] = None
    list_item: Optional[RenderFn] = None
    unknown_type: Optional[RenderFn] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", _frozen(self.types))

    def has_type(self, type_name: Optional[str]) -> bool:
        return type_name in self.types

    def get(self, type_name: Optional[str]) -> Optional[RenderFn]:
        return self.types.get(type_name)

    def with_type(self, type_name: Optional[str], fn: RenderFn) -> "SerializerTable":
        types = dict(self.types)
        types[type_name] = fn
        return replace(self, types=types)


EMPTY_TABLE = SerializerTable()
