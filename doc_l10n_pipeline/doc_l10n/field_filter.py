# doc_l10n/field_filter.py
from __future__ import annotations
from typing import Any, Collection, Dict, Iterable, Mapping

from .config import META_FIELDS
from .schema_loader import SchemaField

TEXT_FIELD_TYPES = ("string", "text")


def _is_translatable(f: SchemaField, node: Mapping[str, Any], stop_types: Collection[str]) -> bool:
    if f.localize is False:
        return False
    if f.type in TEXT_FIELD_TYPES:
        return True
    # arrays are always descended into; stop types are dropped per item later
    if isinstance(node.get(f.name), list):
        return True
    return f.type not in stop_types and f.name not in stop_types


def field_filter(
    node: Mapping[str, Any],
    fields: Iterable[SchemaField],
    stop_types: Collection[str],
) -> Dict[str, Any]:
    """
    Keep only the fields of `node` that should be translated.
    Meta fields (_key/_type/_id) are always kept when present; schema fields
    missing from the node, null or an empty string, are skipped.
    """
    valid = list(META_FIELDS) + [f.name for f in fields if _is_translatable(f, node, stop_types)]

    out: Dict[str, Any] = {}
    for name in valid:
        if name in out:
            continue
        value = node.get(name)
        if value is None or value == "":
            continue
        out[name] = value
    return out


def language_object_field_filter(node: Mapping[str, Any], base_lang: str) -> Dict[str, Any]:
    """Field-level translation: send only the base-language entry of each field."""
    out: Dict[str, Any] = {}
    for key, value in node.items():
        if isinstance(value, Mapping) and base_lang in value:
            out[key] = {base_lang: value[base_lang]}
    return out
