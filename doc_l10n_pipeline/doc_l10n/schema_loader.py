# doc_l10n/schema_loader.py
from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol

from .errors import SchemaLoadError


@dataclass(frozen=True)
class SchemaField:
    name: str
    type: str
    localize: bool = True

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "SchemaField":
        # only an explicit False opts a field out
        return cls(
            name=raw["name"],
            type=raw.get("type") or "",
            localize=raw.get("localize") is not False,
        )


@dataclass(frozen=True)
class SchemaType:
    name: str
    type: str = "object"
    fields: List[SchemaField] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "SchemaType":
        return cls(
            name=raw["name"],
            type=raw.get("type") or "object",
            fields=[SchemaField.from_dict(f) for f in (raw.get("fields") or [])],
        )


class SchemaLookup(Protocol):
    def lookup(self, type_name: Optional[str]) -> Optional[List[SchemaField]]:
        ...


class SchemaRegistry:
    """Read-only view over a set of schema type definitions, keyed by type name."""

    def __init__(self, types: Iterable[SchemaType | Dict[str, Any]] = ()) -> None:
        self._types: Dict[str, SchemaType] = {}
        for t in types:
            st = t if isinstance(t, SchemaType) else SchemaType.from_dict(t)
            # first definition wins, like a find() over the type list
            self._types.setdefault(st.name, st)

    @classmethod
    def from_file(cls, schema_path: str) -> "SchemaRegistry":
        try:
            with open(schema_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SchemaLoadError(schema_path, str(e)) from e

        if isinstance(data, dict):
            data = data.get("types")
        if not isinstance(data, list):
            raise SchemaLoadError(schema_path, "expected a list of types or an object with a 'types' list")
        try:
            return cls(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise SchemaLoadError(schema_path, f"malformed type definition ({e})") from e

    def get(self, type_name: Optional[str]) -> Optional[SchemaType]:
        if not type_name:
            return None
        return self._types.get(type_name)

    def lookup(self, type_name: Optional[str]) -> Optional[List[SchemaField]]:
        st = self.get(type_name)
        return list(st.fields) if st is not None else None

    def type_names(self) -> List[str]:
        return list(self._types.keys())

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __len__(self) -> int:
        return len(self._types)
