# doc_l10n/serializer.py
"""
Turn a structured document into a single HTML document for translation.

Only translatable content survives: fields marked `localize: false` and
anything whose type (or field name) is a stop type are dropped. Every wrapper
element keeps enough identity (class = field/type name, id = _key or _id) for
the translated HTML to be mapped back onto the source document, whose
_id/_type/_rev are written into <head>.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Collection, Dict, List, Mapping, Optional, Sequence, Union

from .block_renderer import h, render_blocks
from .config import (
    DEFAULT_STOP_TYPES,
    HEAD_META_FIELDS,
    META_FIELDS,
    RICH_TEXT_TYPES,
    SYSTEM_FIELDS,
    TranslationLevel,
)
from .document_builder import build_html
from .errors import RenderError
from .field_filter import field_filter, language_object_field_filter
from .logger import LOGGER_NAME
from .profiles import get_profile
from .schema_loader import SchemaLookup
from .serializer_table import EMPTY_TABLE, SerializerTable
from .utils import Markup, escape_text, is_markup

Renderer = Callable[[Sequence[Any], SerializerTable], str]
TableLike = Union[SerializerTable, Mapping[str, Any]]


@dataclass
class SerializedDocument:
    name: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "content": self.content}


def as_table(table: Optional[TableLike]) -> SerializerTable:
    if table is None:
        return get_profile("default").table
    if isinstance(table, SerializerTable):
        return table
    # a bare {type_name: render_fn} mapping
    return SerializerTable(types=dict(table))


class BaseDocumentSerializer:
    def __init__(
        self,
        schemas: SchemaLookup,
        renderer: Renderer = render_blocks,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.schemas = schemas
        self.renderer = renderer
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    # ---------- filtering ----------

    def filter_by_schema(self, node: Mapping[str, Any], stop_types: Collection[str]) -> Mapping[str, Any]:
        fields = self.schemas.lookup(node.get("_type"))
        if fields is None:
            return node
        return field_filter(node, fields, stop_types)

    def _document_fields(self, doc: Mapping[str, Any], stop_types: Collection[str]) -> Dict[str, Any]:
        fields = self.schemas.lookup(doc.get("_type"))
        if fields is not None:
            return field_filter(doc, fields, stop_types)

        self.logger.debug(f'No schema for document type "{doc.get("_type")}"; sending all fields')
        return {
            k: v for k, v in doc.items()
            if k not in SYSTEM_FIELDS and k not in stop_types
        }

    # ---------- serialization ----------

    def serialize_array(
        self,
        items: Sequence[Any],
        field_name: str,
        stop_types: Collection[str] = DEFAULT_STOP_TYPES,
        table: SerializerTable = EMPTY_TABLE,
    ) -> Markup:
        out: List[str] = []
        for item in items:
            if isinstance(item, str):
                out.append(h("span", None, escape_text(item)))
            elif isinstance(item, Mapping):
                if item.get("_type") in stop_types:
                    continue
                out.append(self.serialize_object(self.filter_by_schema(item, stop_types), None, stop_types, table))

        # the container is emitted even when empty
        return h("div", {"className": field_name}, *out)

    def _inner_markup(
        self,
        node: Mapping[str, Any],
        stop_types: Collection[str],
        table: SerializerTable,
    ) -> str:
        parts: List[str] = []
        for name, value in node.items():
            if name in META_FIELDS:
                continue
            if isinstance(value, str):
                if not value:
                    continue
                parts.append(value if is_markup(value) else h("span", {"className": name}, escape_text(value)))
            elif isinstance(value, list):
                parts.append(self.serialize_array(value, name, stop_types, table))
            elif isinstance(value, Mapping):
                nested = self.serialize_object(self.filter_by_schema(value, stop_types), None, stop_types, table)
                parts.append(h("div", {"className": name}, nested))
            # numbers, booleans and nulls are never translatable
        return "".join(parts)

    def serialize_object(
        self,
        node: Mapping[str, Any],
        top_field_name: Optional[str] = None,
        stop_types: Collection[str] = DEFAULT_STOP_TYPES,
        table: SerializerTable = EMPTY_TABLE,
    ) -> Markup:
        node_type = node.get("_type")
        if node_type in stop_types:
            return Markup("")

        if table.has_type(node_type):
            return Markup(self.renderer([node], table))

        render_table = table
        if node_type not in RICH_TEXT_TYPES:
            inner = self._inner_markup(node, stop_types, table)
            if not inner:
                return Markup("")
            render_table = table.with_type(node_type, _wrapper(inner, top_field_name))

        try:
            return Markup(self.renderer([node], render_table))
        except RenderError as e:
            self.logger.warning(
                f'Had issues serializing block of type "{node_type}". Please specify a serialization '
                f"method for this block in your serialization config. Received error: {e}"
            )
            return Markup("")

    def serialize_document(
        self,
        doc: Mapping[str, Any],
        mode: str = TranslationLevel.DOCUMENT,
        base_lang: str = "en",
        stop_types: Optional[Collection[str]] = None,
        table: Optional[TableLike] = None,
        output_name: Optional[str] = None,
    ) -> SerializedDocument:
        stop_types = tuple(stop_types) if stop_types is not None else DEFAULT_STOP_TYPES
        table = as_table(table)

        if mode == TranslationLevel.FIELD:
            filtered = language_object_field_filter(doc, base_lang)
        else:
            filtered = self._document_fields(doc, stop_types)

        serialized: Dict[str, Any] = {}
        for key, value in filtered.items():
            if isinstance(value, str):
                serialized[key] = value
            elif isinstance(value, list):
                serialized[key] = self.serialize_array(value, key, stop_types, table)
            elif isinstance(value, Mapping):
                is_field_level = base_lang in value
                # top-level objects need their own wrapper so they stay addressable
                out = self.serialize_object(
                    self.filter_by_schema(value, stop_types),
                    key if is_field_level else None,
                    stop_types,
                    table,
                )
                serialized[key] = out if is_field_level else h("div", {"className": key}, out)

        body = self.serialize_object(serialized, doc.get("_type"), stop_types, table)
        content = build_html([(f, doc.get(f)) for f in HEAD_META_FIELDS], body)

        name = output_name or doc.get("_id") or ""
        self.logger.debug(f"Serialized {name or '<unnamed>'}: {len(serialized)} field(s), {len(content)} chars")
        return SerializedDocument(name=name, content=content)


def _wrapper(inner: str, top_field_name: Optional[str]):
    def render(node: Mapping[str, Any], children: Optional[str] = None) -> str:
        class_name = top_field_name or node.get("_type")
        if not class_name:
            return inner
        node_id = node.get("_key") if node.get("_key") is not None else node.get("_id")
        return h("div", {"className": class_name, "id": node_id, "innerHTML": inner})
    return render


def serialize_document(
    doc: Mapping[str, Any],
    schemas: SchemaLookup,
    mode: str = TranslationLevel.DOCUMENT,
    base_lang: str = "en",
    stop_types: Optional[Collection[str]] = None,
    table: Optional[TableLike] = None,
    output_name: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> SerializedDocument:
    return BaseDocumentSerializer(schemas, logger=logger).serialize_document(
        doc, mode, base_lang, stop_types, table, output_name
    )
