# doc_l10n/config.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# Types (or field names) never sent for translation
DEFAULT_STOP_TYPES: Tuple[str, ...] = (
    "reference",
    "date",
    "datetime",
    "file",
    "geopoint",
    "number",
    "crop",
    "hotspot",
    "boolean",
)

# Always kept so a translated fragment can be mapped back onto its source node
META_FIELDS: Tuple[str, ...] = ("_key", "_type", "_id")

# Written into <head> so the translated document finds its way home
HEAD_META_FIELDS: Tuple[str, ...] = ("_id", "_type", "_rev")

# Bookkeeping fields that are never content, even without a schema
SYSTEM_FIELDS: Tuple[str, ...] = ("_rev", "_createdAt", "_updatedAt")

# Rich-text node types handled natively by the block renderer
RICH_TEXT_TYPES: Tuple[str, ...] = ("block", "span")


class TranslationLevel:
    DOCUMENT = "document"
    FIELD = "field"

    ALL = (DOCUMENT, FIELD)


@dataclass
class SerializeConfig:
    schema_path: str
    input_path: str
    output_dir: str

    mode: str = TranslationLevel.DOCUMENT
    base_lang: str = "en"
    stop_types: List[str] = field(default_factory=lambda: list(DEFAULT_STOP_TYPES))
    profile: str = "default"
    output_name: Optional[str] = None
    log_level: str = "INFO"
    pretty: bool = False
