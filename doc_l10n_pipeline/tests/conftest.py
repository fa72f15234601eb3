import json

import pytest
from bs4 import BeautifulSoup

from doc_l10n.schema_loader import SchemaRegistry

SCHEMA_TYPES = [
    {
        "name": "article",
        "type": "document",
        "fields": [
            {"name": "title", "type": "string"},
            {"name": "slug", "type": "slug", "localize": False},
            {"name": "ref", "type": "reference"},
            {"name": "publishedAt", "type": "datetime"},
            {"name": "body", "type": "array"},
            {"name": "seo", "type": "seo"},
            {"name": "tags", "type": "array"},
        ],
    },
    {
        "name": "seo",
        "type": "object",
        "fields": [
            {"name": "metaTitle", "type": "string"},
            {"name": "internalNote", "type": "string", "localize": False},
        ],
    },
    {
        "name": "callout",
        "type": "object",
        "fields": [
            {"name": "text", "type": "text"},
            {"name": "link", "type": "reference"},
        ],
    },
]


def make_block(key, text, style="normal", **extra):
    block = {
        "_type": "block",
        "_key": key,
        "style": style,
        "markDefs": [],
        "children": [{"_type": "span", "_key": f"{key}-s", "text": text, "marks": []}],
    }
    block.update(extra)
    return block


def parse(html):
    return BeautifulSoup(html, "html.parser")


def head_meta(html):
    soup = parse(html)
    return {m["name"]: m.get("content", "") for m in soup.head.find_all("meta")}


@pytest.fixture
def registry():
    return SchemaRegistry(SCHEMA_TYPES)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(SCHEMA_TYPES), encoding="utf-8")
    return path


@pytest.fixture
def article():
    return {
        "_id": "doc1",
        "_type": "article",
        "_rev": "r1",
        "title": "Hello",
        "slug": {"_type": "slug", "current": "hello"},
        "ref": {"_type": "reference", "_ref": "x"},
        "publishedAt": "2024-01-01T00:00:00Z",
        "body": [
            {"_type": "image", "_key": "i1", "asset": {"_type": "reference", "_ref": "image-1"}},
            make_block("b1", "First paragraph"),
            {"_type": "callout", "_key": "c1", "text": "Heads up", "link": {"_type": "reference", "_ref": "p"}},
        ],
        "seo": {"_type": "seo", "metaTitle": "Meta", "internalNote": "do not ship"},
        "tags": ["news", "tech"],
    }
