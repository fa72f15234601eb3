import json

import pytest

from doc_l10n.errors import SchemaLoadError
from doc_l10n.schema_loader import SchemaField, SchemaRegistry


def test_lookup_returns_fields(registry):
    fields = registry.lookup("seo")
    assert fields == [
        SchemaField("metaTitle", "string", True),
        SchemaField("internalNote", "string", False),
    ]


def test_lookup_missing_type_is_none(registry):
    assert registry.lookup("nope") is None
    assert registry.lookup(None) is None
    assert registry.lookup("") is None


def test_localize_defaults_to_true():
    reg = SchemaRegistry([{"name": "t", "fields": [{"name": "a", "type": "string", "localize": None}]}])
    assert reg.lookup("t")[0].localize is True


def test_first_definition_wins():
    reg = SchemaRegistry([
        {"name": "t", "fields": [{"name": "a", "type": "string"}]},
        {"name": "t", "fields": [{"name": "b", "type": "string"}]},
    ])
    assert [f.name for f in reg.lookup("t")] == ["a"]
    assert len(reg) == 1


def test_lookup_returns_a_copy(registry):
    registry.lookup("seo").clear()
    assert len(registry.lookup("seo")) == 2


def test_from_file_accepts_list(schema_file):
    reg = SchemaRegistry.from_file(str(schema_file))
    assert "article" in reg
    assert reg.type_names() == ["article", "seo", "callout"]


def test_from_file_accepts_types_object(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"types": [{"name": "a", "fields": []}]}), encoding="utf-8")
    assert SchemaRegistry.from_file(str(path)).lookup("a") == []


def test_from_file_rejects_garbage(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaLoadError):
        SchemaRegistry.from_file(str(path))


def test_from_file_rejects_wrong_shape(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"name": "a"}), encoding="utf-8")
    with pytest.raises(SchemaLoadError):
        SchemaRegistry.from_file(str(path))


def test_from_file_rejects_nameless_type(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps([{"fields": []}]), encoding="utf-8")
    with pytest.raises(SchemaLoadError):
        SchemaRegistry.from_file(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(SchemaLoadError) as exc:
        SchemaRegistry.from_file(str(tmp_path / "missing.json"))
    assert "missing.json" in str(exc.value)
