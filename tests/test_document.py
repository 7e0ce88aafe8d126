import json

import pytest

from dbom.document import Document, DocumentError


def test_to_json_is_compact_with_sorted_keys():
    doc = Document(fields={"name": "Ana", "age": 30}, id="abc")
    assert doc.to_json() == '{"age":30,"id":"abc","name":"Ana"}'


def test_booleans_are_written_as_strings():
    doc = Document(fields={"active": True, "deleted": False}, id="x")
    data = json.loads(doc.to_json())
    assert data["active"] == "true"
    assert data["deleted"] == "false"


def test_round_trip_keeps_fields():
    doc = Document(fields={"s": "text", "i": 7, "f": 2.5, "tags": ["a", "b"]}, id="id-1")
    back = Document.from_json(doc.to_json())
    assert back == doc


def test_from_json_types():
    doc = Document.from_json('{"s": "x", "i": 3, "f": 1.5, "b": true, "l": ["p"]}')
    assert doc.fields == {"s": "x", "i": 3, "f": 1.5, "b": True, "l": ["p"]}
    assert isinstance(doc.fields["b"], bool)
    assert isinstance(doc.fields["f"], float)
    assert doc.id == ""


def test_from_json_reads_id_and_excludes_it_from_fields():
    doc = Document.from_json('{"id": "abc", "k": "v"}')
    assert doc.id == "abc"
    assert "id" not in doc.fields


def test_from_json_skips_null_and_objects():
    doc = Document.from_json('{"n": null, "o": {"a": 1}, "k": 1}')
    assert doc.fields == {"k": 1}


def test_non_string_id_is_rejected():
    with pytest.raises(DocumentError):
        Document.from_json('{"id": 5}')


def test_invalid_json_is_rejected():
    with pytest.raises(ValueError):
        Document.from_json("{not json")


def test_empty_text_is_rejected():
    with pytest.raises(DocumentError):
        Document.from_json("")


def test_array_with_non_strings_is_rejected():
    with pytest.raises(DocumentError):
        Document.from_json('{"l": [1, 2]}')


def test_scalar_top_level_is_rejected():
    with pytest.raises(DocumentError):
        Document.from_json("42")


def test_null_gives_empty_document():
    assert Document.from_json("null") == Document()


def test_unicode_is_kept_unescaped():
    doc = Document(fields={"word": "coleção"}, id="")
    assert "coleção" in doc.to_json()
    assert Document.from_json(doc.to_json()).fields["word"] == "coleção"


def test_unsupported_value_type_raises():
    with pytest.raises(TypeError):
        Document(fields={"bad": {"a": 1}}).to_json()