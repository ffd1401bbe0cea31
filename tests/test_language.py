import json
from pathlib import Path

import pytest

from i18n import DecodeError, Language, SourceReadError, available_locales

LANG_DIR = Path(__file__).resolve().parents[1] / "lang"


def make_doc(**strings):
    return json.dumps({"name": "English", "short_name": "en", "strings": strings})


def test_decode_from_text():
    lang = Language.decode_from_text(make_doc(tree="tree", category={"category2": {"foo": "bar"}}))
    assert lang.name == "English"
    assert lang.short_name == "en"
    assert lang.get("tree") == "tree"
    assert lang.get("category\\category2\\foo") == "bar"
    assert lang.get("nope") is None


def test_decode_from_text_malformed_json():
    with pytest.raises(DecodeError) as excinfo:
        Language.decode_from_text("{not json")
    assert excinfo.value.message


@pytest.mark.parametrize(
    "doc",
    [
        "[]",
        json.dumps({"short_name": "en", "strings": {}}),
        json.dumps({"name": "English", "strings": {}}),
        json.dumps({"name": "English", "short_name": "en"}),
        json.dumps({"name": "English", "short_name": "en", "strings": {"n": 1}}),
    ],
)
def test_decode_from_text_shape_mismatch(doc):
    with pytest.raises(DecodeError):
        Language.decode_from_text(doc)


def test_decode_from_source():
    lang = Language.decode_from_source(LANG_DIR / "en.json")
    assert lang.short_name == "en"
    assert lang.get("hello_msg") == "hello world!"


def test_decode_from_source_missing_file(tmp_path):
    with pytest.raises(SourceReadError):
        Language.decode_from_source(tmp_path / "nope.json")


def test_source_read_error_is_a_decode_error(tmp_path):
    with pytest.raises(DecodeError):
        Language.decode_from_source(tmp_path / "nope.json")


def test_strings_is_flattened():
    lang = Language.decode_from_text(make_doc(tree="tree", category={"category2": {"foo": "bar"}}))
    assert lang.strings() == {"tree": "tree", "category\\category2\\foo": "bar"}


def test_resources():
    lang = Language.decode_from_text(make_doc(), {"license": b"MIT", "blob": b"\xff\xfe"})
    assert lang.binary_resource("license") == b"MIT"
    assert lang.utf8_resource("license") == "MIT"
    assert lang.binary_resource("blob") == b"\xff\xfe"
    assert lang.utf8_resource("blob") is None
    assert lang.utf8_resource("nope") is None
    assert lang.resource_names() == ["blob", "license"]


def test_attachments_round_trip():
    lang = Language("English", "en", {})
    assert lang.attach("plural_rules", {"one": 1})
    assert lang.attach("rtl", False)
    assert lang.attachment("plural_rules") == {"one": 1}
    assert lang.attachment("plural_rules", dict) == {"one": 1}
    assert lang.attachment("rtl", bool) is False
    assert lang.attachment("missing") is None


def test_attachment_type_mismatch_is_a_miss():
    lang = Language("English", "en", {})
    lang.attach("count", 3)
    lang.attach("flag", True)
    assert lang.attachment("count", str) is None
    assert lang.attachment("count", int) == 3
    assert lang.attachment("count", float) == 3.0
    assert lang.attachment("flag", int) is None


def test_attach_rejects_unencodable_value():
    lang = Language("English", "en", {})
    assert lang.attach("obj", object()) is False
    assert lang.attachment("obj") is None


def test_attachment_is_a_copy():
    lang = Language("English", "en", {})
    value = {"a": [1]}
    lang.attach("x", value)
    value["a"].append(2)
    assert lang.attachment("x") == {"a": [1]}


def test_serialization_drops_resources_and_attachments():
    lang = Language.decode_from_text(make_doc(tree="tree"), {"license": b"MIT"})
    lang.attach("x", 1)
    data = json.loads(lang.to_json())
    assert data == {"name": "English", "short_name": "en", "strings": {"tree": "tree"}}
    again = Language.decode_from_text(lang.to_json())
    assert again.get("tree") == "tree"
    assert again.binary_resource("license") is None
    assert again.attachment("x") is None


def test_copy_is_independent():
    lang = Language("English", "en", {"tree": "tree"})
    dup = lang.copy()
    assert dup == lang
    dup.attach("x", 1)
    assert lang.attachment("x") is None


def test_available_locales(tmp_path):
    assert available_locales(tmp_path / "nope") == {}
    (tmp_path / "en.json").write_text("{}", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    assert available_locales(tmp_path) == {"en": tmp_path / "en.json"}


def test_deeply_nested_document_is_a_decode_error():
    depth = 5000
    doc = '{"name": "E", "short_name": "en", "strings": ' + '{"a": ' * depth + '"x"' + "}" * depth + "}"
    with pytest.raises(DecodeError):
        Language.decode_from_text(doc)


def test_deeply_nested_table_is_a_decode_error():
    strings = "x"
    for _ in range(5000):
        strings = {"a": strings}
    with pytest.raises(DecodeError):
        Language.from_dict({"name": "E", "short_name": "en", "strings": strings})


def test_constructor_copies_strings():
    strings = {"tree": "tree", "category": {"foo": "bar"}}
    lang = Language("English", "en", strings)
    strings["tree"] = "changed"
    strings["category"]["foo"] = "changed"
    assert lang.get("tree") == "tree"
    assert lang.get("category\\foo") == "bar"


def test_shapes():
    lang = Language("English", "en", {"tree": "tree", "category": {"foo": "bar"}})
    assert lang.shapes() == {"tree": "leaf", "category": "branch", "category\\foo": "leaf"}
