import pytest

from searchplan.core.exceptions import BadRequestError
from searchplan.request import FieldReference, Helper


@pytest.mark.parametrize(
    "text, expected",
    [
        ("name", "name"),
        ("'name'", "name"),
        ('"name"', "name"),
        ("`name`", "name"),
        ("'it''s'", "it's"),
        ('"say ""hi"""', 'say "hi"'),
        ("`a``b`", "a``b"),
        ("'name\"", "'name\""),
        ("'", "'"),
        ("", ""),
    ],
)
def test_unquote_text(text: str, expected: str):
    assert Helper.unquote_text(text) == expected


def test_get_field_name():
    assert Helper.get_field_name("a.b") == "a.b"
    assert Helper.get_field_name(FieldReference(attr="a.c")) == "a.c"


def test_dedup_field_names_keeps_first_seen_order():
    refs = ["b", FieldReference(attr="a"), "b", "c", FieldReference(attr="a")]
    assert Helper.dedup_field_names(refs) == ["b", "a", "c"]


def test_group_field_names_by_path():
    groups = Helper.group_field_names_by_path(
        [
            {"path": "a", "field": "a.x"},
            {"path": FieldReference(attr="b"), "field": "b.z"},
            {"path": "a", "field": FieldReference(attr="a.y")},
        ]
    )
    assert groups == {"a": ["a.x", "a.y"], "b": ["b.z"]}
    assert list(groups) == ["a", "b"]


def test_group_field_names_by_path_missing_key():
    with pytest.raises(BadRequestError):
        Helper.group_field_names_by_path([{"path": "a"}])
