import pytest

from ircline import tags

pytestmark = [pytest.mark.unit, pytest.mark.tags]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("foo", {"foo": ""}),
        ("id=123;flag", {"id": "123", "flag": ""}),
        ("empty=", {"empty": ""}),
        ("+example=raw+:=,escaped\\:\\s\\\\", {"+example": "raw+:=,escaped; \\"}),
        ("a=b=c", {"a": "b=c"}),
        ("inspircd.org/service;inspircd.org/bot", {"inspircd.org/service": "", "inspircd.org/bot": ""}),
        ("a;;b;", {"a": "", "b": ""}),
        ("=value", {}),
        ("dup=1;dup=2", {"dup": "2"}),
    ]
)
def test_parse_tags(raw, expected):
    assert tags.parse_tags(raw) == expected


def test_flag_tag_constructs_without_value_separator():
    assert tags.parse_tags("foo").construct() == "foo"


def test_construct_has_no_leading_separator():
    raw = tags.Tags({"id": "123", "flag": ""}).construct()
    assert not raw.startswith(";")
    assert set(raw.split(";")) == {"id=123", "flag"}


def test_construct_escapes_values():
    assert tags.construct_tags({"msg": "hi there; bye"}) == r"msg=hi\sthere\:\sbye"


def test_construct_empty():
    assert tags.Tags().construct() == ""


def test_construct_then_parse_recovers_pairs():
    original = tags.Tags({"a": "1", "b": "", "c": "x;y z\\"})
    assert tags.parse_tags(original.construct()) == original


def test_get_reports_presence():
    parsed = tags.parse_tags("id=123;flag")
    assert parsed.get("id") == ("123", True)
    assert parsed.get("flag") == ("", True)
    assert parsed.get("missing") == ("", False)


def test_copy_is_independent():
    original = tags.parse_tags("id=123")
    copy = original.copy()
    copy["id"] = "456"
    copy["new"] = ""

    assert original == {"id": "123"}
    assert copy == {"id": "456", "new": ""}


def test_rejects_empty_key():
    with pytest.raises(ValueError):
        tags.Tags()[""] = "value"


@pytest.mark.parametrize("value", [True, 1, b"bytes"])
def test_rejects_non_string_values(value):
    with pytest.raises(TypeError):
        tags.Tags({"bot": value})


def test_none_value_is_flag_tag():
    flagged = tags.Tags({"bot": None})
    assert flagged == {"bot": ""}
    assert flagged.construct() == "bot"
