import pytest

from wins.listvalue import ListValue


def test_normal():
    assert ListValue("RANCHER=hello WINS=world").get() == ["RANCHER=hello", "WINS=world"]


def test_escaped_double_quotes():
    value = ListValue('NICK=bye LUTHER="hello" RANCHER="hello world" WINS=world')
    assert value.get() == ["NICK=bye", 'LUTHER="hello"', 'RANCHER="hello world"', "WINS=world"]


def test_escaped_single_quotes():
    value = ListValue("NICK=bye LUTHER='hello' RANCHER='hello world' WINS=world")
    assert value.get() == ["NICK=bye", "LUTHER='hello'", "RANCHER='hello world'", "WINS=world"]


def test_escaped_single_and_double_quotes():
    value = ListValue("NICK=bye LUTHER=\"hello\" RANCHER='hello world' WINS=world")
    assert value.get() == ["NICK=bye", 'LUTHER="hello"', "RANCHER='hello world'", "WINS=world"]


def test_escaped_quotes_in_quotes():
    value = ListValue("NICK=bye LUTHER=\"'hello'\" RANCHER='\"hello world\"' WINS=world")
    assert value.get() == [
        "NICK=bye",
        "LUTHER=\"'hello'\"",
        "RANCHER='\"hello world\"'",
        "WINS=world",
    ]


def test_empty_value_gives_empty_list():
    value = ListValue()
    assert value.is_empty() is True
    assert value.get() == []


def test_set_replaces_text():
    value = ListValue()
    value.set("a b")
    assert value.is_empty() is False
    assert str(value) == "a b"
    assert value.get() == ["a", "b"]


def test_repeated_spaces_keep_empty_items():
    assert ListValue("a  b").get() == ["a", "", "b"]


@pytest.mark.parametrize("text", ['A="open', "A='open", "A=\"x\" B='y"])
def test_unpaired_quote_raises(text):
    with pytest.raises(ValueError, match="unpaired"):
        ListValue(text).get()