import pytest

from mjbase.initext import (
    Comment,
    KeyValue,
    NilLine,
    Node,
    NodeType,
    check_key_name,
    icompare,
    trim,
)


class _Root(Node):
    def __init__(self):
        super().__init__(NodeType.FILEROOT, None)
        self.dirty = False

    def is_dirty(self):
        return self.dirty

    def set_dirty(self, dirty):
        self.dirty = dirty

    def render(self):
        return ""


def test_created_node_type_values():
    assert NilLine.try_create("", None).node_type == 0x100
    assert KeyValue.try_create("a=1", None).node_type == 0x400


def test_trim_default_and_custom_chars():
    assert trim("  \t abc \r\n") == "abc"
    assert trim("[ name ]", "[] ") == "name"
    assert trim("   ") == ""


def test_icompare():
    assert icompare("Hello", "hELLO") == 0
    assert icompare("abc", "abd") < 0
    assert icompare("abd", "ABC") > 0
    assert icompare("ab", "abc") < 0
    assert icompare("abc", "ab") > 0


@pytest.mark.parametrize(
    "name, expected",
    [
        ("key", True),
        ("", False),
        ("a;b", False),
        ("a#b", False),
        ("a=b", False),
        ("[sect]", False),
        ("[open", True),
    ],
)
def test_check_key_name(name, expected):
    assert check_key_name(name) is expected


def test_nilline_try_create():
    assert NilLine.try_create("x", None) is None
    node = NilLine.try_create("", None)
    assert node.node_type == NodeType.NILLINE
    assert node.render() == "\n"


def test_comment_try_create():
    assert Comment.try_create("", None) is None
    assert Comment.try_create("key=value", None) is None
    node = Comment.try_create("; note", None)
    assert node.text == "; note"
    assert node.render() == "; note\n"
    assert Comment.try_create("# hash", None).text == "# hash"


def test_keyvalue_try_create():
    node = KeyValue.try_create("Port  =  8080", None)
    assert node.key == "Port"
    assert node.value == "8080"
    assert node.render() == "Port=8080\n"


@pytest.mark.parametrize("line", ["", "=value", "novalue", "a;b=1", "[s]=1"])
def test_keyvalue_try_create_rejects(line):
    assert KeyValue.try_create(line, None) is None


def test_keyvalue_empty_value_allowed():
    node = KeyValue.try_create("key=", None)
    assert node.key == "key"
    assert node.empty


def test_as_int():
    assert KeyValue(None, "k", "42abc").as_int() == 42
    assert KeyValue(None, "k", "-7").as_int() == -7
    assert KeyValue(None, "k", "abc").as_int() == 0
    assert KeyValue(None, "k", "abc").as_int(5) == 5
    assert KeyValue(None, "k", "").as_int(9) == 9


def test_as_int_overflow_falls_back():
    assert KeyValue(None, "k", "99999999999").as_int(3) == 3


def test_as_float():
    assert KeyValue(None, "k", "0.25").as_float() == 0.25
    assert KeyValue(None, "k", "1e2x").as_float() == 100.0
    assert KeyValue(None, "k", "x").as_float() == 0.0
    assert KeyValue(None, "k", "x").as_float(1.5) == 1.5


def test_as_bool():
    assert KeyValue(None, "k", "TRUE").as_bool() is True
    assert KeyValue(None, "k", "False").as_bool() is False
    assert KeyValue(None, "k", "3").as_bool() is True
    assert KeyValue(None, "k", "0").as_bool() is False
    assert KeyValue(None, "k", "maybe").as_bool() is False
    assert KeyValue(None, "k", "maybe").as_bool(True) is True


def test_set_value_keeps_first_line_and_marks_dirty():
    root = _Root()
    node = KeyValue(root, "k", "old")
    node.set_value("  new \nsecond line")
    assert node.value == "new"
    assert root.dirty is True
    assert node.is_dirty() is True


def test_set_value_same_value_not_dirty():
    root = _Root()
    node = KeyValue(root, "k", "same")
    node.set_value("same")
    assert root.dirty is False


def test_try_value_string_writes_default_when_empty():
    root = _Root()
    node = KeyValue(root, "k", "")
    assert node.try_value("fallback") == "fallback"
    assert node.value == "fallback"
    assert root.dirty is True


def test_try_value_int():
    node = KeyValue(None, "k", "bad")
    assert node.try_value(12) == 12
    assert node.value == "12"
    assert KeyValue(None, "k", "34").try_value(12) == 34


def test_try_value_float_round_trip():
    node = KeyValue(None, "k", "")
    assert node.try_value(0.1) == 0.1
    assert float(node.value) == 0.1


def test_try_value_bool_normalises():
    node = KeyValue(None, "k", "5")
    assert node.try_value(False) is True
    assert node.value == "true"
    empty = KeyValue(None, "k", "")
    assert empty.try_value(False) is False
    assert empty.value == "false"


def test_try_value_unsupported_type():
    with pytest.raises(TypeError):
        KeyValue(None, "k", "").try_value([1])


def test_set_key_without_owner():
    node = KeyValue(None, "old", "v")
    assert node.set_key("  new ") is True
    assert node.key == "new"
    assert node.set_key("bad=name") is False
    assert node.key == "new"


def test_set_key_owner_refuses():
    node = KeyValue(_Root(), "old", "v")
    assert node.set_key("new") is False
    assert node.key == "old"


def test_dirty_without_owner_is_false():
    node = KeyValue(None, "k", "v")
    node.set_value("other")
    assert node.is_dirty() is False
    assert str(node) == "k=other\n"