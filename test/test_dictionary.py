import pytest

from forth_lang.forth_parser.lexer import tokenize
from forth_lang.machine.dictionary import (
    PRIMITIVES,
    Composite,
    Dictionary,
    InvalidDefinition,
    Primitive,
    UnknownWord,
)
from forth_lang.machine.instructionset import *


def test_seeded_with_primitives():
    d = Dictionary()
    assert len(d) == len(PRIMITIVES) == 8
    assert d.names() == sorted(["+", "-", "*", "/", "dup", "drop", "swap", "over"])
    assert d.lookup("swap") == Primitive("swap", Swap())


def test_lookup_case_insensitive():
    d = Dictionary()
    assert d.lookup("DUP") is d.lookup("dup")
    assert "OvEr" in d
    assert d.lookup("nope") is None


def test_define_compiles_body():
    d = Dictionary()
    word = d.define("double", tokenize("2 *"))
    assert word == Composite("double", (PushV(2), Multiply()))
    assert d.lookup("DOUBLE") is word
    assert word.listing() == [PushV(2), Multiply()]


def test_nested_definitions_flatten():
    d = Dictionary()
    d.define("double", tokenize("2 *"))
    quad = d.define("quad", tokenize("double double"))
    assert quad.listing() == [PushV(2), Multiply(), PushV(2), Multiply()]


def test_redefinition_does_not_change_existing_words():
    d = Dictionary()
    d.define("foo", tokenize("5"))
    bar = d.define("bar", tokenize("foo 1 +"))
    d.define("foo", tokenize("6"))
    assert bar.listing() == [PushV(5), PushV(1), Plus()]
    assert d.lookup("foo").listing() == [PushV(6)]


def test_self_reference_uses_old_meaning():
    d = Dictionary()
    d.define("foo", tokenize("1"))
    d.define("foo", tokenize("foo foo +"))
    assert d.lookup("foo").listing() == [PushV(1), PushV(1), Plus()]


def test_shadow_primitive():
    d = Dictionary()
    d.define("+", tokenize("*"))
    assert d.lookup("+").listing() == [Multiply()]
    assert len(d) == 8


def test_unknown_word_installs_nothing():
    d = Dictionary()
    with pytest.raises(UnknownWord) as exc:
        d.define("foo", tokenize("1 bar"))
    assert exc.value.word == "bar"
    assert "foo" not in d


def test_empty_body():
    d = Dictionary()
    noop = d.define("noop", tokenize(""))
    assert noop.listing() == []
    # empty words vanish from bodies that use them
    assert d.define("x", tokenize("noop 1 noop")).body == (PushV(1),)


@pytest.mark.parametrize("name", ["5", "-5", ":", ";", ""])
def test_invalid_names(name):
    with pytest.raises(InvalidDefinition):
        Dictionary().define(name, tokenize("1"))


def test_repeated_composition_shares_definitions():
    d = Dictionary()
    d.define("w0", tokenize("1 drop"))
    for i in range(1, 64):
        d.define(f"w{i}", tokenize(f"w{i - 1} w{i - 1}"))
    top = d.lookup("w63")
    assert len(top.body) == 2
    assert top.body[0] is d.lookup("w62")


def test_deep_nesting_walks_without_recursion():
    d = Dictionary()
    d.define("w0", tokenize("1"))
    for i in range(1, 5000):
        d.define(f"w{i}", tokenize(f"w{i - 1}"))
    assert d.lookup("w4999").listing() == [PushV(1)]
