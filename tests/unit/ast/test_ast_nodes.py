#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for element constructors and shape helpers."""
import pytest

from pandoc_filter.ast import (
    BulletList,
    Code,
    Div,
    Formula,
    Header,
    HorizontalRule,
    Image,
    Math,
    MetaMap,
    Null,
    Para,
    Space,
    Str,
    Table,
    elt,
    get_content,
    get_tag,
    is_element,
)
from pandoc_filter.exceptions import ArityError, ValidationError


@pytest.mark.unit
class TestConstructors:
    """Test the elt factory and the predefined constructors."""

    def test_single_argument_is_the_payload(self) -> None:
        """Test one-argument kinds store the argument itself."""
        assert Str("hi") == {"t": "Str", "c": "hi"}
        assert Para([Str("a")]) == {"t": "Para", "c": [{"t": "Str", "c": "a"}]}

    def test_several_arguments_become_a_list(self) -> None:
        """Test multi-argument kinds store their arguments as a list."""
        assert Header(2, ["id", [], []], [Str("H")]) == {
            "t": "Header",
            "c": [2, ["id", [], []], [{"t": "Str", "c": "H"}]],
        }
        assert Code(["", ["py"], []], "x")["c"] == [["", ["py"], []], "x"]

    def test_zero_arity_has_no_payload(self) -> None:
        """Test nullary kinds serialize as a bare tag."""
        assert Space() == {"t": "Space"}
        assert HorizontalRule() == {"t": "HorizontalRule"}
        assert Null() == {"t": "Null"}

    @pytest.mark.parametrize(
        "constructor,args",
        [
            (Str, ()),
            (Header, (1, ["", [], []])),
            (Space, ("extra",)),
            (Table, ([], [], [], [])),
            (Image, (["", [], []], [])),
        ],
    )
    def test_wrong_arity_raises(self, constructor, args) -> None:
        """Test a wrong argument count raises ArityError."""
        with pytest.raises(ArityError):
            constructor(*args)

    def test_arity_error_message_and_fields(self) -> None:
        """Test the error names the tag and both counts."""
        with pytest.raises(ArityError) as exc_info:
            Div(["", [], []])

        err = exc_info.value
        assert str(err) == "Div expects 2 arguments, but given 1"
        assert (err.tag, err.expected, err.given) == ("Div", 2, 1)
        assert isinstance(err, ValidationError)

    def test_formula_alias(self) -> None:
        """Test Formula builds Math elements."""
        assert Formula is Math
        assert Formula({"t": "InlineMath"}, "x")["t"] == "Math"

    def test_custom_kind(self) -> None:
        """Test elt builds constructors for arbitrary tags."""
        Figure = elt("Figure", 3)

        assert Figure.__name__ == "Figure"
        assert Figure(1, 2, 3) == {"t": "Figure", "c": [1, 2, 3]}

    def test_meta_constructors(self) -> None:
        """Test metadata values use the same shape."""
        assert MetaMap({}) == {"t": "MetaMap", "c": {}}


@pytest.mark.unit
class TestShapeHelpers:
    """Test is_element, get_tag and get_content."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ({"t": "Str", "c": "x"}, True),
            ({"t": "Space"}, True),
            ({"t": None}, True),
            ({"c": "x"}, False),
            ({}, False),
            ([{"t": "Str"}], False),
            ("t", False),
            (None, False),
        ],
    )
    def test_is_element(self, value, expected) -> None:
        """Test only mappings with a tag key are elements."""
        assert is_element(value) is expected

    def test_get_tag_and_content(self) -> None:
        """Test accessors read the tag and payload."""
        bullet = BulletList([[Para([])]])

        assert get_tag(bullet) == "BulletList"
        assert get_content(bullet) == [[{"t": "Para", "c": []}]]
        assert get_content(Space()) is None
        assert get_content(Space(), []) == []
