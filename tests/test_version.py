# SPDX-License-Identifier: MIT
"""Unit tests for the Version value and its constructors."""

from decimal import Decimal

import pytest

import dualver
from dualver import (
    MalformedVersionLiteral,
    NumericLiteral,
    TextLiteral,
    UnsupportedCoercion,
    Version,
    coerce,
    declare,
    is_lax,
    is_strict,
    parse,
    qv,
)


class TestParse:
    """Tests for parse function."""

    def test_dotted(self):
        v = parse("v1.2.3")
        assert v.components == (1, 2, 3)
        assert v.is_qv() is True
        assert v.is_alpha() is False

    def test_v_with_one_dot_is_literal(self):
        v = parse("v1.23")
        assert v.components == (1, 23)
        assert v.is_qv() is True

    def test_decimal_with_one_dot_is_grouped(self):
        v = parse("1.23")
        assert v.components == (1, 230)
        assert v.is_qv() is False

    def test_two_dots_without_v(self):
        v = parse("1.2.3")
        assert v.components == (1, 2, 3)
        assert v.is_qv() is True

    def test_float(self):
        v = parse(0.96)
        assert v.components == (0, 960)
        assert v.is_qv() is False

    def test_int(self):
        v = parse(5)
        assert v.components == (5,)
        assert v.is_qv() is False

    def test_decimal_number(self):
        assert parse(Decimal("1.002003")).components == (1, 2, 3)

    def test_tagged_literals(self):
        assert parse(TextLiteral("v1.2.3")).components == (1, 2, 3)
        assert parse(NumericLiteral(1.5)).components == (1, 500)

    def test_keeps_original_literal(self):
        assert parse(" 1.50 ").original_literal == "1.50"
        assert parse(0.96).original_literal == "0.96"

    def test_alpha_decimal(self):
        assert parse("1.002_03").is_alpha() is True

    def test_alpha_absent(self):
        assert parse("v1.2.0").is_alpha() is False

    def test_classmethod(self):
        assert Version.parse("v1.2.3") == parse("v1.2.3")

    @pytest.mark.parametrize("value", [None, True, [1, 2], object()])
    def test_non_literal_is_malformed(self, value):
        with pytest.raises(MalformedVersionLiteral, match="string or a number"):
            parse(value)

    def test_malformed_string(self):
        with pytest.raises(MalformedVersionLiteral):
            parse("1.2.3-beta")


class TestDeclare:
    """Tests for declare function."""

    def test_decimal_looking_literal_is_qv(self):
        v = declare("1.2")
        assert v.is_qv() is True
        assert v.components == (1, 200)
        assert v.normal() == "v1.200.0"

    def test_dotted_literal(self):
        v = declare("1.2.3_4")
        assert v.is_qv() is True
        assert v.is_alpha() is True
        assert v.components == (1, 2, 3, 4)

    def test_qv_alias(self):
        assert qv is declare

    def test_classmethod(self):
        assert Version.declare("v1.2").is_qv() is True

    def test_number(self):
        v = declare(1.5)
        assert v.is_qv() is True
        assert v.components == (1, 500)

    def test_malformed(self):
        with pytest.raises(MalformedVersionLiteral):
            declare("v1.2.x")


class TestVersionValue:
    """Tests for the Version value type."""

    def test_direct_construction(self):
        v = Version((1, 2, 3), qv=True)
        assert v.components == (1, 2, 3)
        assert v.original_literal is None

    def test_components_become_tuple(self):
        assert Version([1, 2]).components == (1, 2)

    def test_empty_components_rejected(self):
        with pytest.raises(ValueError, match="at least one component"):
            Version(())

    @pytest.mark.parametrize("bad", [-1, 1.5, "1", True])
    def test_bad_component_rejected(self, bad):
        with pytest.raises(ValueError, match="non-negative integers"):
            Version((1, bad))

    def test_immutable(self):
        v = parse("v1.2.3")
        with pytest.raises(AttributeError):
            v.components = (4, 5, 6)

    def test_repr_omits_literal(self):
        assert repr(parse("v1.2.3")) == "Version(components=(1, 2, 3), qv=True, alpha=False)"

    def test_equality_ignores_qv_and_literal(self):
        assert parse("1.002003") == parse("v1.2.3")

    def test_equality_ignores_trailing_zeros(self):
        assert parse("v1.2") == parse("v1.2.0.0")

    def test_alpha_differs(self):
        assert parse("v1.2_3") != parse("v1.2.3")

    def test_equal_versions_hash_equal(self):
        assert hash(parse("1.002003")) == hash(parse("v1.2.3.0"))
        assert len({parse("1.2"), parse("v1.200"), parse("v1.200.0")}) == 1

    def test_usable_as_dict_key(self):
        table = {parse("v1.2.3"): "release"}
        assert table[parse("1.002003")] == "release"

    def test_eq_unsupported_is_false(self):
        v = parse("v1.2.3")
        assert (v == None) is False  # noqa: E711
        assert (v != None) is True  # noqa: E711
        assert v != [1, 2, 3]

    def test_eq_literal(self):
        assert parse("v1.2.3") == "1.002003"
        assert parse("v0.5.0") == 0.005

    def test_eq_malformed_literal_raises(self):
        with pytest.raises(MalformedVersionLiteral):
            parse("v1.2.3") == "1.2.x"

    def test_ordering_operators(self):
        low, high = parse("v1.2.3"), parse("v1.2.4")
        assert low < high
        assert low <= high
        assert high > low
        assert high >= low
        assert low <= parse("1.002003")
        assert low >= parse("1.002003")

    def test_ordering_against_literals(self):
        v = parse("v0.95.0")
        assert v < 0.96
        assert 0.96 > v
        assert "v0.94" < v

    def test_ordering_unsupported_raises(self):
        with pytest.raises(UnsupportedCoercion):
            parse("v1.2.3") < None  # noqa: B015

    def test_sorting(self):
        versions = [parse(x) for x in ["v1.10.0", "1.002", "v1.2.3", "v1.2.3_1", "1.1"]]
        assert [v.normal() for v in sorted(versions)] == [
            "v1.2.0",
            "v1.2.3",
            "v1.2.3_1",
            "v1.10.0",
            "v1.100.0",
        ]


class TestCoerce:
    """Tests for coerce function."""

    def test_version_passthrough(self):
        v = parse("v1.2.3")
        assert coerce(v) is v

    def test_string(self):
        assert coerce("1.002").components == (1, 2)

    def test_unsupported(self):
        with pytest.raises(UnsupportedCoercion):
            coerce(None)

    def test_unsupported_is_type_error(self):
        with pytest.raises(TypeError):
            coerce(True)


class TestFlagQueries:
    """Tests for the module-level is_alpha and is_qv functions."""

    def test_is_alpha(self):
        assert dualver.is_alpha("1.002_03") is True
        assert dualver.is_alpha(parse("v1.2.0")) is False

    def test_is_qv(self):
        assert dualver.is_qv("v1.2") is True
        assert dualver.is_qv(1.2) is False
        assert dualver.is_qv(declare(1.2)) is True


class TestIsLax:
    """Tests for is_lax function."""

    @pytest.mark.parametrize("literal", ["v1.2.3", "1.2.3", "1.002_003", "v1.2_3", "5", 1.5, "v7"])
    def test_accepted(self, literal):
        assert is_lax(literal) is True

    @pytest.mark.parametrize("literal", ["", "1.", "v1.2_3.4", "1.2a", None, True])
    def test_rejected(self, literal):
        assert is_lax(literal) is False

    def test_single_component_does_not_warn(self, recwarn):
        assert is_lax("v7") is True
        assert len(recwarn) == 0


class TestIsStrict:
    """Tests for is_strict function."""

    @pytest.mark.parametrize("literal", ["v1.2.3", "v0.0.0", "v1.22.333", "v1.2.3.4", "1.002003", "0.5", "3", 1.5])
    def test_strict(self, literal):
        assert is_strict(literal) is True

    @pytest.mark.parametrize(
        "literal",
        ["1.2.3", "v1.2", "v1.2.3_4", "1.002_003", "01.5", "v01.2.3", "v1.2.3456", "1.", None, True],
    )
    def test_not_strict(self, literal):
        assert is_strict(literal) is False
