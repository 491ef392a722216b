"""Tests for crumb.cookie — Cookie equality, ordering and serialization."""

from datetime import timedelta

import pytest

from crumb.cookie import Cookie, SameSite
from crumb.errors import ParseSameSiteError


class TestSerialization:
    def test_simple(self) -> None:
        assert str(Cookie("name", "value")) == "name=value"

    def test_empty_value(self) -> None:
        assert str(Cookie("name", "")) == "name="

    def test_all_attributes_in_fixed_order(self) -> None:
        c = Cookie(
            "session",
            "abc",
            domain="example.com",
            expires="Wed, 21 Oct 2025 07:28:00 GMT",
            http_only=True,
            max_age=timedelta(seconds=3600),
            partitioned=True,
            path="/app",
            same_site=SameSite.STRICT,
            secure=True,
        )
        assert c.to_header_value() == (
            "session=abc; Domain=example.com; Expires=Wed, 21 Oct 2025 07:28:00 GMT; "
            "HttpOnly; Max-Age=3600; Partitioned; Path=/app; SameSite=Strict; Secure"
        )

    def test_path_and_secure(self) -> None:
        c = Cookie("name", "value", path="/", secure=True)
        assert c.to_header_value() == "name=value; Path=/; Secure"

    def test_false_flags_omitted(self) -> None:
        c = Cookie("a", "b", http_only=False, partitioned=False, secure=False)
        assert c.to_header_value() == "a=b"

    def test_false_and_unset_render_identically(self) -> None:
        assert str(Cookie("a", "b", secure=False)) == str(Cookie("a", "b"))

    def test_max_age_drops_sub_seconds(self) -> None:
        c = Cookie("a", "b", max_age=timedelta(seconds=90, milliseconds=750))
        assert c.to_header_value() == "a=b; Max-Age=90"

    def test_max_age_zero(self) -> None:
        c = Cookie("a", "", max_age=timedelta(0))
        assert c.to_header_value() == "a=; Max-Age=0"

    def test_values_not_escaped(self) -> None:
        c = Cookie("a", 'x"y z', path="/a b")
        assert c.to_header_value() == 'a=x"y z; Path=/a b'

    def test_same_site_none(self) -> None:
        assert str(Cookie("a", "b", same_site=SameSite.NONE)) == "a=b; SameSite=None"


class TestEquality:
    def test_equal_fields(self) -> None:
        assert Cookie("a", "1", path="/") == Cookie("a", "1", path="/")

    def test_domain_ignores_case(self) -> None:
        assert Cookie("a", "1", domain="Example.COM") == Cookie("a", "1", domain="example.com")

    def test_path_ignores_case(self) -> None:
        assert Cookie("a", "1", path="/App") == Cookie("a", "1", path="/app")

    def test_value_is_case_sensitive(self) -> None:
        assert Cookie("a", "X") != Cookie("a", "x")

    def test_name_is_case_sensitive(self) -> None:
        assert Cookie("A", "1") != Cookie("a", "1")

    def test_unset_domain_differs_from_set(self) -> None:
        assert Cookie("a", "1") != Cookie("a", "1", domain="example.com")

    def test_unset_flag_differs_from_false(self) -> None:
        assert Cookie("a", "1") != Cookie("a", "1", secure=False)

    def test_case_folding_is_ascii_only(self) -> None:
        assert Cookie("a", "1", domain="ÉXAMPLE.com") != Cookie("a", "1", domain="éxample.com")
        assert Cookie("a", "1", path="/Ä") != Cookie("a", "1", path="/ä")

    def test_hash_consistent_with_equality(self) -> None:
        a = Cookie("a", "1", domain="EXAMPLE.com", path="/X")
        b = Cookie("a", "1", domain="example.com", path="/x")
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_not_equal_to_other_types(self) -> None:
        assert Cookie("a", "1") != "a=1"

    def test_empty_name_allowed_on_direct_construction(self) -> None:
        assert Cookie("", "x").name == ""


class TestOrdering:
    def test_orders_by_name(self) -> None:
        assert Cookie("a", "2") < Cookie("b", "1")
        assert Cookie("b", "1") > Cookie("a", "2")

    def test_same_name_is_neither_less_nor_greater(self) -> None:
        a = Cookie("a", "1")
        b = Cookie("a", "2", secure=True)
        assert not a < b
        assert not a > b
        assert a <= b
        assert a >= b
        assert a != b

    def test_sorted(self) -> None:
        cookies = [Cookie("c", ""), Cookie("a", ""), Cookie("b", "")]
        assert [c.name for c in sorted(cookies)] == ["a", "b", "c"]

    def test_compare_other_type_raises(self) -> None:
        with pytest.raises(TypeError):
            Cookie("a", "1") < "b"  # type: ignore[operator]


class TestConstruction:
    def test_named(self) -> None:
        assert Cookie.named("flag") == Cookie("flag", "")

    def test_from_pair(self) -> None:
        assert Cookie.from_pair(("a", "1")) == Cookie("a", "1")

    def test_negative_max_age_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_age"):
            Cookie("a", "b", max_age=timedelta(seconds=-5))

    def test_zero_max_age_allowed(self) -> None:
        assert Cookie("a", "b", max_age=timedelta(0)).max_age == timedelta(0)

    def test_frozen(self) -> None:
        c = Cookie("a", "b")
        with pytest.raises(AttributeError):
            c.name = "c"  # type: ignore[misc]

    def test_parse_classmethods(self) -> None:
        assert Cookie.parse("a=1; Secure") == Cookie("a", "1", secure=True)
        assert Cookie.parse_strict("a=1; Path=/") == Cookie("a", "1", path="/")

    def test_builder_classmethod(self) -> None:
        assert Cookie.builder("a", "1").secure(True).build() == Cookie("a", "1", secure=True)


class TestSameSite:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Strict", SameSite.STRICT),
            ("strict", SameSite.STRICT),
            ("LAX", SameSite.LAX),
            ("none", SameSite.NONE),
        ],
    )
    def test_parse(self, text: str, expected: SameSite) -> None:
        assert SameSite.parse(text) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ParseSameSiteError) as exc_info:
            SameSite.parse("sometimes")
        assert exc_info.value == ParseSameSiteError("sometimes")

    def test_str(self) -> None:
        assert str(SameSite.LAX) == "Lax"
