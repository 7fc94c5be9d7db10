"""
Tests for the multiset store: construction, mutation, queries and stream I/O.
"""

import io

import pytest

from nestset import MalformedNotationError, MultiSet, parse_multiset


class TestConstruction:
    def test_default_is_empty(self):
        obj = MultiSet()
        assert obj.is_empty()
        assert obj.cardinality() == 0
        assert obj.distinct_count() == 0
        assert str(obj) == "{}"

    def test_only_spaces_is_empty(self):
        assert MultiSet("{          }").is_empty()

    @pytest.mark.parametrize("text, cardinality", [
        ("{a, b, d, qqq, {sfd,sdsd}, {54, {123, 543, asd}}}", 6),
        ("{{{{{}}}}}", 1),
        ("{}", 0),
        ("{Cat, Dog, {Cat, Dog}}", 3),
        ("{Cat, Dog, {Cat, Dog}, Cat, Dog, Cat, Dog, Mouse, {Cat, Mouse}}", 9),
    ])
    def test_cardinality(self, text, cardinality):
        assert MultiSet(text).cardinality() == cardinality

    def test_cardinality_and_distinct_count(self):
        obj = MultiSet("{Cat,Cat,Cat,Dog}")
        assert obj.cardinality() == 4
        assert obj.distinct_count() == 2
        assert obj.count("Cat") == 3
        assert len(obj) == 4

    def test_bare_list_equals_braced_list(self):
        assert MultiSet("{a,b}") == MultiSet("a,b")
        assert MultiSet("a, b, {c,d}").contains("{c,d}")

    def test_nested_element_identity(self):
        obj = MultiSet("{a,{c,d}}")
        assert obj.count("{c,d}") == 1
        assert obj.count("{c, d}") == 1
        assert obj.count("c") == 0
        assert obj.count("{d,c}") == 0

    def test_deeply_nested_element(self):
        obj = MultiSet("{{{{}}}}")
        assert obj["{{{}}}"]
        assert obj.elements() == ["{{{}}}"]


class TestAssign:
    def test_assign_replaces_content(self):
        obj = MultiSet("{a, b}")
        assert obj.assign("{c}")
        assert obj == MultiSet("{c}")

    @pytest.mark.parametrize("text", ["{a,b,}", "{a,{b,c}}}", "{a, b,, c}"])
    def test_malformed_assign_leaves_store_unchanged(self, text):
        obj = MultiSet("{x, y, y}")
        assert not obj.assign(text)
        assert obj == MultiSet("{x, y, y}")

    def test_malformed_constructor_argument_gives_empty(self):
        assert MultiSet("{a, b, {c, d}}}").is_empty()

    def test_update_with_notation(self):
        obj = MultiSet()
        obj += "{a}"
        obj += "{b}"
        obj += "{asd, asdasd ,asdasds,}"
        assert obj.cardinality() == 2
        assert obj.elements() == ["a", "b"]


class TestMutation:
    def test_add(self):
        obj = MultiSet()
        assert obj.add("a")
        assert obj.add(" a ")
        assert obj.add("{b, a}")
        assert obj.count("a") == 2
        assert obj.count("{b,a}") == 1
        assert obj.count("{a,b}") == 0

    @pytest.mark.parametrize("element", ["", "a,b", "a b", "{a,", "{a},{b}", "a-b", None])
    def test_add_rejects_invalid_element(self, element):
        obj = MultiSet("{a}")
        assert not obj.add(element)
        assert obj == MultiSet("{a}")

    def test_remove_decrements(self):
        obj = MultiSet("{a, a, a, b}")
        assert obj.remove("a")
        assert obj.count("a") == 2
        assert obj.cardinality() == 3

    def test_remove_last_occurrence_drops_entry(self):
        obj = MultiSet("{a, b}")
        assert obj.remove("b")
        assert obj.distinct_count() == 1
        assert "b" not in obj.elements()

    def test_remove_absent_or_invalid(self):
        obj = MultiSet("{a}")
        assert not obj.remove("z")
        assert not obj.remove("a,")
        assert obj == MultiSet("{a}")

    def test_remove_all(self):
        obj = MultiSet("{a, a, b}")
        assert obj.remove_all("a") == 2
        assert obj.count("a") == 0
        assert obj.remove_all("a") == 0
        assert obj.remove_all("{,}") == 0
        assert obj == MultiSet("{b}")

    def test_clear(self, abc):
        abc.clear()
        assert abc.is_empty()
        assert not abc


class TestQueries:
    def test_contains(self, abc):
        assert abc.contains("a")
        assert "b" in abc
        assert abc["c"]
        assert not abc["d"]
        assert not abc.contains("a,")

    def test_insertion_order(self):
        obj = MultiSet("{b, a, b, c}")
        assert obj.elements() == ["b", "a", "c"]
        assert list(obj.items()) == [("b", 2), ("a", 1), ("c", 1)]
        assert list(obj) == ["b", "b", "a", "c"]
        assert str(obj) == "{b,b,a,c}"

    def test_copy_is_independent(self, abc):
        other = abc.copy()
        assert other == abc
        other.add("d")
        assert other != abc
        assert abc.count("d") == 0

    def test_repr(self):
        assert repr(MultiSet("{a, {b}}")) == "MultiSet('{a,{b}}')"

    def test_not_hashable(self, abc):
        with pytest.raises(TypeError):
            hash(abc)


class TestRoundTrip:
    @pytest.mark.parametrize("text", [
        "{}",
        "{a}",
        "{Cat, Dog, {Cat, Dog}, Cat, Mouse, {Cat, Mouse}}",
        "{{{{}}}}",
        "{1, 1, 2, {3, {4, 4}}}",
    ])
    def test_serialization_round_trip(self, text):
        obj = MultiSet(text)
        again = MultiSet(str(obj))
        assert again == obj
        assert str(again) == str(obj)

    def test_no_stray_separators(self):
        text = str(MultiSet("{a, a, b, {c}, {c}}"))
        assert text == "{a,a,b,{c},{c}}"
        assert ",," not in text
        assert ",}" not in text
        assert "{," not in text


class TestStrictParsing:
    def test_parse_multiset(self):
        assert parse_multiset("{a, a}").count("a") == 2

    def test_parse_multiset_raises(self):
        with pytest.raises(MalformedNotationError) as e:
            parse_multiset("{a,}")
        assert e.value.text == "{a,}"
        assert isinstance(e.value, ValueError)

    def test_read_one_line(self):
        stream = io.StringIO("{a, b, {c}}\nrest\n")
        obj = MultiSet.read(stream)
        assert obj == MultiSet("{a,b,{c}}")
        assert stream.readline() == "rest\n"

    def test_read_malformed_line(self):
        with pytest.raises(MalformedNotationError):
            MultiSet.read(io.StringIO("{a b}\n"))

    def test_read_exhausted_stream(self):
        with pytest.raises(MalformedNotationError):
            MultiSet.read(io.StringIO(""))

    def test_write(self):
        stream = io.StringIO()
        MultiSet("{a, b, b}").write(stream)
        assert stream.getvalue() == "{a,b,b}"
