"""Tests for the checks every assertion inherits."""

import math

import pytest

from assertive import Assertion, AssertionFailedError, expect


class Box:
    def __init__(self, content):
        self.content = content

    def __eq__(self, other):
        return isinstance(other, Box) and other.content == self.content


class TestToMatch:
    def test_predicate_holds(self):
        expect(10).to_match(lambda value: value > 5)

    def test_predicate_fails(self):
        with pytest.raises(AssertionFailedError, match="matcher predicate to return true"):
            expect(1).to_match(lambda value: value > 5)

    def test_negated(self):
        expect(1).not_.to_match(lambda value: value > 5)
        with pytest.raises(AssertionFailedError, match="NOT to return true"):
            expect(10).not_.to_match(lambda value: value > 5)

    def test_truthy_result_counts(self):
        expect("abc").to_match(lambda value: value.count("b"))


class TestPresence:
    def test_to_exist(self):
        expect(0).to_exist()
        expect("").to_exist()
        with pytest.raises(AssertionFailedError, match="Expected value to exist, but it was <None>"):
            expect(None).to_exist()

    def test_not_to_exist(self):
        expect(None).not_.to_exist()
        with pytest.raises(AssertionFailedError, match="to NOT exist"):
            expect(False).not_.to_exist()

    def test_to_be_none(self):
        expect(None).to_be_none()
        with pytest.raises(AssertionFailedError, match="to be None"):
            expect([]).to_be_none()

    def test_truthiness(self):
        expect([1]).to_be_truthy()
        expect([]).to_be_falsy()
        expect(0).not_.to_be_truthy()
        with pytest.raises(AssertionFailedError, match="<''> to be a truthy value"):
            expect("").to_be_truthy()
        with pytest.raises(AssertionFailedError, match="NOT to be a falsy value"):
            expect(None).not_.to_be_falsy()


class TestToBeInstanceOf:
    def test_subclass_instance(self):
        expect(KeyError()).to_be_instance_of(LookupError)

    def test_failure_names_the_class(self):
        with pytest.raises(AssertionFailedError, match="instance of <str>"):
            expect(3).to_be_instance_of(str)

    def test_bool_is_an_int(self):
        expect(True).to_be_instance_of(int)


class TestToBeEqual:
    def test_deep_equal_structures(self):
        expect({"a": [1, {"b": 2}]}).to_be_equal({"a": [1, {"b": 2}]})

    def test_failure_report(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            expect([1, 2]).to_be_equal([1, 3])

        assert exc_info.value.message == "Expected both values to be deep equal"
        assert exc_info.value.actual == [1, 2]
        assert exc_info.value.expected == [1, 3]

    def test_negated(self):
        expect([1, 2]).not_.to_be_equal([2, 1])
        with pytest.raises(AssertionFailedError, match="to NOT be deep equal"):
            expect((1,)).not_.to_be_equal((1,))

    def test_strict_types(self):
        expect([1]).not_.to_be_equal((1,))
        expect([True]).not_.to_be_equal([1])
        expect(1).to_be_equal(1.0)

    def test_nan_equals_nan(self):
        expect(math.nan).to_be_equal(float("nan"))

    def test_custom_eq(self):
        expect(Box(1)).to_be_equal(Box(1))


class TestToBeSimilar:
    def test_flat_structures(self):
        expect({"a": 1, "b": "x"}).to_be_similar({"b": "x", "a": 1})
        expect([1, "x"]).to_be_similar([1, "x"])

    def test_nested_structures_are_not_similar(self):
        with pytest.raises(AssertionFailedError, match="to be similar"):
            expect({"a": {"b": 1}}).to_be_similar({"a": {"b": 1}})

    def test_shared_nested_object_is_similar(self):
        inner = {"b": 1}

        expect({"a": inner}).to_be_similar({"a": inner})

    def test_negated(self):
        expect([1]).not_.to_be_similar([2])
        with pytest.raises(AssertionFailedError, match="to NOT be similar"):
            expect("a").not_.to_be_similar("a")


class TestToBeSame:
    def test_same_object(self):
        items = [1]

        expect(items).to_be_same(items)

    def test_equal_but_different_objects(self):
        with pytest.raises(AssertionFailedError, match="to be the same"):
            expect([1]).to_be_same([1])

        expect([1]).not_.to_be_same([1])


class TestToBeOfType:
    @pytest.mark.parametrize(
        "value, data_type",
        [
            (None, "none"),
            (False, "boolean"),
            (1, "number"),
            (1.5, "number"),
            ("s", "string"),
            (b"s", "bytes"),
            ([1], "array"),
            ((1,), "array"),
            ({"a": 1}, "mapping"),
            (len, "function"),
            (object(), "object"),
            ({1}, "object"),
        ],
    )
    def test_data_types(self, value, data_type):
        Assertion(value).to_be_of_type(data_type)

    def test_mismatch(self):
        with pytest.raises(AssertionFailedError, match="<1> to be of type <string>") as exc_info:
            expect(1).to_be_of_type("string")

        assert exc_info.value.actual == "number"

    def test_negated(self):
        expect(True).not_.to_be_of_type("number")
        with pytest.raises(AssertionFailedError, match="NOT to be of type <boolean>"):
            expect(True).not_.to_be_of_type("boolean")
