"""
Tests for descriptor builders.
"""

import datetime

import pytest

from proptypes import (
    ConfigurationError,
    PropTypes,
    TypeDescriptor,
    array_of,
    custom,
    instance_of,
    one_of,
    one_of_type,
    primitive,
    shape,
    to_descriptor,
    validate,
)


class TestIsRequired:
    def test_defaults_to_optional(self):
        assert PropTypes.string.required is False
        assert PropTypes.string.type == "string"

    def test_is_required(self):
        required = PropTypes.string.is_required
        assert required.required is True
        assert required.type == "string"

    def test_same_instance_on_repeated_access(self):
        descriptor = array_of(PropTypes.string)
        assert descriptor.is_required is descriptor.is_required

    def test_idempotent(self):
        required = PropTypes.number.is_required
        assert required.is_required is required

    def test_does_not_mutate_original(self):
        descriptor = shape({"a": PropTypes.string})
        descriptor.is_required
        assert descriptor.required is False

    def test_keeps_payload(self):
        descriptor = shape({"a": PropTypes.string}).is_required
        assert descriptor.type == "shape"
        assert list(descriptor.type_defs) == ["a"]


class TestBuilders:
    def test_primitive(self):
        assert primitive("string").type == "string"

    def test_primitive_unknown_tag(self):
        with pytest.raises(ConfigurationError):
            primitive("nope")

    def test_array_of(self):
        descriptor = array_of(PropTypes.string)
        assert descriptor.type == "arrayOf"
        assert descriptor.type_def is PropTypes.string

    def test_array_of_rejects_non_descriptor(self):
        with pytest.raises(ConfigurationError):
            array_of(str)

    def test_shape_keeps_declaration_order(self):
        descriptor = shape({"b": PropTypes.string, "a": PropTypes.number})
        assert list(descriptor.type_defs) == ["b", "a"]

    def test_shape_is_read_only(self):
        fields = {"a": PropTypes.string}
        descriptor = shape(fields)
        fields["b"] = PropTypes.number
        assert list(descriptor.type_defs) == ["a"]
        with pytest.raises(TypeError):
            descriptor.type_defs["c"] = PropTypes.number

    def test_shape_empty(self):
        with pytest.raises(ConfigurationError):
            shape({})

    def test_shape_non_descriptor_value(self):
        with pytest.raises(ConfigurationError):
            shape({"a": "string"})

    def test_shape_non_mapping(self):
        with pytest.raises(ConfigurationError):
            shape([PropTypes.string])

    def test_one_of(self):
        assert one_of(["a", "b"]).values == ("a", "b")

    @pytest.mark.parametrize("values", [[], "ab"])
    def test_one_of_invalid(self, values):
        with pytest.raises(ConfigurationError):
            one_of(values)

    def test_one_of_type(self):
        descriptor = one_of_type([PropTypes.string, PropTypes.number])
        assert descriptor.types == (PropTypes.string, PropTypes.number)

    @pytest.mark.parametrize("types", [[], [str], [PropTypes.string, None]])
    def test_one_of_type_invalid(self, types):
        with pytest.raises(ConfigurationError):
            one_of_type(types)

    def test_instance_of(self):
        assert instance_of(datetime.date).expected_class is datetime.date

    def test_instance_of_invalid(self):
        with pytest.raises(ConfigurationError):
            instance_of(datetime.date(2024, 1, 1))

    def test_custom_invalid(self):
        with pytest.raises(ConfigurationError):
            custom("not callable")

    def test_descriptors_are_frozen(self):
        with pytest.raises(AttributeError):
            PropTypes.string.required = True


class TestDescriptorPayload:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"type": "arrayOf"},
            {"type": "arrayOf", "type_def": str},
            {"type": "shape"},
            {"type": "shape", "type_defs": {"a": "string"}},
            {"type": "oneOf"},
            {"type": "oneOfType"},
            {"type": "oneOfType", "types": (PropTypes.string, int)},
            {"type": "instanceOf"},
            {"type": "instanceOf", "expected_class": "Point"},
            {"type": "custom"},
            {"type": "custom", "validator": 42},
            {"type": "oneOf", "values": (1,), "type_def": PropTypes.string},
        ],
    )
    def test_malformed(self, kwargs):
        with pytest.raises(ConfigurationError):
            TypeDescriptor(**kwargs)

    def test_hand_built(self):
        descriptor = TypeDescriptor(type="arrayOf", type_def=PropTypes.string)
        assert validate(["a"], descriptor, "bar") == []

    def test_other_tags_unchecked(self):
        assert TypeDescriptor(type="range", values=(0, 10)).values == (0, 10)


class TestDefaults:
    def test_with_default(self):
        descriptor = PropTypes.string.with_default("x")
        assert descriptor.has_default
        assert descriptor.resolve_default() == "x"
        assert not PropTypes.string.has_default

    def test_callable_default(self):
        descriptor = PropTypes.array.with_default(list)
        first, second = descriptor.resolve_default(), descriptor.resolve_default()
        assert first == [] and first is not second


class TestToDescriptor:
    @pytest.mark.parametrize(
        "shorthand,tag",
        [
            (str, "string"),
            (int, "number"),
            (float, "number"),
            (bool, "boolean"),
            (dict, "object"),
            (list, "array"),
            (type(None), "null"),
            (datetime.date, "date"),
        ],
    )
    def test_types(self, shorthand, tag):
        assert to_descriptor(shorthand).type == tag

    def test_passthrough(self):
        assert to_descriptor(PropTypes.string) is PropTypes.string

    def test_other_class(self):
        descriptor = to_descriptor(datetime.time)
        assert descriptor.type == "instanceOf"
        assert descriptor.expected_class is datetime.time

    def test_nested(self):
        descriptor = to_descriptor({"name": str, "tags": [str], "ids": [int, str]})
        assert isinstance(descriptor, TypeDescriptor)
        assert descriptor.type == "shape"
        assert descriptor.type_defs["tags"].type == "arrayOf"
        assert descriptor.type_defs["ids"].type_def.type == "oneOfType"
        assert validate({"name": "a", "tags": ["b"], "ids": [1, "c"]}, descriptor, "x") == []

    def test_callable(self):
        assert to_descriptor(lambda x: x > 0).type == "custom"

    @pytest.mark.parametrize("value", [[], 42])
    def test_invalid(self, value):
        with pytest.raises(ConfigurationError):
            to_descriptor(value)
