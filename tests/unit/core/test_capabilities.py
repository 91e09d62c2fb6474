"""Tests for the proxy capability table."""

import pytest

from cacheproxy import DynamicRecord, UnsupportedOperationError, ValueKind
from cacheproxy.core.services.capabilities import kind_of, lookup_operation


class TestKindOf:
    """Tests for kind_of."""

    def test_kinds(self) -> None:
        """Test classification of resolved values."""
        assert kind_of(DynamicRecord()) is ValueKind.MAPPING
        assert kind_of({}) is ValueKind.MAPPING
        assert kind_of([]) is ValueKind.SEQUENCE
        assert kind_of(()) is ValueKind.SEQUENCE
        assert kind_of("text") is ValueKind.SCALAR
        assert kind_of(3) is ValueKind.SCALAR
        assert kind_of(None) is ValueKind.SCALAR


class TestLookupOperation:
    """Tests for lookup_operation."""

    def test_mapping_operations(self) -> None:
        """Test read operations on records."""
        record = DynamicRecord({"active": "t", "name": "London"})

        assert lookup_operation(record, "get")("name") == "London"
        assert lookup_operation(record, "get_bool")("active") is True
        assert lookup_operation(record, "__getitem__")("name") == "London"
        assert lookup_operation(record, "logical_type")() == "DynamicRecord"

    def test_sequence_operations(self) -> None:
        """Test read operations on sequences."""
        values = [3, 1, 3]

        assert lookup_operation(values, "count")(3) == 2
        assert lookup_operation(values, "index")(1) == 1
        assert lookup_operation(values, "__len__")() == 3

    def test_scalar_operations(self) -> None:
        """Test that scalars accept their own methods."""
        assert lookup_operation("london", "upper")() == "LONDON"
        assert lookup_operation(10, "__add__")(5) == 15

    @pytest.mark.parametrize("operation", ["append", "pop", "__setitem__", "sort"])
    def test_mutating_sequence_operations_rejected(self, operation: str) -> None:
        """Test that mutating operations are refused on sequences."""
        with pytest.raises(UnsupportedOperationError):
            lookup_operation([1, 2], operation)

    @pytest.mark.parametrize("operation", ["update", "set", "setdefault", "popitem", "clear"])
    def test_mutating_mapping_operations_rejected(self, operation: str) -> None:
        """Test that mutating operations are refused on records."""
        with pytest.raises(UnsupportedOperationError):
            lookup_operation(DynamicRecord(), operation)

    def test_operation_outside_table(self) -> None:
        """Test that operations missing from a kind's table are refused."""
        with pytest.raises(UnsupportedOperationError, match="mapping values"):
            lookup_operation(DynamicRecord({"name": "x"}), "name")

        with pytest.raises(UnsupportedOperationError, match="sequence values"):
            lookup_operation([1], "upper")

    def test_unknown_scalar_operation(self) -> None:
        """Test that scalars refuse attributes they lack."""
        with pytest.raises(UnsupportedOperationError):
            lookup_operation(5, "upper")

    def test_non_callable_attribute(self) -> None:
        """Test that non-callable attributes are refused."""
        with pytest.raises(UnsupportedOperationError, match="not callable"):
            lookup_operation(5, "real")

    def test_tuple_without_copy(self) -> None:
        """Test that table entries the value lacks are refused."""
        with pytest.raises(UnsupportedOperationError):
            lookup_operation((1, 2), "copy")
