"""Tests for raw-token to enum mappers."""

from __future__ import annotations

import pytest

from tomparser.models.tabular import (
    CrossFilteringBehavior,
    DataType,
    DataView,
    PartitionSourceType,
    RelationshipCardinality,
)
from tomparser.parser.mappers import (
    DATA_TYPE_MAP,
    map_cardinality,
    map_cross_filtering_behavior,
    map_data_type,
    map_data_view,
    map_partition_source_type,
)


class TestDataType:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("Int64", DataType.INT64),
            ("Int32", DataType.INT64),
            ("Double", DataType.DOUBLE),
            ("Single", DataType.DOUBLE),
            ("Boolean", DataType.BOOLEAN),
            ("String", DataType.STRING),
            ("DateTime", DataType.DATETIME),
            ("DateTimeOffset", DataType.DATETIME),
            ("Decimal", DataType.DECIMAL),
            ("Binary", DataType.BINARY),
            ("Table", DataType.TABLE),
            ("Variant", DataType.VARIANT),
        ],
    )
    def test_known_tokens(self, token: str, expected: DataType) -> None:
        assert map_data_type(token) is expected

    @pytest.mark.parametrize("token", [None, "", "int64", "Integer", "Unknown", 64, ["Int64"]])
    def test_unrecognised_tokens_map_to_unknown(self, token: object) -> None:
        assert map_data_type(token) is DataType.UNKNOWN

    def test_lookup_table_never_yields_unknown(self) -> None:
        assert DataType.UNKNOWN not in DATA_TYPE_MAP.values()


class TestPartitionSourceType:
    def test_absent_source(self) -> None:
        assert map_partition_source_type(None) is PartitionSourceType.NONE

    def test_m_takes_precedence_over_expression(self) -> None:
        source = {"type": "m", "expression": "let Source = 1 in Source"}
        assert map_partition_source_type(source) is PartitionSourceType.M

    def test_expression_is_calculated(self) -> None:
        source = {"type": "calculated", "expression": "CALENDARAUTO()"}
        assert map_partition_source_type(source) is PartitionSourceType.CALCULATED

    def test_expression_beats_query(self) -> None:
        source = {"expression": "X", "query": "SELECT 1"}
        assert map_partition_source_type(source) is PartitionSourceType.CALCULATED

    def test_query(self) -> None:
        source = {"type": "query", "query": "SELECT * FROM t"}
        assert map_partition_source_type(source) is PartitionSourceType.QUERY

    def test_empty_source_object(self) -> None:
        assert map_partition_source_type({}) is PartitionSourceType.NONE

    def test_empty_expression_is_ignored(self) -> None:
        source = {"expression": "", "query": "SELECT 1"}
        assert map_partition_source_type(source) is PartitionSourceType.QUERY


class TestCardinality:
    @pytest.mark.parametrize(
        ("from_card", "to_card", "expected"),
        [
            ("1", "1", RelationshipCardinality.ONE_TO_ONE),
            ("1", "*", RelationshipCardinality.ONE_TO_MANY),
            ("*", "1", RelationshipCardinality.MANY_TO_ONE),
            ("*", "*", RelationshipCardinality.ONE_TO_MANY),
            (None, None, RelationshipCardinality.ONE_TO_MANY),
            ("1", None, RelationshipCardinality.ONE_TO_MANY),
            ("one", "many", RelationshipCardinality.ONE_TO_MANY),
            ([], {}, RelationshipCardinality.ONE_TO_MANY),
        ],
    )
    def test_mapping(
        self, from_card: object, to_card: object, expected: RelationshipCardinality
    ) -> None:
        assert map_cardinality(from_card, to_card) is expected


class TestCrossFilteringBehavior:
    def test_both(self) -> None:
        assert map_cross_filtering_behavior("Both") is CrossFilteringBehavior.BOTH_DIRECTIONS

    def test_one_direction(self) -> None:
        assert (
            map_cross_filtering_behavior("OneDirection") is CrossFilteringBehavior.ONE_DIRECTION
        )

    @pytest.mark.parametrize("token", [None, "", "both", "Single", 1])
    def test_other_tokens(self, token: object) -> None:
        assert map_cross_filtering_behavior(token) is CrossFilteringBehavior.NONE


class TestDataView:
    def test_sample(self) -> None:
        assert map_data_view("Sample") is DataView.SAMPLE

    @pytest.mark.parametrize("token", ["Full", "Default", "sample", None])
    def test_everything_else_is_full(self, token: object) -> None:
        assert map_data_view(token) is DataView.FULL
