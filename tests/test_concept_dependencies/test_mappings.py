"""Tests for the mapping edge model and edge-filtering helpers."""

import pytest

from src.concept_dependencies.mappings import (
    ExternalMapping,
    InternalMapping,
    frontier_codes,
    internal_mappings,
    parse_mapping,
    unique_concept_urls,
)
from tests.mapping_graphs import concept_url, external, internal


class TestParseMapping:

    def test_record_with_url_is_internal(self) -> None:
        mapping = parse_mapping(internal("A", "B"))
        assert isinstance(mapping, InternalMapping)
        assert mapping.from_concept_code == "A"
        assert mapping.to_concept_code == "B"
        assert mapping.to_concept_url == concept_url("B")
        assert mapping.from_concept_url == concept_url("A")
        assert mapping.map_type == "Q-AND-A"

    def test_record_without_url_is_external(self) -> None:
        mapping = parse_mapping(external("A"))
        assert isinstance(mapping, ExternalMapping)
        assert mapping.map_type == "SAME-AS"

    def test_external_code_kept(self) -> None:
        """A mapping into another source keeps its code but is still external."""
        raw = {"from_concept_code": "A", "to_concept_code": "J18.9", "map_type": "SAME-AS"}
        mapping = parse_mapping(raw)
        assert isinstance(mapping, ExternalMapping)
        assert mapping.to_concept_code == "J18.9"

    def test_empty_url_is_external(self) -> None:
        raw = {"from_concept_code": "A", "to_concept_code": "B", "to_concept_url": "", "map_type": "X"}
        assert isinstance(parse_mapping(raw), ExternalMapping)

    def test_missing_fields_tolerated(self) -> None:
        mapping = parse_mapping({})
        assert mapping == ExternalMapping(from_concept_code=None, map_type="")

    def test_url_without_code(self) -> None:
        mapping = parse_mapping({"to_concept_url": "/concepts/Z/", "map_type": "X"})
        assert isinstance(mapping, InternalMapping)
        assert mapping.to_concept_code is None


class TestEdgeFilters:

    @pytest.fixture
    def level(self) -> list[InternalMapping]:
        return internal_mappings(
            parse_mapping(raw)
            for raw in [internal("A", "B"), external("A"), internal("A", "C"), internal("D", "B")]
        )

    def test_internal_mappings_drops_external(self, level) -> None:
        assert [m.to_concept_code for m in level] == ["B", "C", "B"]

    def test_internal_mappings_rejects_non_mapping(self) -> None:
        with pytest.raises(TypeError):
            internal_mappings([{"to_concept_url": "/x/"}])

    def test_frontier_keeps_order_and_duplicates(self, level) -> None:
        assert frontier_codes(level) == ["B", "C", "B"]

    def test_frontier_skips_missing_codes(self) -> None:
        level = [InternalMapping(None, None, "/concepts/Z/", "X")]
        assert frontier_codes(level) == []

    def test_unique_urls_first_discovery_order(self, level) -> None:
        second = internal_mappings([parse_mapping(internal("B", "E")), parse_mapping(internal("B", "C"))])
        assert unique_concept_urls([level, second]) == [
            concept_url("B"),
            concept_url("C"),
            concept_url("E"),
        ]

    def test_unique_urls_empty(self) -> None:
        assert unique_concept_urls([]) == []
        assert unique_concept_urls([[], []]) == []
