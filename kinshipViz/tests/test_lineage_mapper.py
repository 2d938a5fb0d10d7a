"""
Test Suite for the Lineage Mapper

Covers conversion of lineage API data (workFlowList / workFlowRelationList)
into graph nodes, edges and a full renderer option.
"""

import pytest
from pydantic import ValidationError

from kinlib.i18n import CATALOGS
from kinlib.types import LineagePayload
from apps.lineage.visualization.graph_option import GraphOptionBuilder
from apps.lineage.visualization.lineage_mapper import LineageMapper


@pytest.fixture
def payload():
    """Lineage data as returned by the scheduler API."""
    return {
        "workFlowList": [
            {
                "workFlowId": 1,
                "workFlowName": "ods_orders_load",
                "workFlowPublishStatus": 1,
                "schedulePublishStatus": 1,
                "crontab": "0 0 2 * * ? *",
                "scheduleStartTime": "2023-01-01 00:00:00",
                "scheduleEndTime": "2123-01-01 00:00:00",
                "sourceWorkFlowId": "1",
            },
            {"workFlowId": 2, "workFlowName": "dwd_orders", "workFlowPublishStatus": 1, "schedulePublishStatus": 0},
            {"workFlowId": 3, "workFlowName": "ads_report", "workFlowPublishStatus": 0},
            {"workFlowId": 2, "workFlowName": "dwd_orders_dup", "workFlowPublishStatus": 0},
        ],
        "workFlowRelationList": [
            {"sourceWorkFlowId": 1, "targetWorkFlowId": 2},
            {"sourceWorkFlowId": 2, "targetWorkFlowId": 3},
        ],
    }


@pytest.fixture
def mapper():
    return LineageMapper(option_builder=GraphOptionBuilder(translate=CATALOGS["en_US"]))


class TestPayloadToGraph:
    """Test node and edge extraction."""

    def test_nodes_deduplicated_first_wins(self, mapper, payload):
        graph = mapper.payload_to_graph(payload)

        assert [n["id"] for n in graph["nodes"]] == ["1", "2", "3"]
        assert graph["nodes"][1]["name"] == "dwd_orders"
        assert graph["nodes"][1]["workFlowPublishStatus"] == "1"

    def test_node_fields(self, mapper, payload):
        node = mapper.payload_to_graph(payload)["nodes"][0]

        assert node == {
            "id": "1",
            "name": "ods_orders_load",
            "workFlowPublishStatus": "1",
            "scheduleStartTime": "2023-01-01 00:00:00",
            "scheduleEndTime": "2123-01-01 00:00:00",
            "crontab": "0 0 2 * * ? *",
            "schedulePublishStatus": "1",
        }

    def test_edges_use_string_ids(self, mapper, payload):
        graph = mapper.payload_to_graph(payload)
        assert graph["edges"] == [
            {"source": "1", "target": "2"},
            {"source": "2", "target": "3"},
        ]

    def test_accepts_model(self, mapper, payload):
        graph = mapper.payload_to_graph(LineagePayload.model_validate(payload))
        assert len(graph["nodes"]) == 3

    def test_empty_payload(self, mapper):
        assert mapper.payload_to_graph({}) == {"nodes": [], "edges": []}

    def test_missing_workflow_id_rejected(self, mapper):
        with pytest.raises(ValidationError):
            mapper.payload_to_graph({"workFlowList": [{"workFlowName": "orphan"}]})


class TestToGraphOption:
    """Test the mapper + builder pipeline."""

    def test_focus_id_compared_as_string(self, mapper, payload):
        option = mapper.to_graph_option(payload, focus_id=2, show_labels=True)
        categories = [item["category"] for item in option["series"][0]["data"]]

        assert categories == ["Online", "Current selection", "Workflow is not online"]

    def test_without_focus(self, mapper, payload):
        option = mapper.to_graph_option(payload, show_labels=False)
        categories = [item["category"] for item in option["series"][0]["data"]]

        assert categories == ["Online", "Scheduling is not online", "Workflow is not online"]
        assert option["series"][0]["label"]["show"] is False

    def test_show_labels_defaults_to_setting(self, mapper, payload):
        from kinlib.config import settings

        option = mapper.to_graph_option(payload)
        assert option["series"][0]["label"]["show"] is settings.SHOW_LABELS

    def test_builder_created_lazily(self, payload):
        mapper = LineageMapper()
        option = mapper.to_graph_option(payload, focus_id="1")

        assert isinstance(mapper.option_builder, GraphOptionBuilder)
        assert len(option["series"][0]["data"]) == 3
