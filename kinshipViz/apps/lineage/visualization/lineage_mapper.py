"""
Lineage mapper.
Converts the scheduler's lineage API data into graph nodes and edges.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from kinlib.config import settings
from kinlib.types import LineagePayload, WorkFlowLineage, WorkFlowRelation

from .graph_option import GraphOptionBuilder

logger = logging.getLogger(__name__)


class LineageMapper:
    """
    Maps lineage API payloads to graph representations.
    """

    def __init__(self, option_builder: Optional[GraphOptionBuilder] = None):
        """
        Initialize lineage mapper.

        Args:
            option_builder: Builder used by to_graph_option (created lazily)
        """
        self.option_builder = option_builder

    def payload_to_graph(
        self,
        payload: Union[LineagePayload, Mapping[str, Any]]
    ) -> Dict[str, List[Dict[str, Any]]]:
        """
        Convert lineage data to graph nodes and edges.

        Args:
            payload: Lineage data with workFlowList and workFlowRelationList

        Returns:
            Graph with nodes and edges

        Raises:
            pydantic.ValidationError: If an entry lacks its workflow ids
        """
        if not isinstance(payload, LineagePayload):
            payload = LineagePayload.model_validate(payload)

        nodes = self._create_nodes(payload.work_flow_list)
        edges = self._create_edges(payload.work_flow_relation_list)

        logger.info(f"Lineage mapped: {len(nodes)} nodes, {len(edges)} edges")

        return {
            "nodes": nodes,
            "edges": edges
        }

    def _create_nodes(self, work_flows: List[WorkFlowLineage]) -> List[Dict[str, Any]]:
        """
        Create graph nodes from lineage entries.

        A workflow shows up once per relation it takes part in; only the
        first entry for each workFlowId is kept.
        """
        nodes = []
        seen = set()

        for work_flow in work_flows:
            if work_flow.work_flow_id in seen:
                continue
            seen.add(work_flow.work_flow_id)

            nodes.append({
                "id": str(work_flow.work_flow_id),
                "name": work_flow.work_flow_name,
                "workFlowPublishStatus": work_flow.work_flow_publish_status,
                "scheduleStartTime": work_flow.schedule_start_time,
                "scheduleEndTime": work_flow.schedule_end_time,
                "crontab": work_flow.crontab,
                "schedulePublishStatus": work_flow.schedule_publish_status
            })

        return nodes

    def _create_edges(self, relations: List[WorkFlowRelation]) -> List[Dict[str, Any]]:
        """Create graph edges from lineage relations."""
        return [
            {
                "source": str(relation.source_work_flow_id),
                "target": str(relation.target_work_flow_id)
            }
            for relation in relations
        ]

    def to_graph_option(
        self,
        payload: Union[LineagePayload, Mapping[str, Any]],
        focus_id: Any = None,
        show_labels: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Build the renderer option straight from lineage data.

        Args:
            payload: Lineage data
            focus_id: Workflow under inspection; compared as a string since
                mapped node ids are strings
            show_labels: Whether node names are drawn; defaults to the
                SHOW_LABELS setting

        Returns:
            Renderer option dict
        """
        if self.option_builder is None:
            self.option_builder = GraphOptionBuilder()

        graph = self.payload_to_graph(payload)
        focus = None if focus_id is None else str(focus_id)
        if show_labels is None:
            show_labels = settings.SHOW_LABELS
        return self.option_builder.build(graph["nodes"], graph["edges"], focus, show_labels)
