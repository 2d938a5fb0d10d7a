"""
Graph option builder.
Turns lineage nodes and edges into the option object of a force-directed
graph renderer (ECharts `graph` series).
"""
import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from kinlib.config import GraphSettings, settings
from kinlib.i18n import Translator, get_translator, mapping_translator
from kinlib.types import LineageEdge, LineageNode

from .category import LEGEND_ORDER, PALETTE_ORDER, Category, NodeLike, classify

logger = logging.getLogger(__name__)

EdgeLike = Union[LineageEdge, Mapping[str, Any]]

# Tooltip rows: (caption token, data field)
TOOLTIP_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("KinshipTooltipName", "name"),
    ("KinshipTooltipStartTime", "scheduleStartTime"),
    ("KinshipTooltipEndTime", "scheduleEndTime"),
    ("KinshipTooltipCrontab", "crontab"),
    ("KinshipTooltipPublishStatus", "workFlowPublishStatus"),
    ("KinshipTooltipSchedulePublishStatus", "schedulePublishStatus"),
)


def _item_data(params: Any) -> Mapping[str, Any]:
    """
    Resolve the data item a formatter was called with.

    The renderer passes callback params with the item under "data"; callers
    may also pass the item itself.
    """
    if isinstance(params, LineageNode):
        return params.to_data()
    if not isinstance(params, Mapping):
        return {}
    data = params.get("data")
    if isinstance(data, Mapping):
        return data
    if isinstance(data, LineageNode):
        return data.to_data()
    return params


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class TooltipFormatter:
    """Hover tooltip: one captioned line per schedule detail."""
    captions: Tuple[str, ...]
    fields: Tuple[str, ...] = tuple(field for _, field in TOOLTIP_FIELDS)
    separator: str = ": "
    line_break: str = "<br/>"

    def __call__(self, params: Any) -> str:
        data = _item_data(params)
        if not data.get("name"):
            return ""
        lines = [
            f"{caption}{self.separator}{_text(data.get(field))}"
            for caption, field in zip(self.captions, self.fields)
        ]
        return self.line_break.join(lines)


@dataclass(frozen=True)
class LabelFormatter:
    """In-node label: the workflow name stacked one segment per line."""
    show: bool = True
    rich_style: str = "a"

    @staticmethod
    def segments(name: str) -> List[str]:
        return name.split("_")

    def __call__(self, params: Any) -> str:
        if not self.show:
            return ""
        name = _item_data(params).get("name")
        if not name:
            return ""
        return "".join(f"{{{self.rich_style}|{segment}\n}}" for segment in self.segments(str(name)))


def _rich_text(color: str) -> Dict[str, Any]:
    return {
        "a": {
            "fontSize": 12,
            "color": color,
            "lineHeight": 12,
            "align": "left",
            "padding": [4, 4, 4, 4]
        }
    }


class GraphOptionBuilder:
    """
    Builds renderer options for workflow lineage graphs.
    """

    TOOLTIP_BACKGROUND = "#2D303A"
    LABEL_COLOR = "#222222"
    EDGE_COLOR = "#999999"
    NODE_SYMBOL = "roundRect"
    EDGE_SYMBOL = ["circle", "arrow"]
    EDGE_SYMBOL_SIZE = [4, 12]

    def __init__(
        self,
        translate: Optional[Union[Translator, Mapping[str, str]]] = None,
        graph_settings: Optional[GraphSettings] = None
    ):
        """
        Initialize graph option builder.

        Args:
            translate: Token lookup (callable or mapping); defaults to the
                catalog of the configured locale
            graph_settings: Layout settings; defaults to the GRAPH setting
        """
        if translate is None:
            translate = get_translator()
        elif isinstance(translate, Mapping):
            translate = mapping_translator(translate)
        self.translate: Callable[[str], str] = translate
        self.graph_settings = graph_settings or settings.GRAPH

    def build(
        self,
        nodes: Iterable[NodeLike],
        edges: Iterable[EdgeLike],
        focus_id: Any = None,
        show_labels: bool = True
    ) -> Dict[str, Any]:
        """
        Build the renderer option for a lineage graph.

        Args:
            nodes: Lineage nodes (mappings or LineageNode)
            edges: Lineage edges (mappings or LineageEdge)
            focus_id: Id of the workflow under inspection, if any
            show_labels: Whether node names are drawn inside the nodes

        Returns:
            Renderer option dict
        """
        labels = {category: self.translate(category.i18n_key) for category in Category}
        categories = [
            {"name": labels[category], "itemStyle": {"color": category.color}}
            for category in LEGEND_ORDER
        ]

        data = [self._decorate_node(node, focus_id, labels) for node in nodes]
        links = [self._edge_data(edge) for edge in edges]

        logger.debug(
            f"Built lineage graph option: {len(data)} nodes, {len(links)} edges, "
            f"focus={focus_id!r}, labels={'on' if show_labels else 'off'}"
        )

        return {
            "tooltip": self._build_tooltip(),
            "color": [category.color for category in PALETTE_ORDER],
            "legend": [{
                "orient": "horizontal",
                "top": 6,
                "left": 6,
                "data": [{"name": labels[category]} for category in LEGEND_ORDER],
            }],
            "series": [self._build_series(data, links, categories, show_labels)],
        }

    def _decorate_node(
        self,
        node: NodeLike,
        focus_id: Any,
        labels: Dict[Category, str]
    ) -> Dict[str, Any]:
        """Copy a node and attach its category label and emphasis colour."""
        category = classify(node, focus_id)
        item = node.to_data() if isinstance(node, LineageNode) else dict(node)
        item["emphasis"] = {"itemStyle": {"color": category.color}}
        item["category"] = labels[category]
        return item

    @staticmethod
    def _edge_data(edge: EdgeLike) -> Dict[str, Any]:
        if isinstance(edge, LineageEdge):
            return edge.to_data()
        return dict(edge)

    def _build_tooltip(self) -> Dict[str, Any]:
        return {
            "trigger": "item",
            "triggerOn": "mousemove",
            "backgroundColor": self.TOOLTIP_BACKGROUND,
            "padding": [8, 12],
            "formatter": TooltipFormatter(
                captions=tuple(self.translate(token) for token, _ in TOOLTIP_FIELDS)
            ),
            "color": self.TOOLTIP_BACKGROUND,
            "textStyle": {"rich": _rich_text(self.TOOLTIP_BACKGROUND)},
        }

    def _build_series(
        self,
        data: List[Dict[str, Any]],
        links: List[Dict[str, Any]],
        categories: List[Dict[str, Any]],
        show_labels: bool
    ) -> Dict[str, Any]:
        layout = self.graph_settings
        return {
            "type": "graph",
            "layout": "force",
            "nodeScaleRatio": layout.node_scale_ratio,
            "draggable": True,
            "animation": False,
            "data": data,
            "roam": True,
            "symbol": self.NODE_SYMBOL,
            "symbolSize": layout.symbol_size,
            "categories": categories,
            "label": {
                "show": show_labels,
                "position": "inside",
                "formatter": LabelFormatter(show=show_labels),
                "color": self.LABEL_COLOR,
                "textStyle": {"rich": _rich_text(self.LABEL_COLOR)},
            },
            "edgeSymbol": copy.copy(self.EDGE_SYMBOL),
            "edgeSymbolSize": copy.copy(self.EDGE_SYMBOL_SIZE),
            "force": {
                "repulsion": layout.repulsion,
                "edgeLength": layout.edge_length
            },
            "links": links,
            "lineStyle": {"color": self.EDGE_COLOR},
        }


def build_graph_option(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    focus_id: Any = None,
    show_labels: bool = True,
    translate: Optional[Union[Translator, Mapping[str, str]]] = None
) -> Dict[str, Any]:
    """Build a lineage graph option with a one-off builder."""
    return GraphOptionBuilder(translate=translate).build(nodes, edges, focus_id, show_labels)
