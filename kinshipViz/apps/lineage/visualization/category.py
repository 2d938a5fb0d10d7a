"""
Lineage node categories.
Decides which of the four visual categories a workflow node falls into.
"""
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from kinlib.types import LineageNode, PublishStatus, ScheduleStatus, status_code


class Category(str, Enum):
    """
    Visual category of a lineage node.

    ACTIVE: The workflow currently being inspected
    FULLY_PUBLISHED: Workflow and its schedule are both online
    PARTIALLY_PUBLISHED: Workflow is online but its schedule is not
    UNPUBLISHED: Workflow itself is not online
    """
    ACTIVE = "active"
    FULLY_PUBLISHED = "fully-published"
    PARTIALLY_PUBLISHED = "partially-published"
    UNPUBLISHED = "unpublished"

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self]

    @property
    def i18n_key(self) -> str:
        return CATEGORY_I18N_KEYS[self]


CATEGORY_COLORS = {
    Category.ACTIVE: "#2D8DF0",
    Category.FULLY_PUBLISHED: "#00C800",
    Category.UNPUBLISHED: "#999999",
    Category.PARTIALLY_PUBLISHED: "#FF8F05",
}

CATEGORY_I18N_KEYS = {
    Category.ACTIVE: "KinshipStateActive",
    Category.FULLY_PUBLISHED: "KinshipState1",
    Category.UNPUBLISHED: "KinshipState0",
    Category.PARTIALLY_PUBLISHED: "KinshipState10",
}

# Legend display order
LEGEND_ORDER: Tuple[Category, ...] = (
    Category.ACTIVE,
    Category.FULLY_PUBLISHED,
    Category.PARTIALLY_PUBLISHED,
    Category.UNPUBLISHED,
)

# Renderer palette order
PALETTE_ORDER: Tuple[Category, ...] = (
    Category.ACTIVE,
    Category.FULLY_PUBLISHED,
    Category.UNPUBLISHED,
    Category.PARTIALLY_PUBLISHED,
)

NodeLike = Union[LineageNode, Mapping[str, Any]]

# (is_focus, publish_status, schedule_status) -> matches?
Rule = Tuple[Callable[[bool, Optional[str], Optional[str]], bool], Category]

# Evaluated top to bottom, first match wins. The focus check must stay first.
RULES: List[Rule] = [
    (lambda is_focus, publish, schedule: is_focus, Category.ACTIVE),
    (lambda is_focus, publish, schedule: publish == PublishStatus.OFFLINE.value, Category.UNPUBLISHED),
    (
        lambda is_focus, publish, schedule: (
            publish == PublishStatus.ONLINE.value and schedule == ScheduleStatus.OFFLINE.value
        ),
        Category.PARTIALLY_PUBLISHED,
    ),
]

DEFAULT_CATEGORY = Category.FULLY_PUBLISHED


def _classification_inputs(node: NodeLike) -> Tuple[Any, Optional[str], Optional[str]]:
    """Pull (id, publish status, schedule status) out of a node."""
    if isinstance(node, LineageNode):
        return node.id, node.work_flow_publish_status, node.schedule_publish_status
    return (
        node.get("id"),
        status_code(node.get("workFlowPublishStatus")),
        status_code(node.get("schedulePublishStatus")),
    )


def classify(node: NodeLike, focus_id: Any = None) -> Category:
    """
    Classify a lineage node.

    Args:
        node: Node mapping (renderer field names) or LineageNode
        focus_id: Id of the workflow under inspection, None for no focus

    Returns:
        The node's Category; unknown status codes resolve to FULLY_PUBLISHED
    """
    node_id, publish, schedule = _classification_inputs(node)
    is_focus = focus_id is not None and node_id == focus_id

    for matches, category in RULES:
        if matches(is_focus, publish, schedule):
            return category

    return DEFAULT_CATEGORY
