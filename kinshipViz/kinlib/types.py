from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional, Union


# ==================== STATUS CODES ====================

class PublishStatus(str, Enum):
    """
    Release state of a workflow definition, as reported by the scheduler.

    OFFLINE: Draft or taken offline (not runnable)
    ONLINE: Released and runnable
    """
    OFFLINE = "0"
    ONLINE = "1"


class ScheduleStatus(str, Enum):
    """
    Release state of the workflow's timing schedule.

    OFFLINE: Schedule exists but is not active
    ONLINE: Schedule is active
    """
    OFFLINE = "0"
    ONLINE = "1"


def status_code(v: Any) -> Optional[str]:
    """Status codes arrive as ints or strings depending on the API version."""
    if v is None:
        return None
    if isinstance(v, Enum):
        return str(v.value)
    return str(v)


# ==================== GRAPH INPUT TYPES ====================

class LineageNode(BaseModel):
    """
    A workflow instance in the lineage graph, in the renderer's field naming.

    Attributes:
        id: Unique, stable node identifier
        name: Workflow name; underscore-delimited segments wrap onto lines
        work_flow_publish_status: Publish status code ("0" / "1")
        schedule_publish_status: Schedule status code ("0" / "1")
        crontab: Cron expression of the schedule
        schedule_start_time: Schedule start timestamp
        schedule_end_time: Schedule end timestamp
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Union[int, str]
    name: Optional[str] = None
    work_flow_publish_status: Optional[str] = Field(default=None, alias="workFlowPublishStatus")
    schedule_publish_status: Optional[str] = Field(default=None, alias="schedulePublishStatus")
    crontab: Optional[str] = None
    schedule_start_time: Optional[str] = Field(default=None, alias="scheduleStartTime")
    schedule_end_time: Optional[str] = Field(default=None, alias="scheduleEndTime")

    @field_validator('work_flow_publish_status', 'schedule_publish_status', mode='before')
    @classmethod
    def coerce_code(cls, v: Any) -> Optional[str]:
        return status_code(v)

    @field_validator('schedule_start_time', 'schedule_end_time', mode='before')
    @classmethod
    def coerce_time(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    def to_data(self) -> Dict[str, Any]:
        """Renderer data item (camelCase keys, unset optionals kept as None)."""
        return self.model_dump(by_alias=True)


class LineageEdge(BaseModel):
    """Dependency link between two workflows (source runs before target)."""
    source: Union[int, str]
    target: Union[int, str]

    def to_data(self) -> Dict[str, Any]:
        return {"source": self.source, "target": self.target}


# ==================== LINEAGE API TYPES ====================

class WorkFlowLineage(BaseModel):
    """One entry of the lineage API's workFlowList."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    work_flow_id: int = Field(..., alias="workFlowId")
    work_flow_name: Optional[str] = Field(default=None, alias="workFlowName")
    work_flow_publish_status: Optional[str] = Field(default=None, alias="workFlowPublishStatus")
    schedule_start_time: Optional[str] = Field(default=None, alias="scheduleStartTime")
    schedule_end_time: Optional[str] = Field(default=None, alias="scheduleEndTime")
    crontab: Optional[str] = None
    schedule_publish_status: Optional[str] = Field(default=None, alias="schedulePublishStatus")
    source_work_flow_id: Optional[str] = Field(default=None, alias="sourceWorkFlowId")

    @field_validator('work_flow_publish_status', 'schedule_publish_status', mode='before')
    @classmethod
    def coerce_code(cls, v: Any) -> Optional[str]:
        return status_code(v)

    @field_validator('schedule_start_time', 'schedule_end_time', 'source_work_flow_id', mode='before')
    @classmethod
    def coerce_str(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)


class WorkFlowRelation(BaseModel):
    """One entry of the lineage API's workFlowRelationList."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source_work_flow_id: int = Field(..., alias="sourceWorkFlowId")
    target_work_flow_id: int = Field(..., alias="targetWorkFlowId")


class LineagePayload(BaseModel):
    """Data section of the lineage API response."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    work_flow_list: List[WorkFlowLineage] = Field(default_factory=list, alias="workFlowList")
    work_flow_relation_list: List[WorkFlowRelation] = Field(
        default_factory=list,
        alias="workFlowRelationList"
    )
