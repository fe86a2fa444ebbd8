from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict

from career_guide.schemas.base import CamelModel


class RoadmapRequest(CamelModel):
    career_goal: Optional[str] = None
    current_stage: Optional[str] = None
    timeline: Optional[str] = None
    experience: Optional[str] = None
    interests: Optional[str] = None


class RoadmapStage(CamelModel):
    title: str
    description: str
    time_range: str
    actions: List[str] = []
    resources: List[str] = []


class RoadmapResponse(CamelModel):
    stages: List[RoadmapStage]


class RoadmapHistoryItem(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    career_goal: str
    stages: List[RoadmapStage]
    created_at: Optional[datetime] = None
