from datetime import datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict

from career_guide.schemas.base import CamelModel

JobStatus = Literal["saved", "applied", "interviewing", "offer", "rejected"]
JOB_STATUSES = ("saved", "applied", "interviewing", "offer", "rejected")


# Поля не обязательны на уровне схемы: роутер сам отвечает 400
class SaveJobRequest(CamelModel):
    job_id: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None
    source: Optional[str] = None


class UpdateJobStatusRequest(CamelModel):
    id: Optional[str] = None
    status: Optional[str] = None


class SavedJobResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    job_id: str
    title: str
    company: str
    location: str
    url: str
    source: str
    status: JobStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SavedJobListResponse(CamelModel):
    jobs: List[SavedJobResponse]


class SaveJobResponse(CamelModel):
    job: SavedJobResponse


class UpdateJobStatusResponse(CamelModel):
    updated: int
