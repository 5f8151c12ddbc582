from datetime import datetime
from typing import Optional

from beanie import Document
from pydantic import ConfigDict, Field

from job_board.config import settings


class JobPosting(Document):
    """채용공고 문서 (읽기 전용, 생성/수정은 외부 수집기가 담당)"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Backend Developer",
                "company": "Acme",
                "description": "Build and operate our Python APIs.",
                "category": "Engineering",
                "type": "full-time",
                "location": "Seoul",
                "postedAt": "2025-07-01T09:00:00Z"
            }
        },
    )

    title: Optional[str] = Field(None, description="공고 제목")
    company: Optional[str] = Field(None, description="회사명")
    description: Optional[str] = Field("", description="공고 본문")
    category: Optional[str] = Field(None, description="직무 카테고리")
    type: Optional[str] = Field(None, description="고용 형태 (예: full-time, part-time, contract)")
    location: Optional[str] = Field("", description="근무지")
    posted_at: datetime = Field(..., alias="postedAt", description="공고 게시일")

    class Settings:
        name = settings.JOBS_COLLECTION
