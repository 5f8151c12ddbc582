from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional
from datetime import datetime

from job_board.config import settings
from job_board.utils.text_utils import blank_to_none, parse_leading_int

MAX_PAGE = 2 ** 31 - 1

class JobPostingResponse(BaseModel):
    """채용공고 응답 스키마 (id는 ObjectId 문자열, 날짜 필드는 postedAt)"""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    title: Optional[str] = None
    company: Optional[str] = None
    description: Optional[str] = ""
    category: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = ""
    posted_at: datetime = Field(..., alias="postedAt")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> str:
        return str(value)

class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int

class JobListResponse(BaseModel):
    """채용공고 목록 응답"""
    success: bool = True
    data: List[JobPostingResponse]
    pagination: Pagination

class JobDetailResponse(BaseModel):
    success: bool = True
    data: JobPostingResponse

class JobTypeCount(BaseModel):
    type: Optional[str] = None  # type 필드가 없는 공고는 null로 묶임
    count: int

class JobStatsSummary(BaseModel):
    totalJobs: int
    totalCompanies: int
    totalCategories: int
    jobTypes: List[JobTypeCount]

class JobStatsResponse(BaseModel):
    success: bool = True
    data: JobStatsSummary

class JobFilterOptions(BaseModel):
    """필터 드롭다운용 유니크 값 목록"""
    companies: List[str]
    categories: List[str]
    types: List[str]
    locations: List[str]

class JobFilterOptionsResponse(BaseModel):
    success: bool = True
    data: JobFilterOptions

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None

class JobListQuery(BaseModel):
    """목록 조회 조건 (page/limit은 잘못된 값이면 기본값으로 대체)"""
    page: int = 1
    limit: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_LIMIT)
    company: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    search: Optional[str] = None

    @field_validator("page", mode="before")
    @classmethod
    def parse_page(cls, value: Any) -> int:
        page = parse_leading_int(value)
        if page is None or page < 1:
            return 1
        # skip 값이 int64 범위를 넘지 않도록 제한
        return min(page, MAX_PAGE)

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, value: Any) -> int:
        limit = parse_leading_int(value)
        if limit is None or limit < 1:
            return settings.DEFAULT_PAGE_LIMIT
        return min(limit, settings.MAX_PAGE_LIMIT)

    @field_validator("company", "category", "type", "location", "search", mode="before")
    @classmethod
    def drop_blank(cls, value: Any) -> Any:
        return blank_to_none(value)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
