# Job related schemas
from .job_posting import (
    JobPostingResponse,
    JobListQuery,
    Pagination,
    JobListResponse,
    JobDetailResponse,
    JobTypeCount,
    JobStatsSummary,
    JobStatsResponse,
    JobFilterOptions,
    JobFilterOptionsResponse,
    ErrorResponse,
)

__all__ = [
    # Job related
    "JobPostingResponse", "JobListQuery", "Pagination", "JobListResponse", "JobDetailResponse",
    # Statistics
    "JobTypeCount", "JobStatsSummary", "JobStatsResponse",
    "JobFilterOptions", "JobFilterOptionsResponse",
    # Errors
    "ErrorResponse",
]
