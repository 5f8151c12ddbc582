"""
채용공고 조회 서비스

필터 조건을 MongoDB 필터 문서로 변환하고, 페이지 단위 조회와 통계 집계를
저장소에 요청한 뒤 결과를 응답 형태로 정리한다. 한 요청 안의 저장소 호출들은
서로 독립적이므로 동시에 실행하며, 하나라도 실패하면 전체 요청이 실패한다.
"""
import asyncio
import math
import re
from typing import Any, Awaitable, Dict, List, Optional, Tuple

from pymongo import DESCENDING
from pymongo.errors import ConnectionFailure

from job_board.schemas import (
    JobFilterOptions,
    JobListQuery,
    JobPostingResponse,
    JobStatsSummary,
    JobTypeCount,
    Pagination,
)
from job_board.services.job_store import InvalidIdentifierError, JobStore
from job_board.utils.exceptions import ErrorKind, JobServiceError

# 목록은 게시일 최신순으로만 정렬
LISTING_SORT = [("postedAt", DESCENDING)]

# search 파라미터가 OR 조건으로 확장되는 필드
SEARCH_FIELDS = ("title", "description", "company")


def contains_ignore_case(value: str) -> Dict[str, str]:
    """대소문자 무시 부분 일치 조건. 사용자 입력은 정규식으로 해석되지 않도록 escape"""
    return {"$regex": re.escape(value), "$options": "i"}


def build_job_filter(query: JobListQuery) -> Dict[str, Any]:
    """목록 조회 조건을 MongoDB 필터 문서로 변환 (모든 조건은 AND)"""
    filters: Dict[str, Any] = {}

    if query.company:
        filters["company"] = contains_ignore_case(query.company)
    if query.category:
        filters["category"] = query.category
    if query.type:
        filters["type"] = query.type
    if query.location:
        filters["location"] = contains_ignore_case(query.location)
    if query.search:
        filters["$or"] = [{field: contains_ignore_case(query.search)} for field in SEARCH_FIELDS]

    return filters


def total_pages(total: int, limit: int) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def classify_store_error(exc: Exception, fallback: ErrorKind) -> ErrorKind:
    if isinstance(exc, InvalidIdentifierError):
        return ErrorKind.INVALID_IDENTIFIER
    if isinstance(exc, ConnectionFailure):
        return ErrorKind.STORE_UNAVAILABLE
    return fallback


def _non_empty_sorted(values: List[Any]) -> List[str]:
    return sorted({value for value in values if isinstance(value, str) and value.strip()})


class JobQueryService:
    """채용공고 목록/상세/통계 조회"""

    def __init__(self, store: JobStore):
        self.store = store

    async def _gather(self, fallback: ErrorKind, *calls: Awaitable[Any]) -> List[Any]:
        try:
            return list(await asyncio.gather(*calls))
        except Exception as e:
            kind = classify_store_error(e, fallback)
            raise JobServiceError(kind, str(e) or e.__class__.__name__) from e

    async def list_jobs(self, query: JobListQuery) -> Tuple[List[JobPostingResponse], Pagination]:
        filters = build_job_filter(query)

        jobs, total = await self._gather(
            ErrorKind.QUERY_ERROR,
            self.store.find(filters, LISTING_SORT, query.offset, query.limit),
            self.store.count(filters),
        )

        pagination = Pagination(
            page=query.page,
            limit=query.limit,
            total=total,
            totalPages=total_pages(total, query.limit),
        )
        return list(jobs)[:query.limit], pagination

    async def get_job(self, job_id: str) -> Optional[JobPostingResponse]:
        """식별자로 공고 조회. 없으면 None (실패가 아님)"""
        (job,) = await self._gather(ErrorKind.QUERY_ERROR, self.store.find_by_id(job_id))
        return job

    async def get_summary(self) -> JobStatsSummary:
        total_jobs, companies, categories, type_counts = await self._gather(
            ErrorKind.AGGREGATION_ERROR,
            self.store.count({}),
            self.store.distinct_values("company"),
            self.store.distinct_values("category"),
            self.store.aggregate_group_count("type"),
        )

        return JobStatsSummary(
            totalJobs=total_jobs,
            totalCompanies=len(companies),
            totalCategories=len(categories),
            jobTypes=[JobTypeCount(type=row["key"], count=row["count"]) for row in type_counts],
        )

    async def get_filter_options(self) -> JobFilterOptions:
        companies, categories, types, locations = await self._gather(
            ErrorKind.AGGREGATION_ERROR,
            self.store.distinct_values("company"),
            self.store.distinct_values("category"),
            self.store.distinct_values("type"),
            self.store.distinct_values("location"),
        )

        return JobFilterOptions(
            companies=_non_empty_sorted(companies),
            categories=_non_empty_sorted(categories),
            types=_non_empty_sorted(types),
            locations=_non_empty_sorted(locations),
        )
