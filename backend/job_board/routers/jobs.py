from fastapi import APIRouter, Depends, Query
from typing import Optional
from job_board.schemas import (
    ErrorResponse,
    JobDetailResponse,
    JobFilterOptionsResponse,
    JobListQuery,
    JobListResponse,
    JobStatsResponse,
)
from job_board.services.job_service import JobQueryService
from job_board.utils.dependencies import get_job_service
from job_board.utils.exceptions import (
    InternalServerException,
    JobServiceError,
    NotFoundException,
    public_error_detail,
)
from job_board.utils.logger import app_logger

router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
    responses={500: {"model": ErrorResponse}},
)

@router.get(
    "",
    response_model=JobListResponse,
    operation_id="list_jobs",
    summary="채용공고 목록 조회 (필터/페이징 지원)",
    description="""
회사명, 카테고리, 고용형태, 근무지, 검색어로 채용공고를 필터링하여 게시일 최신순으로 조회합니다.\n
- `page`(기본 1), `limit`(기본 20, 최대 100)으로 페이지네이션합니다. 잘못된 값은 기본값으로 대체됩니다.\n
- `company`, `location`: 대소문자 무시 부분 일치\n
- `category`, `type`: 정확히 일치\n
- `search`: 제목/본문/회사명 중 하나라도 부분 일치 (대소문자 무시)\n
- 모든 조건은 AND로 결합됩니다.
"""
)
async def list_jobs(
    page: Optional[str] = Query(None, description="페이지 번호 (1부터 시작)"),
    limit: Optional[str] = Query(None, description="페이지당 공고 수"),
    company: Optional[str] = Query(None, description="회사명 부분 일치"),
    category: Optional[str] = Query(None, description="카테고리 정확히 일치"),
    job_type: Optional[str] = Query(None, alias="type", description="고용형태 정확히 일치"),
    location: Optional[str] = Query(None, description="근무지 부분 일치"),
    search: Optional[str] = Query(None, description="제목/본문/회사명 검색어"),
    service: JobQueryService = Depends(get_job_service),
):
    query = JobListQuery(
        page=page,
        limit=limit,
        company=company,
        category=category,
        type=job_type,
        location=location,
        search=search,
    )
    try:
        jobs, pagination = await service.list_jobs(query)
    except JobServiceError as e:
        app_logger.error(f"채용공고 목록 조회 실패: {e}")
        raise InternalServerException("Failed to fetch jobs", error=public_error_detail(e))

    app_logger.info(f"채용공고 목록 조회 완료: {len(jobs)}건 (page={pagination.page}, total={pagination.total})")
    return JobListResponse(data=jobs, pagination=pagination)

# === 통계/필터 엔드포인트 (정적 경로는 /{job_id}보다 먼저 등록) ===
@router.get(
    "/stats/summary",
    response_model=JobStatsResponse,
    operation_id="get_job_stats_summary",
    summary="채용공고 통계 요약",
    description="전체 공고 수, 회사 수, 카테고리 수, 고용형태별 공고 수를 반환합니다. `jobTypes` 순서는 보장되지 않습니다."
)
async def get_job_stats_summary(service: JobQueryService = Depends(get_job_service)):
    try:
        summary = await service.get_summary()
    except JobServiceError as e:
        app_logger.error(f"채용공고 통계 조회 실패: {e}")
        raise InternalServerException("Failed to fetch job statistics", error=public_error_detail(e))

    app_logger.info(f"채용공고 통계 조회 완료: totalJobs={summary.totalJobs}")
    return JobStatsResponse(data=summary)

@router.get(
    "/filters/options",
    response_model=JobFilterOptionsResponse,
    operation_id="get_job_filter_options",
    summary="필터 옵션 유니크 리스트 조회",
    description="회사명, 카테고리, 고용형태, 근무지의 유니크 값(빈 값 제외, 정렬)을 반환합니다."
)
async def get_job_filter_options(service: JobQueryService = Depends(get_job_service)):
    try:
        options = await service.get_filter_options()
    except JobServiceError as e:
        app_logger.error(f"필터 옵션 조회 실패: {e}")
        raise InternalServerException("Failed to fetch job filter options", error=public_error_detail(e))

    app_logger.info(f"필터 옵션 조회 완료: 회사 {len(options.companies)}건, 카테고리 {len(options.categories)}건")
    return JobFilterOptionsResponse(data=options)

@router.get(
    "/{job_id}",
    response_model=JobDetailResponse,
    operation_id="get_job",
    summary="채용공고 상세 조회",
    responses={404: {"model": ErrorResponse}},
    description="""
특정 채용공고의 상세 정보를 조회합니다.

- `job_id`에 해당하는 공고가 없으면 404와 `Job not found`를 반환합니다.
- ObjectId 형식이 아닌 `job_id`는 조회 실패(500)로 처리됩니다.
"""
)
async def get_job(job_id: str, service: JobQueryService = Depends(get_job_service)):
    try:
        job = await service.get_job(job_id)
    except JobServiceError as e:
        app_logger.error(f"채용공고 상세 조회 실패: job_id={job_id}, 오류: {e}")
        raise InternalServerException("Failed to fetch job", error=public_error_detail(e))

    if job is None:
        app_logger.warning(f"채용공고를 찾을 수 없음: job_id={job_id}")
        raise NotFoundException("Job", message="Job not found")

    return JobDetailResponse(data=job)
