from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from job_board.config import settings
from job_board.database import init_mongo, close_mongo
from job_board.routers import jobs
from job_board.services.job_store import JobStore
from job_board.utils.dependencies import get_job_store
from job_board.utils.exceptions import AppException, app_exception_handler
from job_board.utils.logger import app_logger

# 앱 시작 시 MongoDB(Beanie) 초기화, 종료 시 연결 정리
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_mongo()
    yield
    await close_mongo()

# FastAPI 앱 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION,
    lifespan=lifespan
)

@app.get("/")
async def root():
    """API 루트 경로"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "endpoints": [
            f"{settings.API_PREFIX}/jobs",
            f"{settings.API_PREFIX}/jobs/{{id}}",
            f"{settings.API_PREFIX}/jobs/stats/summary",
            f"{settings.API_PREFIX}/jobs/filters/options",
        ]
    }

@app.get("/health")
async def health(store: JobStore = Depends(get_job_store)):
    """MongoDB 연결 상태 확인"""
    try:
        await store.ping()
    except Exception as e:
        app_logger.warning(f"헬스 체크 실패: {str(e)}")
        return JSONResponse(status_code=503, content={"status": "degraded", "mongo": "unavailable"})
    return {"status": "ok", "mongo": "ok"}

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# 모든 AppException을 {success: false, message, error} 형태로 응답
app.add_exception_handler(AppException, app_exception_handler)

# 라우터 등록
app.include_router(jobs.router, prefix=settings.API_PREFIX)
