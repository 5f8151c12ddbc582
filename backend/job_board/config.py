import os
from typing import List
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Job Board API")
    API_VERSION: str = os.getenv("API_VERSION", "1.0.0")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")

    # MongoDB 설정 (채용공고 원본 저장소)
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "job_board")
    JOBS_COLLECTION: str = os.getenv("JOBS_COLLECTION", "jobs")
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # 페이지네이션 설정
    DEFAULT_PAGE_LIMIT: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "20"))
    MAX_PAGE_LIMIT: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))

    # true면 500 응답의 error 필드에 내부 오류 메시지를 그대로 노출
    EXPOSE_ERROR_DETAILS: bool = os.getenv("EXPOSE_ERROR_DETAILS", "false").lower() in {"1", "true", "yes"}

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS 설정
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
