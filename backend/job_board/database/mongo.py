from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from job_board.config import settings
from job_board.models import JobPosting
from job_board.utils.logger import db_logger

motor_client = AsyncIOMotorClient(
    settings.MONGO_URI,
    serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
)

async def init_mongo():
    await init_beanie(
        database=motor_client[settings.MONGO_DB_NAME],
        document_models=[JobPosting],
    )
    db_logger.info(f"MongoDB 초기화 완료: db={settings.MONGO_DB_NAME}, collection={settings.JOBS_COLLECTION}")

async def close_mongo():
    """MongoDB 연결을 안전하게 종료합니다."""
    if motor_client:
        motor_client.close()
        db_logger.info("MongoDB 연결 종료")
