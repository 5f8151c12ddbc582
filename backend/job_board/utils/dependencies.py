from fastapi import Depends

from job_board.services.job_service import JobQueryService
from job_board.services.job_store import BeanieJobStore, JobStore

# 저장소 핸들은 전역으로 직접 쓰지 않고 의존성으로 주입 (테스트에서 교체 가능)
def get_job_store() -> JobStore:
    return BeanieJobStore()

def get_job_service(store: JobStore = Depends(get_job_store)) -> JobQueryService:
    return JobQueryService(store)
