"""
채용공고 저장소 계약과 MongoDB(Beanie) 구현

조회 서비스는 ``JobStore`` 프로토콜에만 의존하며, 실제 구현은 FastAPI
의존성으로 주입된다. 테스트에서는 같은 계약을 따르는 메모리 구현으로
교체할 수 있다.
"""
from typing import Any, Dict, List, Optional, Protocol, Tuple

from beanie import PydanticObjectId
from bson.errors import InvalidId

from job_board.database.mongo import motor_client
from job_board.models import JobPosting
from job_board.schemas import JobPostingResponse

SortSpec = List[Tuple[str, int]]


class InvalidIdentifierError(ValueError):
    """ObjectId 형식이 아닌 식별자"""


class JobStore(Protocol):
    async def find(
        self, filter: Dict[str, Any], sort: SortSpec, skip: int, limit: int
    ) -> List[JobPostingResponse]: ...

    async def count(self, filter: Dict[str, Any]) -> int: ...

    async def distinct_values(self, field: str) -> List[Any]: ...

    async def aggregate_group_count(self, field: str) -> List[Dict[str, Any]]: ...

    async def find_by_id(self, job_id: str) -> Optional[JobPostingResponse]: ...

    async def ping(self) -> None: ...


def to_object_id(job_id: str) -> PydanticObjectId:
    try:
        return PydanticObjectId(job_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(f"Cast to ObjectId failed for value \"{job_id}\"") from e


class BeanieJobStore:
    """Beanie 쿼리 빌더 기반 JobStore 구현"""

    @staticmethod
    def _to_response(document: JobPosting) -> JobPostingResponse:
        return JobPostingResponse.model_validate(document.model_dump())

    async def find(
        self, filter: Dict[str, Any], sort: SortSpec, skip: int, limit: int
    ) -> List[JobPostingResponse]:
        documents = await JobPosting.find(filter).sort(sort).skip(skip).limit(limit).to_list()
        return [self._to_response(document) for document in documents]

    async def count(self, filter: Dict[str, Any]) -> int:
        return await JobPosting.find(filter).count()

    async def distinct_values(self, field: str) -> List[Any]:
        return await JobPosting.distinct(field)

    async def aggregate_group_count(self, field: str) -> List[Dict[str, Any]]:
        rows = await JobPosting.aggregate(
            [{"$group": {"_id": f"${field}", "count": {"$sum": 1}}}]
        ).to_list()
        return [{"key": row["_id"], "count": row["count"]} for row in rows]

    async def find_by_id(self, job_id: str) -> Optional[JobPostingResponse]:
        document = await JobPosting.get(to_object_id(job_id))
        if document is None:
            return None
        return self._to_response(document)

    async def ping(self) -> None:
        await motor_client.admin.command("ping")
