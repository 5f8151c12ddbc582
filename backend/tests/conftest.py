"""
공용 pytest fixture

MongoDB 없이 테스트할 수 있도록 JobStore 계약을 따르는 메모리 저장소를
제공한다. 서비스가 만든 필터 문서($regex/$options, $or, 정확히 일치)를
그대로 해석하므로 필터 의미까지 검증할 수 있다.
"""
import re
from collections import Counter
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from job_board.main import app
from job_board.schemas import JobPostingResponse
from job_board.services.job_store import to_object_id
from job_board.utils.dependencies import get_job_store

BASE_TIME = datetime(2025, 7, 1, 9, 0, 0)


def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, dict) and "$regex" in condition:
        flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
        return isinstance(value, str) and re.search(condition["$regex"], value, flags) is not None
    return value == condition


def matches(document: Dict[str, Any], filter: Dict[str, Any]) -> bool:
    for key, condition in filter.items():
        if key == "$or":
            if not any(matches(document, sub) for sub in condition):
                return False
        elif not _matches_condition(document.get(key), condition):
            return False
    return True


class InMemoryJobStore:
    """테스트용 JobStore"""

    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None):
        self.documents: List[Dict[str, Any]] = list(documents or [])
        self.error: Optional[Exception] = None
        self.failing_calls: set = set()
        self.calls: List[str] = []

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None and (not self.failing_calls or name in self.failing_calls):
            raise self.error

    @staticmethod
    def _to_response(document: Dict[str, Any]) -> JobPostingResponse:
        return JobPostingResponse.model_validate({**document, "id": document["_id"]})

    async def find(self, filter, sort, skip, limit):
        self._record("find")
        selected = [doc for doc in self.documents if matches(doc, filter)]
        for field, direction in reversed(sort):
            selected.sort(key=lambda doc: doc[field], reverse=direction < 0)
        return [self._to_response(doc) for doc in selected[skip:skip + limit]]

    async def count(self, filter):
        self._record("count")
        return sum(1 for doc in self.documents if matches(doc, filter))

    async def distinct_values(self, field):
        self._record(f"distinct:{field}")
        values = []
        for doc in self.documents:
            if field in doc and doc[field] not in values:
                values.append(doc[field])
        return values

    async def aggregate_group_count(self, field):
        self._record(f"aggregate:{field}")
        counts = Counter(doc.get(field) for doc in self.documents)
        return [{"key": key, "count": count} for key, count in counts.items()]

    async def find_by_id(self, job_id):
        self._record("find_by_id")
        object_id = to_object_id(job_id)
        for doc in self.documents:
            if doc["_id"] == object_id:
                return self._to_response(doc)
        return None

    async def ping(self):
        self._record("ping")


def make_job(index: int = 0, **overrides: Any) -> Dict[str, Any]:
    """MongoDB에 저장된 형태(_id, postedAt)의 공고 문서 생성"""
    document = {
        "_id": ObjectId(),
        "title": f"Engineer {index}",
        "company": "Globex",
        "description": "Build things.",
        "category": "Engineering",
        "type": "full-time",
        "location": "Seoul",
        "postedAt": BASE_TIME + timedelta(hours=index),
    }
    document.update(overrides)
    return document


@pytest.fixture()
def store() -> InMemoryJobStore:
    return InMemoryJobStore()


@pytest.fixture()
def acme_store() -> InMemoryJobStore:
    """25건 중 20건이 대소문자만 다른 Acme 공고"""
    variants = ["Acme", "ACME", "acme", "AcMe"]
    documents = [make_job(i, company=variants[i % len(variants)]) for i in range(20)]
    documents += [make_job(20 + i, company="Globex") for i in range(5)]
    return InMemoryJobStore(documents)


@pytest.fixture()
def client_for():
    """주어진 저장소를 주입한 TestClient 생성 (lifespan 미실행)"""
    def _client(job_store: InMemoryJobStore) -> TestClient:
        app.dependency_overrides[get_job_store] = lambda: job_store
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()
