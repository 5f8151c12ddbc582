"""Tests for identifier parsing in the Beanie-backed store."""

import pytest
from beanie import PydanticObjectId

from job_board.services.job_store import BeanieJobStore, InvalidIdentifierError, to_object_id


class TestToObjectId:
    def test_valid(self) -> None:
        assert to_object_id("64b7f0c2a1b2c3d4e5f60718") == PydanticObjectId("64b7f0c2a1b2c3d4e5f60718")

    @pytest.mark.parametrize("raw", ["", "123", "not-an-id", "zzzzzzzzzzzzzzzzzzzzzzzz"])
    def test_malformed(self, raw) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(InvalidIdentifierError):
            to_object_id(raw)


async def test_find_by_id_rejects_malformed_id_before_querying() -> None:
    with pytest.raises(InvalidIdentifierError):
        await BeanieJobStore().find_by_id("not-an-id")
