"""Unit tests for SaleService."""

import pytest

from market.domain.model import Sale
from market.domain.repository import SaleRepository
from market.domain.service import SaleService
from market.domain.value import FileId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_buyer_owns_file(unit_env):
    service = await unit_env.get(SaleService)
    repo = await unit_env.get(SaleRepository)
    await repo.save(Sale(file_id=FileId(1), buyer_id=UserId(7)))

    assert await service.user_owns_file(FileId(1), UserId(7)) is True


@pytest.mark.asyncio
async def test_other_buyer_does_not_own_file(unit_env):
    service = await unit_env.get(SaleService)
    repo = await unit_env.get(SaleRepository)
    await repo.save(Sale(file_id=FileId(1), buyer_id=UserId(7)))

    assert await service.user_owns_file(FileId(1), UserId(8)) is False
    assert await service.user_owns_file(FileId(2), UserId(7)) is False


@pytest.mark.asyncio
async def test_anonymous_viewer_owns_nothing(unit_env):
    service = await unit_env.get(SaleService)

    assert await service.user_owns_file(FileId(1), None) is False
