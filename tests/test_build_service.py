"""Tests for BuildService."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from domain import AddOnSet, BuildConfiguration, BuildRecord, StorageUnavailable, UseType
from services.build_service import BuildService


def _config(**overrides) -> BuildConfiguration:
    fields = dict(
        manufacturer="Ducati",
        year="2024",
        engine_size="750cc",
        use_type=UseType.STREET,
        add_ons=AddOnSet({"Exhaust", "ABS"}),
        express_delivery=True,
    )
    fields.update(overrides)
    return BuildConfiguration(**fields)


class TestBuildServiceWithMockRepo:
    def _service(self):
        repo = Mock()
        repo.insert = AsyncMock(return_value=7)
        repo.list_all = AsyncMock(return_value=[])
        repo.delete_by_id = AsyncMock(return_value=None)
        return BuildService(repo), repo

    def test_save_returns_record_with_id(self):
        service, repo = self._service()
        record = asyncio.run(service.save(_config()))

        assert record.id == 7
        assert record.add_ons == "Exhaust, ABS"
        assert record.use_type == "Street"
        repo.insert.assert_awaited_once()
        assert repo.insert.await_args[0][0].id is None

    def test_delete_returns_refreshed_list(self):
        service, repo = self._service()
        remaining = [BuildRecord("A", "2020", "600cc", "Track", "", "", False, id=1)]
        repo.list_all.return_value = remaining

        assert asyncio.run(service.delete_build(2)) == remaining
        repo.delete_by_id.assert_awaited_once_with(2)

    def test_storage_errors_propagate(self):
        service, repo = self._service()
        repo.insert.side_effect = StorageUnavailable("insert")
        with pytest.raises(StorageUnavailable):
            asyncio.run(service.save(_config()))


class TestBuildServiceIntegration:
    def test_save_list_delete(self, build_repo):
        service = BuildService(build_repo)
        first = asyncio.run(service.save(_config(manufacturer="Honda")))
        second = asyncio.run(service.save(_config(manufacturer="Yamaha")))

        builds = asyncio.run(service.list_builds())
        assert [b.id for b in builds] == [second.id, first.id]

        remaining = asyncio.run(service.delete_build(second.id))
        assert [b.manufacturer for b in remaining] == ["Honda"]

    def test_save_does_not_touch_configuration(self, build_repo):
        service = BuildService(build_repo)
        config = _config()
        asyncio.run(service.save(config))
        assert config == _config()


class TestEstimatePrice:
    def test_recomputes_from_record(self):
        record = BuildRecord("Ducati", "2024", "750cc", "Street", "Exhaust, ABS", "", True)
        assert BuildService.estimate_price(record) == 11250

    def test_unknown_engine_size(self):
        record = BuildRecord("Vespa", "1965", "50cc", "Street", "", "", False)
        assert BuildService.estimate_price(record) == 0
