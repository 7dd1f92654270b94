"""
Build Service

Saves configurations as BuildRecords and manages the saved-build list.
No Streamlit imports.

Design Principles:
1. Dependency Injection - BuildRepository passed in, not created
2. The configuration is only read on save; editing continues afterwards
"""

from dataclasses import replace

from domain.models import BuildConfiguration, BuildID, BuildRecord
from logging_config import setup_logging
from repositories.build_repo import BuildRepository
from services.configuration_service import compute_total_price

logger = setup_logging(__name__, log_file="build_service.log")


class BuildService:
    """Service for saved builds.

    Args:
        repo: BuildRepository instance for data access.
    """

    def __init__(self, repo: BuildRepository):
        self._repo = repo

    @classmethod
    def create_default(cls) -> "BuildService":
        from config import DatabaseConfig

        return cls(BuildRepository(DatabaseConfig()))

    async def save(self, config: BuildConfiguration) -> BuildRecord:
        """Persist the configuration and return the stored record with its id.

        Raises:
            StorageUnavailable: If the build store cannot be written.
        """
        record = BuildRecord.from_configuration(config)
        build_id = await self._repo.insert(record)
        return replace(record, id=build_id)

    async def list_builds(self) -> list[BuildRecord]:
        """Saved builds, most recent first."""
        return await self._repo.list_all()

    async def delete_build(self, build_id: BuildID) -> list[BuildRecord]:
        """Delete a build and return the refreshed list."""
        await self._repo.delete_by_id(build_id)
        return await self._repo.list_all()

    @staticmethod
    def estimate_price(record: BuildRecord) -> int:
        """Total price recomputed from a saved record."""
        return compute_total_price(
            record.engine_size,
            len(record.selected_add_ons),
            record.express_delivery,
        )
