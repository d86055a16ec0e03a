"""Fetcher: client applications (`auth0_client`)."""

from __future__ import annotations

from adapters.fetchers.naming import sanitize_resource_name
from adapters.management_api import ManagementAPI
from core.domain.models import ImportRecord
from core.interfaces.fetcher import ResourceDataFetcher
from core.logging_utils import get_logger

logger = get_logger(__name__)


class ClientResourceFetcher(ResourceDataFetcher):
    """Lists every application of the tenant as an `auth0_client` import."""

    resource_type = "auth0_client"

    def __init__(self, api: ManagementAPI) -> None:
        self._api = api

    async def fetch_data(self) -> list[ImportRecord]:
        clients = await self._api.list_clients()

        records: list[ImportRecord] = []
        for client in clients:
            local_name = sanitize_resource_name(client.name) or sanitize_resource_name(client.client_id)
            if not local_name:
                local_name = "client"
            records.append(
                ImportRecord(
                    import_id=client.client_id,
                    resource_name=f"{self.resource_type}.{local_name}",
                )
            )
        logger.debug("built %d %s import record(s)", len(records), self.resource_type)
        return records
