"""Auth0 Management API client (httpx).

Why a wrapper:
- Standardizes base URL, auth header, timeouts and user agent for every
  fetcher.
- Easy to test: the underlying `httpx.AsyncClient` can be built over a
  `httpx.MockTransport`.

Only the read-only listing calls the Terraform export needs live here.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import ClientApplication, ClientsPage
from core.errors import ConfigurationError
from core.logging_utils import get_logger

logger = get_logger(__name__)


def build_management_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to the tenant's Management API.

    Raises `ConfigurationError` when the domain or access token is missing,
    before any network call is attempted.
    """

    settings = settings or AppSettings()
    base_url = settings.api_base_url
    if not base_url:
        raise ConfigurationError("tenant domain is not configured (set AUTH0_DOMAIN)")
    if not settings.access_token:
        raise ConfigurationError("management API access token is not configured (set AUTH0_ACCESS_TOKEN)")

    headers: dict[str, str] = {
        "Authorization": f"Bearer {settings.access_token}",
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class ManagementAPI:
    """Thin async facade over the Management API endpoints used for export."""

    def __init__(self, client: httpx.AsyncClient, *, page_size: int = 50) -> None:
        self._client = client
        self._page_size = page_size

    async def list_clients_page(self, page: int = 0) -> ClientsPage:
        response = await self._client.get(
            "clients",
            params={
                "page": page,
                "per_page": self._page_size,
                "include_totals": "true",
                "fields": "client_id,name",
                "include_fields": "true",
            },
        )
        response.raise_for_status()
        return ClientsPage.model_validate(response.json())

    async def list_clients(self) -> list[ClientApplication]:
        """All client applications of the tenant, following every page."""

        clients: list[ClientApplication] = []
        page = 0
        while True:
            result = await self.list_clients_page(page)
            clients.extend(result.clients)
            logger.debug(
                "clients page %d: %d item(s), total %d", page, len(result.clients), result.total
            )
            if not result.clients or not result.has_next():
                break
            page += 1
        return clients
