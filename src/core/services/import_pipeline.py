"""Terraform import pipeline.

This module owns the "which resources, in what order" side of the
`terraform generate` flow. The CLI delegates fetcher selection and
aggregation here, so the same helpers can back other entry-points (tests,
batch jobs) without any printing or file I/O.
"""

from __future__ import annotations

from typing import Callable, Iterable

from adapters.fetchers import ClientResourceFetcher
from adapters.management_api import ManagementAPI
from core.domain.models import ImportDataList
from core.errors import UnknownResourceTypeError
from core.interfaces.fetcher import ResourceDataFetcher
from core.logging_utils import get_logger

logger = get_logger(__name__)

FetcherFactory = Callable[[ManagementAPI], ResourceDataFetcher]

# Registration order is output order.
FETCHER_REGISTRY: dict[str, FetcherFactory] = {
    ClientResourceFetcher.resource_type: ClientResourceFetcher,
}


def supported_resource_types() -> list[str]:
    return list(FETCHER_REGISTRY)


def select_resource_types(resources: Iterable[str] | None = None) -> list[str]:
    """Validate a resource selection against the registry.

    Empty means every registered type. The result is always in registration
    order, so the generated import file does not depend on how the user
    ordered the flags.
    """

    wanted = {r.strip() for r in (resources or []) if r and r.strip()}
    unknown = wanted - FETCHER_REGISTRY.keys()
    if unknown:
        raise UnknownResourceTypeError(unknown, supported_resource_types())

    return [name for name in FETCHER_REGISTRY if not wanted or name in wanted]


def build_resource_fetchers(
    api: ManagementAPI,
    resources: Iterable[str] | None = None,
) -> list[ResourceDataFetcher]:
    """Instantiate the fetchers for `resources` (all registered when empty)."""

    return [FETCHER_REGISTRY[name](api) for name in select_resource_types(resources)]


async def fetch_import_data(*fetchers: ResourceDataFetcher) -> ImportDataList:
    """Run `fetchers` one at a time and concatenate their records.

    The first failing fetcher aborts the whole run; its exception is re-raised
    unchanged and records from earlier fetchers are dropped.
    """

    import_data: ImportDataList = []
    for fetcher in fetchers:
        data = await fetcher.fetch_data()
        logger.info("Fetched %d %s resource(s)", len(data), fetcher.resource_type)
        import_data.extend(data)
    return import_data
