"""Resource fetchers (one module per resource kind).

Each module implements `core.interfaces.fetcher.ResourceDataFetcher` and is
registered in `core.services.import_pipeline.FETCHER_REGISTRY`.
"""

from adapters.fetchers.clients import ClientResourceFetcher
from adapters.fetchers.naming import sanitize_resource_name

__all__ = [
	"ClientResourceFetcher",
	"sanitize_resource_name",
]
