"""Resource fetcher contract.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- Lets each resource kind (clients today, more later) be plugged into the
  import pipeline and tested without touching the Core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ImportRecord


@runtime_checkable
class ResourceDataFetcher(Protocol):
    """Minimal contract for one importable resource kind.

    Design rules:
    - `fetch_data` is async because it performs Management API I/O.
    - Returns zero or more records in remote listing order; an empty list is
      not an error.
    - Remote failures propagate unchanged: no retry, no partial results.
    """

    resource_type: str

    async def fetch_data(self) -> list[ImportRecord]:
        """List the tenant's resources of this kind as import records."""

        ...
