"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to I/O libraries.
- Management API payloads are validated at the edge, so fetchers only ever
  see well-formed objects.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ImportRecord(BaseModel):
    """One remote resource to be imported into Terraform.

    Produced only by fetchers; immutable once built.
    """

    model_config = ConfigDict(frozen=True)

    import_id: str = Field(
        ...,
        min_length=1,
        description="Remote identifier expected by Terraform's import mechanism.",
    )
    resource_name: str = Field(
        ...,
        min_length=1,
        description="Local resource address, '<resource_type>.<local_name>'.",
    )


ImportDataList = list[ImportRecord]


class ClientApplication(BaseModel):
    """Subset of a Management API client (application) payload."""

    model_config = ConfigDict(extra="ignore")

    client_id: str = Field(
        ...,
        min_length=1,
        description="Remote identifier of the application.",
    )
    name: str = Field(
        default="",
        description="Display name of the application.",
    )


class ClientsPage(BaseModel):
    """One page of `GET /api/v2/clients?include_totals=true`."""

    model_config = ConfigDict(extra="ignore")

    clients: list[ClientApplication] = Field(default_factory=list)
    start: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    def has_next(self) -> bool:
        return self.start + self.limit < self.total
