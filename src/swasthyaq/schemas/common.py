"""Response envelope and base request model shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class ApiModel(BaseModel):
    """Request/response body with camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope ``{success, data?, error?}`` returned by every endpoint."""

    success: bool = True
    data: DataT | None = None
    error: str | None = None

    model_config = {
        "json_schema_extra": {"examples": [{"success": True, "data": {"deleted": True}}]}
    }


class Page(ApiModel, Generic[DataT]):
    """One page of a cursor-paginated listing."""

    items: list[DataT] = Field(default_factory=list)
    next: str | None = Field(None, description="Cursor for the following page, null at the end")
