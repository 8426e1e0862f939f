"""Envelope models wrapping every Form3 resource body."""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class RequestEnvelope(BaseModel, Generic[DataT]):
    """Write request body: ``{"data": <payload>}``."""

    data: DataT = Field(..., description="Resource payload")


class ResponseLinks(BaseModel):
    """Pagination links returned alongside resource bodies."""

    model_config = ConfigDict(populate_by_name=True)

    self_: Optional[str] = Field(None, alias="self", description="Link to this resource or page")
    first: Optional[str] = Field(None, description="Link to the first page")
    last: Optional[str] = Field(None, description="Link to the last page")
    prev: Optional[str] = Field(None, description="Link to the previous page")
    next: Optional[str] = Field(None, description="Link to the next page")


class ResponseEnvelope(BaseModel, Generic[DataT]):
    """Response body: ``{"data": <payload>, "links": {...}}``."""

    data: DataT = Field(..., description="Resource payload")
    links: ResponseLinks = Field(default_factory=ResponseLinks, description="Pagination links")


class ErrorBody(BaseModel):
    """Error response body."""

    error_message: Optional[str] = Field(None, description="Human readable error message")
