from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, Generic, List, Optional, Set, TypeVar
import re

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _trim_fraction(value: Any) -> Any:
    # ARM reports up to 7 fractional digits; datetime holds 6.
    if isinstance(value, str):
        return _EXCESS_FRACTION.sub(r"\1", value, count=1)
    return value


DateTime = Annotated[datetime, BeforeValidator(_trim_fraction)]


def ReadOnly(description: Optional[str] = None, **kwargs: Any) -> Any:
    """Declare a server-assigned field that is never sent back to the service."""
    return Field(None, description=description, json_schema_extra={"readOnly": True}, **kwargs)


def _wire_value(value: Any) -> Any:
    if isinstance(value, AzureModel):
        return value.serialize()
    if isinstance(value, (list, tuple)):
        return [_wire_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _wire_value(item) for key, item in value.items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class AzureModel(BaseModel):
    """
    Base class for all ARM payload models.

    Attributes are snake_case in Python and camelCase on the wire. Both
    spellings are accepted on construction; unknown wire fields are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def readonly_fields(cls) -> Set[str]:
        """Names of fields assigned by the server."""
        return {
            name
            for name, info in cls.model_fields.items()
            if isinstance(info.json_schema_extra, dict) and info.json_schema_extra.get("readOnly")
        }

    @classmethod
    def deserialize(cls, data: Dict[str, Any]):
        """Build an instance from a wire dictionary."""
        return cls.model_validate(data)

    def serialize(self) -> Dict[str, Any]:
        """
        Convert to a wire dictionary suitable for a request body.

        Unset (None) fields and read-only fields are omitted, recursively.
        A nested object left with no writable content is omitted as well.
        """
        readonly = self.readonly_fields()
        body: Dict[str, Any] = {}
        for name, info in type(self).model_fields.items():
            if name in readonly:
                continue
            value = getattr(self, name)
            if value is None:
                continue
            wire = _wire_value(value)
            if isinstance(value, AzureModel) and not wire:
                continue
            body[info.alias or name] = wire
        for key, value in (self.model_extra or {}).items():
            if value is not None:
                body[key] = _wire_value(value)
        return body


class Resource(AzureModel):
    """Common ARM resource envelope."""

    id: Optional[str] = ReadOnly("Resource Id")
    name: Optional[str] = ReadOnly("Resource name")
    type: Optional[str] = ReadOnly("Resource type")


class TrackedResource(Resource):
    location: Optional[str] = Field(None, description="Azure location of the resource")
    tags: Optional[Dict[str, str]] = Field(None, description="Resource tags")


class ResourceList(AzureModel, Generic[T]):
    """One page of a collection plus the link to the next page."""

    value: List[T] = Field(default_factory=list)
    next_link: Optional[str] = Field(None, description="URI to fetch the next page")


class ErrorDetail(AzureModel):
    code: Optional[str] = None
    message: Optional[str] = None
    target: Optional[str] = None
    details: Optional[List["ErrorDetail"]] = None


class CloudError(AzureModel):
    """Error body returned by ARM: ``{"error": {"code": ..., "message": ...}}``."""

    error: Optional[ErrorDetail] = None
