"""Documentation model rendered into API Blueprint documents.

The tree is built elsewhere (a framework, a loader) and handed over
read-only: Api -> ResourceGroup -> Resource -> Action -> Field.
"""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

ENTITY_CHANGING_METHODS = ("POST", "PUT", "PATCH")

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class ResourceType(str, Enum):
    """Kind of resource; decides which parameters and attributes are documented."""

    COLLECTION = "collection"
    ENTITY = "entity"
    RPC = "rpc"


class Field(BaseModel):
    """A single documented property of a request/response body."""

    model_config = ConfigDict(frozen=True)

    name: str
    example: Any = None
    field_type: str | None = None  # int / bool / text / string / ...
    required: bool = False
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _empty_description(cls, value):
        return "" if value is None else value


class PossibleResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: int
    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def _empty_message(cls, value):
        return "" if value is None else value


class Action(BaseModel):
    """One HTTP-method-bound operation on a resource."""

    model_config = ConfigDict(frozen=True)

    http_method: str  # GET / POST / PUT / PATCH / DELETE
    description: str = ""
    body_properties: list[Field] = []
    request_description: str = ""
    response_description: str = ""
    possible_responses: list[PossibleResponse] = []

    @field_validator("description", "request_description", "response_description", mode="before")
    @classmethod
    def _empty_texts(cls, value):
        return "" if value is None else value

    @field_validator("http_method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()

    def allows_changing_entity(self) -> bool:
        return self.http_method in ENTITY_CHANGING_METHODS


class Resource(BaseModel):
    """A URI template and the actions available on it."""

    model_config = ConfigDict(frozen=True)

    name: str
    uri: str
    resource_type: ResourceType = ResourceType.COLLECTION
    parameter: str = ""  # identifier placeholder, derived from the URI when not given
    actions: list[Action] = []

    @field_validator("resource_type", mode="before")
    @classmethod
    def _lower_type(cls, value):
        if isinstance(value, str):
            return value.lower()
        return value

    @model_validator(mode="before")
    @classmethod
    def _derive_parameter(cls, data):
        if isinstance(data, dict) and data.get("parameter") is None:
            placeholders = _PLACEHOLDER.findall(str(data.get("uri", "")))
            data = {**data, "parameter": placeholders[-1] if placeholders else ""}
        return data


class ResourceGroup(BaseModel):
    """A named, tag-filterable collection of resources."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    tags: list[str] = []
    resources: list[Resource] = []

    @field_validator("description", mode="before")
    @classmethod
    def _empty_description(cls, value):
        return "" if value is None else value

    def matches_tag(self, tag: str | None) -> bool:
        return not tag or tag in self.tags


class Api(BaseModel):
    """Root of the documentation tree."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    resource_groups: list[ResourceGroup] = []

    @field_validator("description", mode="before")
    @classmethod
    def _empty_description(cls, value):
        return "" if value is None else value
