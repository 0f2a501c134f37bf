"""Mutable models for the parts of an OpenAPI 3.x document that get annotated.

Only the fields the annotators read or write are modelled; everything else
is carried through as extra data. Dump with ``dump()`` so untouched fields
are not filled in with defaults.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OpenApiModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def dump(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class Schema(OpenApiModel):
    """A schema object or a ``$ref`` to one."""

    type: str | list[str] | None = None  # list form in OpenAPI 3.1
    ref: str | None = Field(default=None, alias="$ref")
    description: str | None = None
    example: Any = None
    properties: dict[str, "Schema"] = {}


class Response(OpenApiModel):
    description: str | None = None


class MediaType(OpenApiModel):
    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None


class RequestBody(OpenApiModel):
    description: str | None = None
    content: dict[str, MediaType] = {}


class Parameter(OpenApiModel):
    name: str | None = None  # absent on $ref parameters
    in_: str | None = Field(default=None, alias="in")
    description: str | None = None
    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None


class Operation(OpenApiModel):
    """A single operation under ``paths``."""

    summary: str | None = None
    description: str | None = None
    tags: list[str] = []
    parameters: list[Parameter] = []
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    responses: dict[str, Response] = {}

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_strings(cls, value: Any) -> Any:
        # YAML reads unquoted status codes as integers
        if isinstance(value, dict):
            return {str(code): response for code, response in value.items()}
        return value

    def response(self, code: str) -> Response:
        """Return the response for ``code``, adding an empty one if missing."""
        if code not in self.responses:
            self.responses = {**self.responses, code: Response()}
        return self.responses[code]


class Tag(OpenApiModel):
    name: str
    description: str | None = None
