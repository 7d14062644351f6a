"""Shared schema building blocks."""

from typing import Annotated, Any, ClassVar, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    model_validator,
)
from pydantic.alias_generators import to_camel

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValueError:
        raise ValueError("Invalid URL") from None
    return value


# Stored as the string the client sent
UrlStr = Annotated[str, Field(max_length=255), AfterValidator(_check_url)]

# Positive integer identifier
IdInt = Annotated[int, Field(gt=0)]

HEX_COLOR_PATTERN = r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class CamelModel(BaseModel):
    """Base for API schemas: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Acknowledgement without a payload."""

    success: bool = True
    message: str


class PatchModel(CamelModel):
    """Partial update body.

    ``patch()`` returns only the fields the client sent. An explicit null is
    kept for columns listed in ``nullable_fields`` and dropped otherwise.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()
    required_fields: ClassVar[frozenset[str]] = frozenset()
    empty_message: ClassVar[str] = "At least one field must be provided"

    def patch(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True, exclude=set(self.required_fields))
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in self.nullable_fields
        }

    @model_validator(mode="after")
    def require_changes(self) -> Self:
        if not self.patch():
            raise ValueError(self.empty_message)
        return self
