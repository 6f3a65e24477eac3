"""Help entry entities stored in the help registries."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from src.lib.exceptions import ValidationError


class CrossReference(BaseModel):
    """
    Pointer from one help entry to a related topic ("See also").

    Rendered as a hyperlink when link is set, as plain text otherwise.
    """

    text: str = Field(..., description="Display text")
    link: str | None = Field(default=None, description="Hyperlink target")

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        """Validate that the display text is usable."""
        if not v or not v.strip():
            raise ValidationError("Cross-reference text cannot be empty", field="text")
        return v


class HelpEntry(BaseModel):
    """
    A unit of displayable help content.

    Either templated (body with positional placeholders) or external
    (content streamed verbatim from the source named by link).

    Field aliases match the keys of the help definition files:
    Headline, Text, ext, Link, SeeAlso.
    """

    headline: str = Field(default="", alias="Headline", description="Short title")
    body: str | None = Field(
        default=None, alias="Text", description="Template with positional placeholders"
    )
    is_external: bool = Field(
        default=False, alias="ext", description="Stream content from an external source"
    )
    link: str | None = Field(
        default=None, alias="Link", description="Name of the external source"
    )
    see_also: tuple[CrossReference, ...] = Field(
        default=(), alias="SeeAlso", description="Ordered cross-references"
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator("is_external", mode="before")
    @classmethod
    def parse_external_flag(cls, v: Any) -> Any:
        """Only the exact string "TRUE" marks an entry as external."""
        if isinstance(v, str):
            return v == "TRUE"
        return v

    @field_validator("see_also", mode="before")
    @classmethod
    def ignore_non_list(cls, v: Any) -> Any:
        """A missing or non-list SeeAlso means no cross-references."""
        if not isinstance(v, (list, tuple)):
            return ()
        return v

    @model_validator(mode="after")
    def check_content_path(self) -> "HelpEntry":
        """Exactly one content path must be usable."""
        if self.is_external:
            if not self.link or not self.link.strip():
                raise ValidationError(
                    "External help entry requires a link", field="link"
                )
        elif self.body is None:
            raise ValidationError("Help entry requires a text body", field="body")
        return self


@dataclass(frozen=True)
class NotFound:
    """
    Result of a lookup that matched no help entry.

    Attributes:
        identifier: The requested help identifier
        module: The module that was searched, None for the global registry
    """

    identifier: str
    module: str | None = None
