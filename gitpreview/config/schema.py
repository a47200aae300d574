"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from gitpreview.preview.formatter import DEFAULT_MESSAGE_FORMAT


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PreviewConfig(Base):
    """How previews are selected and rendered."""

    default_highlight: str = "sh"
    default_lines: int = Field(default=1, ge=1)
    max_lines: int = Field(default=25, ge=1)
    message_format: str = DEFAULT_MESSAGE_FORMAT
    replace_triple_backticks: str = "~~~"
    send_file: bool = False  # Reserved: file attachment output is not implemented.
    max_message_length: int = Field(default=1995, ge=16)

    @field_validator("message_format")
    @classmethod
    def _default_empty_format(cls, value: str) -> str:
        return value if value.strip() else DEFAULT_MESSAGE_FORMAT

    @field_validator("replace_triple_backticks")
    @classmethod
    def _reject_fence_marker(cls, value: str) -> str:
        if "```" in value:
            raise ValueError("replaceTripleBackticks must not contain a triple backtick")
        return value


class FetchConfig(Base):
    """Raw content HTTP settings."""

    proxy: str = ""  # Prefix prepended to raw URLs, e.g. a CORS proxy origin
    timeout: float = Field(default=10.0, gt=0)


class CacheConfig(Base):
    """Raw content cache bounds."""

    max_entries: int = Field(default=256, ge=1)
    ttl_seconds: float = Field(default=600.0, ge=0)


class Config(Base):
    """Root configuration for gitpreview."""

    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
