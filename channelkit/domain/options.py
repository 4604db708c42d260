"""Structured option bags for message queries, edits and sends.

Callers may hand the channel facade either one of these models or a plain
dict; the facade forwards what it was given and the owner coerces it here.
Unknown keys are kept (``extra="allow"``) so owner-specific fields survive.
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

MESSAGE_CONTENT_LIMIT = 2000

_ANCHORS = ("around", "before", "after")


class MessageQuery(BaseModel):
    """Which page of channel history to fetch."""

    model_config = ConfigDict(extra="allow")

    around: Optional[int] = None
    before: Optional[int] = None
    after: Optional[int] = None
    limit: Optional[int] = Field(default=None, ge=1, le=100)

    @model_validator(mode="after")
    def _single_anchor(self) -> "MessageQuery":
        given = [name for name in _ANCHORS if getattr(self, name) is not None]
        if len(given) > 1:
            raise ValueError(f"around/before/after are mutually exclusive, got {given}")
        return self

    @property
    def anchor(self) -> Optional[str]:
        for name in _ANCHORS:
            if getattr(self, name) is not None:
                return name
        return None

    @classmethod
    def coerce(cls, options: Union["MessageQuery", Mapping[str, Any], None]) -> "MessageQuery":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


class MessageEdit(BaseModel):
    """New fields for an existing message. Only fields that were set are applied."""

    model_config = ConfigDict(extra="allow")

    content: Optional[str] = Field(default=None, max_length=MESSAGE_CONTENT_LIMIT)
    embed: Optional[Dict[str, Any]] = None

    def fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)

    @classmethod
    def coerce(cls, options: Union["MessageEdit", Mapping[str, Any]]) -> "MessageEdit":
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


class MessagePayload(BaseModel):
    """Body of a new message: plain text, an embed, or both."""

    model_config = ConfigDict(extra="allow")

    content: Optional[str] = Field(default=None, max_length=MESSAGE_CONTENT_LIMIT)
    embed: Optional[Dict[str, Any]] = None
    tts: bool = False

    @model_validator(mode="after")
    def _not_empty(self) -> "MessagePayload":
        if not self.content and not self.embed:
            raise ValueError("Cannot send an empty message")
        return self

    def fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    @classmethod
    def coerce(cls, message: Union["MessagePayload", Mapping[str, Any], str]) -> "MessagePayload":
        if isinstance(message, cls):
            return message
        if isinstance(message, str):
            return cls(content=message)
        return cls.model_validate(dict(message))
