from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel as PydanticBaseModel
from pydantic import (
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticSerializationError

from healthinfo.core.config import get_settings
from healthinfo.core.exceptions import DecodeError, SerializationError
from healthinfo.core.logging import get_logger

logger = get_logger(__name__)


class OmitRule:
    """Marks a field for omission from encoded output.

    Stored as the field's ``json_schema_extra`` callable, which leaves the
    generated JSON schema unchanged.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __call__(self, schema: dict[str, Any]) -> None:
        return None

    def __repr__(self) -> str:
        return f"OmitRule({self.name!r})"


OMIT_EMPTY = OmitRule("empty")
OMIT_NIL = OmitRule("nil")

_M = TypeVar("_M", bound="BaseModel")


def omitempty(*args: Any, **kwargs: Any) -> Any:
    """``Field`` that is left out of encoded output while its value is empty."""
    return Field(*args, json_schema_extra=OMIT_EMPTY, **kwargs)


def omitnil(*args: Any, **kwargs: Any) -> Any:
    """``Field`` that is left out of encoded output only while it is ``None``.

    Used for opaque JSON values and nullable records, where a present zero
    value is still meaningful.
    """
    return Field(*args, json_schema_extra=OMIT_NIL, **kwargs)


def is_empty(value: Any) -> bool:
    """Zero-value test used by :func:`omitempty` fields.

    Nested records and timestamps are never empty.
    """
    if value is None:
        return True
    if isinstance(value, (PydanticBaseModel, datetime)):
        return False
    if isinstance(value, (str, bytes, int, float, list, tuple, dict, set, frozenset)):
        return not value
    return False


class BaseModel(PydanticBaseModel):
    """Project-wide base model for immutable health records.

    Field names are snake_case; the wire key of each field is its alias.
    Fields declared through :func:`omitempty` disappear from the output when
    empty, :func:`omitnil` fields only when ``None``. Everything else is
    always written.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        allow_inf_nan=False,
        protected_namespaces=(),
    )

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    @model_serializer(mode="wrap")
    def drop_empty_fields(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            rule = field.json_schema_extra
            if not isinstance(rule, OmitRule):
                continue
            value = getattr(self, name)
            if value is not None and (rule.name == OMIT_NIL.name or not is_empty(value)):
                continue
            key = field.alias if info.by_alias and field.alias else name
            data.pop(key, None)
        return data

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible mapping keyed by wire names."""
        return json.loads(self.to_string())

    def to_string(self) -> str:
        """Compact JSON encoding."""
        try:
            return self.model_dump_json(by_alias=True)
        except PydanticSerializationError as exc:
            logger.exception("Failed to encode %s", type(self).__name__)
            raise SerializationError(f"Cannot encode {type(self).__name__}: {exc}") from exc

    def to_json(self, prefix: Optional[str] = None, indent: Optional[int] = None) -> str:
        """Indented JSON encoding for display.

        Every line after the first starts with *prefix*; nesting levels are
        *indent* spaces wide. Both default to the configured settings.
        """
        settings = get_settings()
        if prefix is None:
            prefix = settings.json_prefix
        if indent is None:
            indent = settings.json_indent

        text = json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
        return text.replace("\n", "\n" + prefix)

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def null_as_zero(cls, data: Any) -> Any:
        # JSON null for a non-nullable field decodes to the field's zero value.
        if not isinstance(data, dict):
            return data
        nulls = {key for key, value in data.items() if value is None}
        if not nulls:
            return data

        zeroable: set[str] = set()
        for name, field in cls.model_fields.items():
            if field.default is None:
                continue
            zeroable.add(name)
            if field.alias:
                zeroable.add(field.alias)
        return {k: v for k, v in data.items() if k not in nulls or k not in zeroable}

    @classmethod
    def from_json(cls: type[_M], data: str | bytes) -> _M:
        """Decode a JSON document into this record type."""
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            logger.debug("Rejected %s payload: %s", cls.__name__, exc)
            raise DecodeError(f"Invalid {cls.__name__} payload: {exc}") from exc

    @classmethod
    def from_dict(cls: type[_M], data: Mapping[str, Any]) -> _M:
        """Build the record from an already parsed JSON mapping."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            logger.debug("Rejected %s payload: %s", cls.__name__, exc)
            raise DecodeError(f"Invalid {cls.__name__} payload: {exc}") from exc


class NodeCommon(BaseModel):
    """Header shared by per-node records: the node address and the reason
    collection failed on it, if it did."""

    addr: str = ""
    error: str = omitempty("")

    @property
    def failed(self) -> bool:
        return bool(self.error)
