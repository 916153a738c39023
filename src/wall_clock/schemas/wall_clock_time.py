"""Pydantic field type for wall-clock times.

Wall-clock times serialize as their ``HH:MM:SS`` text, never as separate
numeric fields, so payloads stay human-readable.

Example:
    from pydantic import BaseModel
    from wall_clock.schemas import WallClockTimeField

    class ShiftOut(BaseModel):
        starts_at: WallClockTimeField

    ShiftOut(starts_at="09:30:00").model_dump_json()  # '{"starts_at":"09:30:00"}'
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from wall_clock.core.interfaces import TextSerializable
from wall_clock.core.wall_clock_time import WallClockTime

TEXT_PATTERN = r"^[0-9]{2}:[0-9]{2}:[0-9]{2}$"


def _serialize(value: TextSerializable) -> str:
    return value.serialize_as_text()


class _WallClockTimeAnnotation:
    """Teaches pydantic to validate and serialize :class:`WallClockTime`."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        from_text = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(WallClockTime.deserialize_from_text),
            ]
        )
        from_native = core_schema.chain_schema(
            [
                core_schema.is_instance_schema(dt.time),
                core_schema.no_info_plain_validator_function(WallClockTime.from_native_time_repr),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(WallClockTime), from_text, from_native]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema(pattern=TEXT_PATTERN)) | {
            "format": "time"
        }


WallClockTimeField = Annotated[WallClockTime, _WallClockTimeAnnotation]
"""A :class:`WallClockTime` that pydantic reads from and writes as ``HH:MM:SS``."""
