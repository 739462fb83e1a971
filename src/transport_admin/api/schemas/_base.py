"""Shared base for backend DTOs.

The backend speaks camelCase and routinely adds fields; every model accepts
either spelling and keeps unknown keys.
"""
from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BackendModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


def ref_from_id(value: Any) -> Any:
    """Turn a bare id string into a ref payload; pass objects through."""
    if isinstance(value, str):
        return {"_id": value}
    return value


def optional_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
