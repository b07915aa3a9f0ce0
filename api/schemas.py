"""
Pydantic schemas for the Parity API.
"""
from typing import Any

from pydantic import BaseModel


# ============================================================
# COMPARISON SCHEMAS
# ============================================================

class ComparisonRequest(BaseModel):
    """Request to compare two JSON documents."""
    left: Any = None
    right: Any = None
    # Load JSON objects as key/value containers instead of plain records
    ordered_maps: bool = False


class ComparisonResponse(BaseModel):
    equal: bool
    left_classification: str
    right_classification: str


# ============================================================
# SHAPE SCHEMAS
# ============================================================

class ShapeRequest(BaseModel):
    value: Any = None
    ordered_maps: bool = False


class KeysResponse(BaseModel):
    keys: list[Any]


class ClassificationResponse(BaseModel):
    classification: str
