"""
Comparison routes for Parity.

Provides structural comparison of two JSON documents.
"""
from collections import OrderedDict
from typing import Any

from fastapi import APIRouter

from api.schemas import ComparisonRequest, ComparisonResponse
from parity import classify, deep_equal

router = APIRouter()


def load_value(value: Any, ordered_maps: bool = False) -> Any:
    """
    Turn a decoded JSON value into the shape Parity should compare.

    JSON objects decode to plain records. With `ordered_maps` they become
    OrderedDicts instead, which classify as key/value containers.
    """
    if not ordered_maps:
        return value
    if isinstance(value, dict):
        return OrderedDict((key, load_value(item, True)) for key, item in value.items())
    if isinstance(value, list):
        return [load_value(item, True) for item in value]
    return value


@router.post("", response_model=ComparisonResponse)
def compare_values(request: ComparisonRequest):
    """
    Compare two JSON documents for structural equality.
    """
    left = load_value(request.left, request.ordered_maps)
    right = load_value(request.right, request.ordered_maps)

    return ComparisonResponse(
        equal=deep_equal(left, right),
        left_classification=classify(left).value,
        right_classification=classify(right).value
    )
