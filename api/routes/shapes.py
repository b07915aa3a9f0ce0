"""
Shape routes for Parity.

Exposes value classification and map-shape key normalization.
"""
from fastapi import APIRouter

from api.routes.comparison import load_value
from api.schemas import ShapeRequest, KeysResponse, ClassificationResponse
from parity import classify, get_map_like_keys

router = APIRouter()


@router.post("/keys", response_model=KeysResponse)
def map_keys(request: ShapeRequest):
    """
    Canonical key list of a record, a list of key/value pairs or a map.

    UnsupportedShape is turned into a 400 by the application's
    ParityError handler.
    """
    value = load_value(request.value, request.ordered_maps)
    return KeysResponse(keys=get_map_like_keys(value))


@router.post("/classify", response_model=ClassificationResponse)
def classify_value(request: ShapeRequest):
    value = load_value(request.value, request.ordered_maps)
    return ClassificationResponse(classification=classify(value).value)
