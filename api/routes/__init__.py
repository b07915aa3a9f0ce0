"""
API routes package for Parity.
"""
from api.routes import comparison, shapes

__all__ = ["comparison", "shapes"]
