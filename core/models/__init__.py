"""Models module - Pydantic data models"""

from .endpoint import Endpoint

__all__ = ["Endpoint"]
