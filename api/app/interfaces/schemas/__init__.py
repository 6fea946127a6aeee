from .base import Response

__all__ = ["Response"]
