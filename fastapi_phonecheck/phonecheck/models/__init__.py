from .base import Base
from . import domain

__all__ = [
    "Base",
    "domain",
]
