"""Entity package: Special."""

from .entity import Special
from .repository import SpecialRepository
from .table import SpecialTable

__all__ = ["Special", "SpecialRepository", "SpecialTable"]
