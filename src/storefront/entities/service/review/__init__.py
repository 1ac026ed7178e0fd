"""Entity package: Review."""

from .detail import ReviewDetail
from .entity import Review
from .repository import ReviewRepository
from .table import ReviewTable

__all__ = ["Review", "ReviewDetail", "ReviewRepository", "ReviewTable"]
