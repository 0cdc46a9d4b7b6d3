"""Service layer package."""

__all__ = [
    "user_service",
]
