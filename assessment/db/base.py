"""ORM nexus."""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base mold."""
    pass


def list_models() -> list[str]:
    """List model names."""
    return sorted(
        cls.__name__ for cls in Base.registry._class_registry.values() if hasattr(cls, "__table__")
    )


__all__ = ["Base", "list_models"]
