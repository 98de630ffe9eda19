"""Category entity.

Categories are owned by the persistence store. Products reference a
category but never own or modify it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Category:
    """A product category. ``id`` is None until the repository assigns one."""

    id: int | None
    name: str
