"""DTOs used across the test-suite, in the shapes callers actually validate."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel


@dataclass
class Address:
    street: str | None
    city: str | None = None


@dataclass
class User:
    name: str | None
    age: int | None = None
    address: Address | None = None
    tags: list[str] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass
class TreeNode:
    label: str
    children: list[TreeNode] = field(default_factory=list)


class Order(BaseModel):
    order_id: str
    quantity: int
    items: list[str] = []
