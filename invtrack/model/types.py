# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Invtrack Contributors
#
# This file is part of Invtrack.
#
# Invtrack is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Invtrack is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from collections.abc import Iterator
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

# Product record


@dataclass(frozen=True, slots=True)
class Product:
    """
    A single inventory line item.

    Pure data holder. Validation is the manager's job, so a Product may be
    constructed with any values; only the manager decides whether it is
    allowed into the inventory.
    """

    product_id: int
    name: str
    quantity: int
    unit_price: Decimal

    @property
    def total_value(self) -> Decimal:
        """quantity x unit_price, computed on demand."""
        return self.quantity * self.unit_price

    def with_quantity(self, quantity: int) -> "Product":
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.product_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total_value": self.total_value,
        }


# Mutation outcomes


class RejectReason(StrEnum):
    """
    Why the manager refused a mutation.

      INVALID_IDENTIFIER → id non-positive or already in use (add only)
      NEGATIVE_VALUE     → quantity or price below zero
      NOT_FOUND          → referenced id absent (remove, update)
    """

    INVALID_IDENTIFIER = auto()
    NEGATIVE_VALUE = auto()
    NOT_FOUND = auto()


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Result of a manager mutation. Truthy on success.
    """

    ok: bool
    reason: RejectReason | None = None

    def __bool__(self) -> bool:
        return self.ok

    @staticmethod
    def success() -> "Outcome":
        return Outcome(ok=True)

    @staticmethod
    def rejected(reason: RejectReason) -> "Outcome":
        return Outcome(ok=False, reason=reason)


# Listing snapshot


@dataclass(frozen=True, slots=True)
class InventoryListing:
    """
    Read-only snapshot of the inventory, ordered by ascending product id.

    `is_empty` is the explicit signal callers use to render a dedicated
    "empty" message instead of an empty table.
    """

    products: tuple[Product, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.products

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(p.product_id for p in self.products)

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def to_dict(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self.products]
