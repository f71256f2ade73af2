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

"""
In-memory inventory manager.

The manager is the sole owner of product state. Records are stored in an
insertion-ordered dict keyed by product id; updates replace the stored record
instead of mutating it, so a Product handed out by `get` or `list_products`
never changes under the caller.

Business-rule violations are reported through `Outcome`, never raised.
"""

import logging
from collections.abc import Iterator
from decimal import Decimal

from invtrack.model.types import InventoryListing, Outcome, Product, RejectReason

LOGGER = logging.getLogger(__name__)


class InventoryManager:
    def __init__(self) -> None:
        self._products: dict[int, Product] = {}

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        """Products in first-seen order; iterates over a copy."""
        return iter(tuple(self._products.values()))

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def get(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    # Mutations

    def add(self, product_id: int, name: str, quantity: int, unit_price: Decimal) -> Outcome:
        return self.add_product(Product(product_id=product_id, name=name, quantity=quantity, unit_price=unit_price))

    def add_product(self, product: Product) -> Outcome:
        """
        Insert a new product.

        Rejected with:
          - INVALID_IDENTIFIER if the id is <= 0 or already stored
          - NEGATIVE_VALUE if unit_price or quantity is below zero
        """
        if product.product_id <= 0 or product.product_id in self._products:
            return self._reject("add", product.product_id, RejectReason.INVALID_IDENTIFIER)

        if product.unit_price < 0 or product.quantity < 0:
            return self._reject("add", product.product_id, RejectReason.NEGATIVE_VALUE)

        self._products[product.product_id] = product
        LOGGER.info("Added product %s (%r)", product.product_id, product.name)
        return Outcome.success()

    def remove(self, product_id: int) -> Outcome:
        if product_id not in self._products:
            return self._reject("remove", product_id, RejectReason.NOT_FOUND)

        del self._products[product_id]
        LOGGER.info("Removed product %s", product_id)
        return Outcome.success()

    def update_quantity(self, product_id: int, new_quantity: int) -> Outcome:
        if new_quantity < 0:
            return self._reject("update", product_id, RejectReason.NEGATIVE_VALUE)

        current = self._products.get(product_id)
        if current is None:
            return self._reject("update", product_id, RejectReason.NOT_FOUND)

        self._products[product_id] = current.with_quantity(new_quantity)
        LOGGER.info("Updated product %s quantity: %s -> %s", product_id, current.quantity, new_quantity)
        return Outcome.success()

    # Queries

    def list_products(self) -> InventoryListing:
        return InventoryListing(products=tuple(sorted(self._products.values(), key=lambda p: p.product_id)))

    def total_inventory_value(self) -> Decimal:
        return sum((p.total_value for p in self._products.values()), Decimal("0"))

    def _reject(self, op: str, product_id: int, reason: RejectReason) -> Outcome:
        LOGGER.debug("Rejected %s for product %s: %s", op, product_id, reason)
        return Outcome.rejected(reason)
