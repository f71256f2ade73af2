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

from decimal import Decimal

from invtrack.model.types import InventoryListing, Product
from invtrack.reporting.currency import format_currency

EMPTY_MESSAGE = "Inventory is empty."

# Column widths for the listing table
ID_WIDTH = 6
NAME_WIDTH = 24
QTY_WIDTH = 10
MONEY_WIDTH = 14


class TextInventoryRenderer:
    """
    Human-readable CLI output. Pure rendering: does not sort or mutate.

    The listing is expected to arrive already ordered (InventoryManager sorts
    by id). Names wider than the name column are cut for display only.
    """

    def __init__(self, currency_symbol: str = "$", decimal_places: int = 2):
        self.currency_symbol = currency_symbol
        self.decimal_places = decimal_places

    def money(self, amount: Decimal) -> str:
        return format_currency(amount, symbol=self.currency_symbol, places=self.decimal_places)

    def render_listing(self, listing: InventoryListing) -> str:
        if listing.is_empty:
            return f"{EMPTY_MESSAGE}\n"

        header = (
            f"{'ID':<{ID_WIDTH}}{'Name':<{NAME_WIDTH}}{'Quantity':>{QTY_WIDTH}}"
            f"{'Price':>{MONEY_WIDTH}}{'Total Value':>{MONEY_WIDTH}}"
        )
        rule = "-" * len(header)

        lines = ["", "Current Inventory:", rule, header, rule]
        lines.extend(self._render_row(p) for p in listing)
        return "\n".join(lines) + "\n"

    def render_total(self, value: Decimal) -> str:
        return f"Total Inventory Value: {self.money(value)}\n"

    def _render_row(self, product: Product) -> str:
        name = _fit(product.name, NAME_WIDTH - 1)
        return (
            f"{product.product_id:<{ID_WIDTH}}{name:<{NAME_WIDTH}}{product.quantity:>{QTY_WIDTH}}"
            f"{self.money(product.unit_price):>{MONEY_WIDTH}}{self.money(product.total_value):>{MONEY_WIDTH}}"
        )


def _fit(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"
