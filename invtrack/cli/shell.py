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
Interactive text menu driving an InventoryManager.

The shell owns no product state: it asks, parses, calls the manager and
prints the result. Streams are injected so the loop can be driven from tests.
"""

import logging
import sys
from typing import TextIO

from invtrack.cli._io import parse_decimal, parse_int
from invtrack.cli.exitcodes import EXIT_OK
from invtrack.inventory.manager import InventoryManager
from invtrack.model.types import Outcome, RejectReason
from invtrack.reporting.renderers.text import TextInventoryRenderer

LOGGER = logging.getLogger(__name__)

BANNER = "Retail Store Inventory Management System"
CLEAR_SCREEN = "\033[2J\033[H"

MENU = (
    "\nMain Menu\n"
    "1. Add Product\n"
    "2. Remove Product\n"
    "3. Update Product Quantity\n"
    "4. List All Products\n"
    "5. Show Total Inventory Value\n"
    "6. Exit\n"
)

ADD_FAILED = {
    RejectReason.INVALID_IDENTIFIER: "Failed to add product. Product ID must be positive and not already in use.",
    RejectReason.NEGATIVE_VALUE: "Failed to add product. Quantity and price must be non-negative.",
}
REMOVE_FAILED = {
    RejectReason.NOT_FOUND: "Product not found or invalid ID.",
}
UPDATE_FAILED = {
    RejectReason.NEGATIVE_VALUE: "Invalid quantity. Quantity must be non-negative.",
    RejectReason.NOT_FOUND: "Product not found.",
}


class _EndOfInput(Exception):
    """Raised internally when stdin is exhausted."""


class InventoryShell:
    def __init__(
        self,
        manager: InventoryManager,
        renderer: TextInventoryRenderer,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        pause: bool = True,
        clear_screen: bool = False,
    ) -> None:
        self.manager = manager
        self.renderer = renderer
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.pause = pause
        self.clear_screen = clear_screen

    def run(self) -> int:
        self._print(BANNER)
        self._print("-" * len(BANNER))

        actions = {
            "1": self.add_product,
            "2": self.remove_product,
            "3": self.update_quantity,
            "4": self.list_products,
            "5": self.show_total,
        }

        try:
            while True:
                self._show_menu()
                choice = self._ask("Enter your choice (1-6): ").strip()

                if choice == "6":
                    self._print("Exiting the system...")
                    return EXIT_OK

                action = actions.get(choice)
                if action is None:
                    self._print("Invalid choice. Please try again.")
                else:
                    action()

                if self.pause:
                    self._ask("\nPress Enter to continue...")
        except _EndOfInput:
            LOGGER.debug("Input exhausted, leaving shell.")
            self._print("")
            return EXIT_OK

    # Menu actions

    def add_product(self) -> None:
        self._section("Add New Product")

        product_id = parse_int(self._ask("Enter Product ID (positive integer): "))
        if not product_id.ok:
            self._print("Invalid input format. Please enter numbers where required.")
            return

        name = self._ask("Enter Product Name: ")

        quantity = parse_int(self._ask("Enter Quantity in Stock (non-negative integer): "))
        if not quantity.ok:
            self._print("Invalid input format. Please enter numbers where required.")
            return

        price = parse_decimal(self._ask("Enter Price (non-negative number): "))
        if not price.ok:
            self._print("Invalid input format. Please enter numbers where required.")
            return

        outcome = self.manager.add(product_id.value, name, quantity.value, price.value)
        self._report(outcome, "Product added successfully!", ADD_FAILED)

    def remove_product(self) -> None:
        self._section("Remove Product")

        product_id = parse_int(self._ask("Enter Product ID to remove: "))
        if not product_id.ok:
            self._print("Invalid input. Please enter a valid product ID.")
            return

        outcome = self.manager.remove(product_id.value)
        self._report(outcome, "Product removed successfully!", REMOVE_FAILED)

    def update_quantity(self) -> None:
        self._section("Update Product Quantity")

        product_id = parse_int(self._ask("Enter Product ID to update: "))
        if not product_id.ok:
            self._print("Invalid input. Please enter valid numbers.")
            return

        quantity = parse_int(self._ask("Enter New Quantity (non-negative integer): "))
        if not quantity.ok:
            self._print("Invalid input. Please enter valid numbers.")
            return

        outcome = self.manager.update_quantity(product_id.value, quantity.value)
        self._report(outcome, "Product quantity updated successfully!", UPDATE_FAILED)

    def list_products(self) -> None:
        self._out.write(self.renderer.render_listing(self.manager.list_products()))

    def show_total(self) -> None:
        self._out.write("\n" + self.renderer.render_total(self.manager.total_inventory_value()))

    # I/O helpers

    def _report(self, outcome: Outcome, success: str, failures: dict[RejectReason, str]) -> None:
        if outcome:
            self._print(success)
        else:
            self._print(failures.get(outcome.reason, "Operation rejected."))

    def _show_menu(self) -> None:
        if self.clear_screen:
            self._out.write(CLEAR_SCREEN)
        self._out.write(MENU)

    def _section(self, title: str) -> None:
        self._print(f"\n{title}")
        self._print("-" * len(title))

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise _EndOfInput()
        return line.rstrip("\r\n")

    def _print(self, text: str) -> None:
        self._out.write(text + "\n")
