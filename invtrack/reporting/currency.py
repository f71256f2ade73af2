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

from decimal import ROUND_HALF_UP, Decimal, localcontext


def format_currency(amount: Decimal, symbol: str = "$", places: int = 2) -> str:
    """
    Format a decimal amount for display, e.g. Decimal("1234.5") -> "$1,234.50".

    Rounds half-up to `places` digits. Negative amounts keep the sign in
    front of the symbol. Precision is widened to fit the amount, so large
    values are shown in full instead of overflowing the default context.
    """
    amount = Decimal(amount)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{symbol}{abs(rounded):,.{places}f}"
