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

from dataclasses import dataclass, fields, replace
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class AppConfig:
    currency_symbol: str = "$"
    decimal_places: int = 2
    pause: bool = True  # wait for Enter after each menu action
    clear_screen: bool = False
    log_level: str = "WARNING"

    def with_overrides(self, **overrides: Any) -> "AppConfig":
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if v is not None and k in known}
        return replace(self, **changes) if changes else self
