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

import re
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")

INVALID_FORMAT = "invalid_format"
OUT_OF_RANGE = "out_of_range"

# Operator input bounds; also keeps int() under the interpreter str-conversion limit
MAX_INT_DIGITS = 4300
MAX_DECIMAL_MAGNITUDE = 4300

_INT_RE = re.compile(r"[+-]?\d+")
# Plain or exponent notation; no digit-group underscores, no NaN/Infinity
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """
    Outcome of parsing operator input. Malformed text is reported here
    rather than raised, so the shell can print a format message and move on.
    """

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_int(text: str) -> ParseResult[int]:
    normalized = text.strip()
    if not _INT_RE.fullmatch(normalized):
        return ParseResult(error=INVALID_FORMAT)
    if len(normalized.lstrip("+-")) > MAX_INT_DIGITS:
        return ParseResult(error=OUT_OF_RANGE)
    return ParseResult(value=int(normalized))


def parse_decimal(text: str) -> ParseResult[Decimal]:
    """
    Parse a price. Accepts plain ("2.50") and exponent ("1e3") notation;
    rejects underscores, thousands separators and non-finite values.
    """
    normalized = text.strip()
    if not _DECIMAL_RE.fullmatch(normalized):
        return ParseResult(error=INVALID_FORMAT)
    value = Decimal(normalized)
    if value and value.adjusted() > MAX_DECIMAL_MAGNITUDE:
        return ParseResult(error=OUT_OF_RANGE)
    return ParseResult(value=value)


def default_config_file(cwd: str | Path = ".") -> str | None:
    p = Path(cwd)
    for name in ("invtrack.yaml", "invtrack.yml"):
        candidate = p / name
        if candidate.exists():
            return str(candidate)
    return None
