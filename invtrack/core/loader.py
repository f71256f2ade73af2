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

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from invtrack.core.config import LOG_LEVELS, AppConfig

MAX_DECIMAL_PLACES = 8


@dataclass(frozen=True, slots=True)
class ConfigLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class DefaultConfigLoader:
    """
    Loads an AppConfig from invtrack.yaml / invtrack.yml / invtrack.json

    Missing keys fall back to AppConfig defaults; an empty file yields the
    defaults unchanged.
    """

    def load(self, path: Path) -> AppConfig:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

        data = self._read_config_file(path)

        if data is None:
            return AppConfig()

        if not isinstance(data, dict):
            raise ConfigLoadError(code="invalid_config", message="Config root must be a mapping/object.")

        known = {f.name for f in fields(AppConfig)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ConfigLoadError(
                code="unknown_key",
                message=f"Unknown config key(s): {', '.join(unknown)}.",
                details={"unknown": unknown, "supported": sorted(known)},
            )

        return AppConfig().with_overrides(
            currency_symbol=self._parse_currency_symbol(data.get("currency_symbol")),
            decimal_places=self._parse_decimal_places(data.get("decimal_places")),
            pause=self._parse_flag("pause", data.get("pause")),
            clear_screen=self._parse_flag("clear_screen", data.get("clear_screen")),
            log_level=self._parse_log_level(data.get("log_level")),
        )

    def _read_config_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        raw = path.read_text(encoding="utf-8")

        try:
            if suffix == ".json":
                return json.loads(raw)

            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(raw)

            # Unknown extension: try JSON then YAML
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigLoadError(
                code="parse_error",
                message=f"Could not parse config file: {path}",
                details={"path": str(path), "error": str(e)},
            ) from e

    def _parse_currency_symbol(self, raw: Any) -> str | None:
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise ConfigLoadError(code="invalid_currency_symbol", message="'currency_symbol' must be a string.")
        return raw

    def _parse_decimal_places(self, raw: Any) -> int | None:
        if raw is None:
            return None
        # bool is an int subclass; reject it explicitly
        if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw <= MAX_DECIMAL_PLACES:
            raise ConfigLoadError(
                code="invalid_decimal_places",
                message=f"'decimal_places' must be an integer between 0 and {MAX_DECIMAL_PLACES}.",
                details={"decimal_places": raw},
            )
        return raw

    def _parse_flag(self, key: str, raw: Any) -> bool | None:
        if raw is None:
            return None
        if not isinstance(raw, bool):
            raise ConfigLoadError(code="invalid_flag", message=f"'{key}' must be true or false.")
        return raw

    def _parse_log_level(self, raw: Any) -> str | None:
        if raw is None:
            return None
        level = str(raw).upper()
        if level not in LOG_LEVELS:
            raise ConfigLoadError(
                code="invalid_log_level",
                message=f"'log_level' must be one of: {', '.join(LOG_LEVELS)}.",
                details={"log_level": raw},
            )
        return level
