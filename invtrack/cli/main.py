import argparse
import logging
import sys
from pathlib import Path

from invtrack._version import detect_version
from invtrack.cli._io import default_config_file
from invtrack.cli.exitcodes import EXIT_CONFIG_ERROR
from invtrack.cli.shell import InventoryShell
from invtrack.core.config import LOG_LEVELS, AppConfig
from invtrack.core.loader import MAX_DECIMAL_PLACES, ConfigLoadError, DefaultConfigLoader
from invtrack.inventory.manager import InventoryManager
from invtrack.reporting.renderers.text import TextInventoryRenderer

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="invtrack", description="Invtrack — interactive in-memory inventory tracker")
    p.add_argument("--version", action="version", version=f"%(prog)s {detect_version()}")
    p.add_argument("--config", default=None, help="Config file (default: ./invtrack.yaml if present).")
    p.add_argument("--currency-symbol", dest="currency_symbol", default=None, help="Currency symbol for display.")
    p.add_argument(
        "--decimal-places", dest="decimal_places", type=int, default=None, help="Digits shown after the point."
    )
    p.add_argument(
        "--no-pause",
        dest="pause",
        action="store_const",
        const=False,
        default=None,
        help="Do not wait for Enter after each action.",
    )
    p.add_argument(
        "--clear-screen",
        dest="clear_screen",
        action="store_const",
        const=True,
        default=None,
        help="Clear the terminal before showing the menu.",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (logs go to stderr).",
    )
    return p


def load_config(args: argparse.Namespace) -> AppConfig:
    config_path = args.config or default_config_file(Path.cwd())
    cfg = DefaultConfigLoader().load(Path(config_path)) if config_path else AppConfig()

    return cfg.with_overrides(
        currency_symbol=args.currency_symbol,
        decimal_places=args.decimal_places,
        pause=args.pause,
        clear_screen=args.clear_screen,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args)
    except ConfigLoadError as e:
        print(f"invtrack: error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if not 0 <= cfg.decimal_places <= MAX_DECIMAL_PLACES:
        print(f"invtrack: error: --decimal-places must be between 0 and {MAX_DECIMAL_PLACES}.", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(level=cfg.log_level, format=LOG_FORMAT, stream=sys.stderr)
    LOGGER.debug("Starting with config: %s", cfg)

    shell = InventoryShell(
        InventoryManager(),
        TextInventoryRenderer(currency_symbol=cfg.currency_symbol, decimal_places=cfg.decimal_places),
        pause=cfg.pause,
        clear_screen=cfg.clear_screen,
    )
    return shell.run()
