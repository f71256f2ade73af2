from importlib.metadata import PackageNotFoundError, version


def detect_version() -> str:
    """
    Detect invtrack version.

    Falls back to a development placeholder if the package metadata
    is not available (e.g. running from a source checkout).
    """
    try:
        return version("invtrack")
    except PackageNotFoundError:
        return "0.0.0-dev"
