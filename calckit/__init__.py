"""Financial and health calculators.

Each calculator is a pure function taking a flat input record from
``calckit.models`` and returning a flat result record.  Stock lookups go
through ``core.integrations``."""

from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version("calckit")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    # Keep in sync with the version declared in ``pyproject.toml``
    __version__ = "0.1.0"
