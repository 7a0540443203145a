"""Version of the installed `pulse-forms` distribution."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
	__version__: str = version("pulse-forms")
except PackageNotFoundError:
	# Imported from a checkout that was never installed
	__version__ = "0.0.0"
