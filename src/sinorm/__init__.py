"""
sinorm: normalize SI physical-quantity expressions to fundamental units.

sinorm reduces expressions such as ``'50 kPa'``, ``'50*10^3 kg/(m*s^2)'`` and
``'5.0*10^4 kg*m^-1*s^-2'`` to one canonical form over the fundamental units
(g, m, s, A, K, cd, mol) and the per-units (%, ppm, ppb, ppt, ppq), so that
different spellings of the same quantity can be compared.
This module exposes a minimal, stable public API. The parser and unit table
are imported lazily to avoid import-time work and circular imports.
"""

import logging
from importlib import metadata as _metadata


__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("sinorm")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Library logging stays silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from sinorm.core.errors import UnitParseError
    from sinorm.core.quantity import NormalizedQuantity
    from sinorm.units.normalizer import normalize, parse_quantity

# Lazy access helpers -------------------------------------------------------
_LAZY = {
    "normalize": "sinorm.units.normalizer",
    "parse_quantity": "sinorm.units.normalizer",
    "NormalizedQuantity": "sinorm.core.quantity",
    "UnitParseError": "sinorm.core.errors",
}

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__license__", *_LAZY]


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. The public API is imported from its module on
    first use.
    """
    if name in _LAZY:
        from importlib import import_module

        return getattr(import_module(_LAZY[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY))
