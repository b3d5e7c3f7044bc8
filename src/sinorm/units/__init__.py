from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from sinorm.units.registry import UnitTable
# Lazy access helpers -------------------------------------------------------

def _get_default_table() -> "UnitTable":
    # Import here to avoid import-time side-effects / circular imports.
    from sinorm.units.registry import DEFAULT_TABLE  # local import
    return DEFAULT_TABLE

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'table' returns the package's default
    unit table, built on first use.
    """
    if name == "table":
        return _get_default_table()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["table"])
