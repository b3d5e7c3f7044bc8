# sinorm.core.exponents

from __future__ import annotations
from typing import Any, Iterable, Iterator, Mapping, Tuple, TypeAlias, Union

# Canonical key order. "10" carries the accumulated power of ten, the rest are
# the fundamental units (gram instead of kilogram) and the dimensionless per-units.
UNIT_KEYS: Tuple[str, ...] = (
    "10", "g", "m", "s", "A", "K", "cd", "mol", "%", "ppm", "ppb", "ppt", "ppq",
)
BASE_KEYS: Tuple[str, ...] = ("g", "m", "s", "A", "K", "cd", "mol")
PER_UNIT_KEYS: Tuple[str, ...] = ("%", "ppm", "ppb", "ppt", "ppq")

_INDEX = {key: i for i, key in enumerate(UNIT_KEYS)}

ExponentsLike: TypeAlias = Union["Exponents", Mapping[str, int], Iterable[int]]


class Exponents(tuple):
    """
    Immutable vector of integer exponents over ``UNIT_KEYS``.

    Tuple subclass => hashable, comparable, and never shared mutably between
    parse results. Every operator returns a fresh instance.
    """

    __slots__ = ()

    def __new__(cls, data: ExponentsLike = ()) -> "Exponents":
        if isinstance(data, Exponents):
            return tuple.__new__(cls, data)
        if isinstance(data, Mapping):
            return cls.of(data)

        t = tuple(_as_int(x) for x in data)
        if not t:
            t = (0,) * len(UNIT_KEYS)
        if len(t) != len(UNIT_KEYS):
            raise ValueError(f"Exponents must have length {len(UNIT_KEYS)} ({', '.join(UNIT_KEYS)}).")
        return tuple.__new__(cls, t)

    @classmethod
    def of(cls, mapping: Mapping[str, int] | None = None, **kwargs: int) -> "Exponents":
        """Build from a sparse ``{key: exponent}`` mapping; missing keys are 0."""
        values = [0] * len(UNIT_KEYS)
        items = dict(mapping or {})
        items.update(kwargs)
        for key, exp in items.items():
            key = str(key)
            if key not in _INDEX:
                raise ValueError(f"Unknown exponent key: {key!r}")
            values[_INDEX[key]] += _as_int(exp)
        return tuple.__new__(cls, values)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: ExponentsLike) -> "Exponents":  # type: ignore[override]
        o = Exponents(other)
        return Exponents(x + y for x, y in zip(self, o, strict=True))

    def __truediv__(self, other: ExponentsLike) -> "Exponents":
        o = Exponents(other)
        return Exponents(x - y for x, y in zip(self, o, strict=True))

    def __pow__(self, n: int, modulo: Any | None = None) -> "Exponents":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Exponents.")
        # bool is an int subclass but never a sensible exponent
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        return Exponents(e * n for e in self)

    def __neg__(self) -> "Exponents":
        return Exponents(-e for e in self)

    def __rmul__(self, other: Any) -> "Exponents":
        """Prevent (int * Exponents) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "Exponents":
        """Block tuple concatenation."""
        return NotImplemented

    def __radd__(self, other: Any) -> "Exponents":
        return NotImplemented

    # --- Helpers ---
    def get(self, key: str, default: int = 0) -> int:
        i = _INDEX.get(key)
        return default if i is None else tuple.__getitem__(self, i)

    @property
    def power_of_ten(self) -> int:
        return self.get("10")

    def with_power_of_ten(self, n: int) -> "Exponents":
        values = list(self)
        values[_INDEX["10"]] = _as_int(n)
        return Exponents(values)

    def shift_power_of_ten(self, n: int) -> "Exponents":
        return self * Exponents.of({"10": n})

    def unit_items(self) -> Iterator[Tuple[str, int]]:
        """Non-zero unit exponents (``10`` excluded) in canonical order."""
        for key, exp in zip(UNIT_KEYS, self, strict=True):
            if key != "10" and exp != 0:
                yield key, exp

    def as_dict(self) -> dict[str, int]:
        return {key: exp for key, exp in zip(UNIT_KEYS, self, strict=True) if exp != 0}

    @property
    def is_dimensionless(self) -> bool:
        return next(self.unit_items(), None) is None

    def __repr__(self) -> str:
        parts = "".join(f"[{key}^{exp}]" for key, exp in self.as_dict().items())
        return f"Exponents({parts})"


def _as_int(x: Any) -> int:
    if isinstance(x, bool):
        raise TypeError("Exponents must be integers, got bool")
    if isinstance(x, int):
        return x
    if isinstance(x, float) and x.is_integer():
        return int(x)
    raise ValueError(f"Exponents must be integers, got {x!r}")


EMPTY: Exponents = Exponents()
