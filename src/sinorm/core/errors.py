from __future__ import annotations


class UnitParseError(ValueError):
    """Raised when a quantity expression cannot be parsed.

    ``text`` is the input as given by the caller. ``consumed`` is the longest
    prefix of the whitespace-stripped input the grammar matched before giving up.
    """

    def __init__(self, text: str, consumed: str) -> None:
        self.text = text
        self.consumed = consumed
        super().__init__(
            f"Unable to parse after '{consumed}' in '{text}'. "
            "Are you sure metric units are being used?"
        )


__all__ = ["UnitParseError"]
