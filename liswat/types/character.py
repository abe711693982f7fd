from __future__ import annotations


NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
}


class Character:
    """A single character value, kept distinct from one-letter strings."""

    __slots__ = ("code",)

    def __init__(self, char: str | int):
        self.code: int = ord(char) if isinstance(char, str) else char

    @property
    def char(self) -> str:
        return chr(self.code)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Character) and self.code == other.code

    def __hash__(self) -> int:
        return hash(("char", self.code))

    def __repr__(self) -> str:
        return f"Character({self.char!r})"

    def __str__(self) -> str:
        for name, ch in NAMED_CHARS.items():
            if ch == self.char:
                return f"#\\{name}"
        return f"#\\{self.char}"
