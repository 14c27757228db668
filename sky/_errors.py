from __future__ import annotations

class ArityError(TypeError):
    """Function was given (or built with) the wrong number of arguments."""

    expected: int
    received: int

    def __init__(self, expected: int, received: int, *, where: str = "") -> None:
        self.expected = expected
        self.received = received
        prefix = f"{where}: " if where else ""
        super().__init__(f"{prefix}expected {expected} argument(s), got {received}")

__all__ = ("ArityError",)
