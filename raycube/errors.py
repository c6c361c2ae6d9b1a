"""Error reporting for scene loading and game start-up."""

from __future__ import annotations

_PREFIX = "cub3D: Error"


def format_error(detail: object | None, message: str | None) -> str:
    """Build an error line: the prefix, then the detail and message if given."""
    parts = [_PREFIX]
    if detail is not None:
        parts.append(str(detail))
    if message is not None:
        parts.append(message)
    return ": ".join(parts)


class Cub3DError(Exception):
    """A fatal problem with the scene or the game set-up."""

    def __init__(self, message: str, detail: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        return format_error(self.detail, self.message)