"""The single error type raised throughout the package."""

from __future__ import annotations


class SheepError(Exception):
    """An error whose message is ready to show to the user.

    ``kind`` names where the failure came from, such as ``"io"`` or
    ``"git url parse"``, and is folded into the message.
    """

    def __init__(self, message: object, *, kind: str | None = None) -> None:
        text = f"{kind} error: {message}" if kind else str(message)
        self.message = f"😱 {text}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SheepError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)