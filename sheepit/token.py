"""Splitting a pattern around a token and trimming text by that split."""

from __future__ import annotations

from dataclasses import dataclass

VERSION = "{version}"


@dataclass(frozen=True)
class TokenTrimmer:
    """The text found before and after a token in a pattern."""

    before_token: str
    after_token: str

    def trim_text(self, text: str) -> str:
        """Remove the pattern's prefix and suffix from ``text`` where present."""
        return text.removeprefix(self.before_token).removesuffix(self.after_token)


def token_trimmer(text: str, token: str) -> TokenTrimmer | None:
    """Split ``text`` around the first ``token``.

    Returns None when the token is empty, absent, or is the whole text.
    """
    if not token or text == token:
        return None
    before, found, after = text.partition(token)
    if not found:
        return None
    return TokenTrimmer(before_token=before, after_token=after)