"""Marker syntax for translation keys embedded in display text.

A string of the form ``{$key$}`` stands for "translate ``key``" instead of
literal text. The key is the verbatim text between the delimiters; there are
no escapes, so a key cannot contain ``$}``.
"""

from typing import Any, Tuple


class MarkerCodec:
    """Detects, strips and rebuilds ``{$key$}`` markers."""

    OPEN = "{$"
    CLOSE = "$}"

    @classmethod
    def try_decode(cls, text: Any) -> Tuple[bool, Any]:
        """Extract the key from a marker.

        Args:
            text: Candidate display text.

        Returns:
            ``(True, key)`` when ``text`` is a marker with a non-empty key,
            ``(False, text)`` otherwise.
        """
        if (
            isinstance(text, str)
            and len(text) > len(cls.OPEN) + len(cls.CLOSE)
            and text.startswith(cls.OPEN)
            and text.endswith(cls.CLOSE)
        ):
            return True, text[len(cls.OPEN) : -len(cls.CLOSE)]
        return False, text

    @classmethod
    def is_marker(cls, text: Any) -> bool:
        return cls.try_decode(text)[0]

    @classmethod
    def encode(cls, key: str) -> str:
        """Wrap a key in marker delimiters."""
        return f"{cls.OPEN}{key}{cls.CLOSE}"
