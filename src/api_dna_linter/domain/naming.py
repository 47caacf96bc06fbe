"""Naming convention classification for string tokens."""

from enum import Enum
from typing import ClassVar

_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_ALLOWED = _LOWER | _UPPER | _DIGITS | {"_", "-"}


class NamingStyle(Enum):
    """Casing conventions. Values are the conventional spelling of each style."""

    SNAKE_CASE = "snake_case"
    SCREAMING_SNAKE_CASE = "SCREAMING_SNAKE_CASE"
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    KEBAB_CASE = "kebab-case"
    SCREAMING_KEBAB_CASE = "SCREAMING-KEBAB-CASE"
    LOWERCASE = "lowercase"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_convention_name(cls, value: str) -> "NamingStyle | None":
        """
        Return the style a rename-all value names, e.g. "camelCase" -> CAMEL_CASE.

        "UPPERCASE" is accepted as a spelling of SCREAMING_SNAKE_CASE. Unknown
        names (and "unrecognized" itself) give None.
        """
        if value == "UPPERCASE":
            return cls.SCREAMING_SNAKE_CASE
        for style in cls:
            if style is not cls.UNRECOGNIZED and style.value == value:
                return style
        return None


class NamingClassifier:
    """Pure classification of tokens into NamingStyle. ASCII only."""

    SEPARATORS: ClassVar[tuple[str, str]] = ("_", "-")

    @staticmethod
    def classify(token: str) -> NamingStyle:
        """Classify the casing style of token. Never raises."""
        if not token or any(ch not in _ALLOWED for ch in token):
            return NamingStyle.UNRECOGNIZED

        has_underscore = "_" in token
        has_hyphen = "-" in token
        if has_underscore and has_hyphen:
            return NamingStyle.UNRECOGNIZED

        has_upper = any(ch in _UPPER for ch in token)
        has_lower = any(ch in _LOWER for ch in token)

        if has_upper and not has_lower:
            if has_hyphen:
                return NamingStyle.SCREAMING_KEBAB_CASE
            return NamingStyle.SCREAMING_SNAKE_CASE

        if not has_upper:
            if has_hyphen:
                return NamingStyle.KEBAB_CASE
            return NamingStyle.SNAKE_CASE

        # Mixed case from here on.
        if has_underscore or has_hyphen:
            return NamingStyle.UNRECOGNIZED
        first = token[0]
        if first in _LOWER:
            return NamingStyle.CAMEL_CASE
        if first in _UPPER:
            return NamingStyle.PASCAL_CASE
        return NamingStyle.UNRECOGNIZED

    @staticmethod
    def is_snake_case(token: str) -> bool:
        """True when token is snake_case; agrees with classify()."""
        if " " in token:
            return False
        return NamingClassifier.classify(token) is NamingStyle.SNAKE_CASE
