# topmark:header:start
#
#   project      : tcmessages
#   file         : enum_mixins.py
#   file_relpath : src/tcmessages/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Generic Enum utilities for tcmessages (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``:
        ``str``-valued Enum whose ``.value`` is the stable wire token, with a
        human ``.label`` and optional parsing ``.aliases``.
    - ``KeyedStrEnum.parse(raw)``:
        Lenient lookup by value, name or alias. Returns ``None`` on miss.
    - ``KeyedStrEnum.coerce(raw)``:
        Strict lookup used by the logger: accepts a member or its token and
        raises `InvalidArgumentError` on anything else.

Example:
    ```python
    class Level(KeyedStrEnum):
        LOW = ("low", "Low priority", ("l",))
        HIGH = ("high", "High priority")

    assert Level.parse("L") is Level.LOW
    assert Level.coerce("high") is Level.HIGH
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from tcmessages.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string for lenient matching."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable wire token; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable wire token (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable wire token (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `_norm_token()`.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None

    @classmethod
    def coerce(cls: type[_KS], raw: _KS | str) -> _KS:
        """Return the member for ``raw``, which is a member or its exact wire token.

        Raises:
            InvalidArgumentError: If ``raw`` is not a member of this enum.
        """
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            choices: str = ", ".join(m.value for m in cls)
            raise InvalidArgumentError(
                f"Invalid {cls.__name__} {raw!r}; expected one of: {choices}"
            ) from None
