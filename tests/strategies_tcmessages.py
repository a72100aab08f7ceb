# topmark:header:start
#
#   project      : tcmessages
#   file         : strategies_tcmessages.py
#   file_relpath : tests/strategies_tcmessages.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for service message names, keys and values.

Values deliberately over-sample the characters the escaper rewrites, so
property tests hit ``|``, quotes, brackets and line breaks often.
"""

from __future__ import annotations

from typing import Final, Literal

from hypothesis import strategies as st

from tcmessages.protocol.formatter import IDENTIFIER_RE

SPECIAL_CHARACTERS: Final[str] = "'\n\r|[]"

EXCLUDED_CATEGORIES: Final[tuple[Literal["Cs"], ...]] = ("Cs",)


def s_identifier() -> st.SearchStrategy[str]:
    """Valid message names and parameter keys."""
    return st.from_regex(IDENTIFIER_RE, fullmatch=True)


def s_invalid_identifier() -> st.SearchStrategy[str]:
    """Strings that are *not* identifiers."""
    return st.text(max_size=12).filter(lambda s: IDENTIFIER_RE.fullmatch(s) is None)


def s_value() -> st.SearchStrategy[str]:
    """Parameter values mixing plain text, specials and unicode."""
    special: st.SearchStrategy[str] = st.sampled_from(SPECIAL_CHARACTERS)
    plain: st.SearchStrategy[str] = st.characters(
        exclude_categories=EXCLUDED_CATEGORIES,
        exclude_characters=SPECIAL_CHARACTERS + "\\",
    )
    return st.lists(st.one_of(special, plain), max_size=30).map("".join)


def s_plain_value() -> st.SearchStrategy[str]:
    """Values without any character the escaper would touch."""
    return st.text(
        alphabet=st.characters(
            exclude_categories=EXCLUDED_CATEGORIES,
            exclude_characters=SPECIAL_CHARACTERS + "\\",
        ),
        max_size=30,
    )


def s_keyed_parameters() -> st.SearchStrategy[list[tuple[str, str]]]:
    """Ordered ``(key, value)`` lists with unique keys."""
    return st.lists(
        st.tuples(s_identifier(), s_value()),
        max_size=6,
        unique_by=lambda kv: kv[0],
    )
