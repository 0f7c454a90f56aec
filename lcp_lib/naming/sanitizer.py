"""
Component sanitizer.

Turns arbitrary input text into a component that only uses the bucket-name alphabet
(lowercase ASCII letters, digits and single hyphens). Sanitizing is pure and
idempotent: sanitize(sanitize(x)) == sanitize(x).
"""

import re
from typing import NamedTuple

from lcp_lib.naming.models import SanitizedComponents

FALLBACK_TOKEN = "default"

_INVALID_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-{2,}")


class ComponentRule(NamedTuple):
    """Length bounds and padding token for one component."""

    min_length: int
    max_length: int
    padding: str


COMPONENT_RULES: dict[str, ComponentRule] = {
    "account": ComponentRule(min_length=3, max_length=30, padding="acct"),
    "team": ComponentRule(min_length=2, max_length=30, padding="team"),
    "moniker": ComponentRule(min_length=2, max_length=30, padding="cfg"),
}


def _clean(value: str) -> str:
    value = _INVALID_CHARS.sub("-", value.lower())
    return _HYPHEN_RUNS.sub("-", value).strip("-")


def sanitize(
    value: str,
    *,
    min_length: int = 1,
    max_length: int = 63,
    padding: str = FALLBACK_TOKEN,
) -> str:
    """
    Sanitize a single name component.

    Args:
    ----
        value: Raw component text (any Unicode)
        min_length: Pad with ``-{padding}`` until at least this long
        max_length: Truncate to at most this many characters
        padding: Token appended when the value is too short

    Returns:
    -------
        Grammar-safe component, never empty

    Raises:
    ------
        ValueError: If the bounds leave no room for a padded value (a padded value can
            lose one trailing hyphen on truncation, so min_length must stay below max_length)

    Example:
    -------
        >>> sanitize("Data.Engineering")
        'data-engineering'
        >>> sanitize("***")
        'default'

    """
    if max_length < 1:
        raise ValueError("max_length must be >= 1")
    if min_length > 1 and min_length >= max_length:
        raise ValueError(f"min_length ({min_length}) must be less than max_length ({max_length})")

    result = _clean(value) or FALLBACK_TOKEN

    pad = _clean(padding) or FALLBACK_TOKEN
    while len(result) < min_length:
        result = f"{result}-{pad}"

    if len(result) > max_length:
        result = result[:max_length].rstrip("-")

    return result


def sanitize_component(name: str, value: str) -> str:
    """Sanitize ``value`` using the rule registered for component ``name``."""
    rule = COMPONENT_RULES[name]
    return sanitize(value, min_length=rule.min_length, max_length=rule.max_length, padding=rule.padding)


def sanitize_components(account: str, team: str, moniker: str) -> SanitizedComponents:
    """Sanitize all three components of a request."""
    return SanitizedComponents(
        account=sanitize_component("account", account),
        team=sanitize_component("team", team),
        moniker=sanitize_component("moniker", moniker),
    )
