"""
Deterministic bucket name assembly.

Names have the shape ``prefix-account-team-moniker[-suffix]``. When the assembled
string exceeds 63 characters the middle components are shortened (longest first,
ties to the rightmost), never the prefix or the suffix, so identical inputs always
produce identical names.
"""

import hashlib

from lcp_lib.naming.models import SanitizedComponents
from lcp_lib.naming.validator import DEFAULT_PREFIX, HASH_SUFFIX_LENGTH, MAX_NAME_LENGTH


def hash_suffix(sanitized: SanitizedComponents, region: str | None) -> str:
    """Return the first 8 hex chars of SHA-256 over ``account:team:moniker:region``."""
    payload = ":".join([sanitized.account, sanitized.team, sanitized.moniker, region or ""])
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:HASH_SUFFIX_LENGTH]


def _fit_components(parts: list[str], budget: int) -> list[str]:
    parts = list(parts)
    while sum(len(p) for p in parts) > budget:
        longest = max(len(p) for p in parts)
        if longest <= 1:
            break
        # rightmost of the longest components
        index = max(i for i, p in enumerate(parts) if len(p) == longest)
        parts[index] = parts[index][:-1]
    return [p.rstrip("-") or p for p in parts]


def assemble(
    prefix: str,
    parts: list[str],
    suffix: str | None = None,
    max_length: int = MAX_NAME_LENGTH,
) -> str:
    """
    Join prefix, components and optional suffix with hyphens within ``max_length``.

    Only the components are truncated; prefix and suffix are always kept whole.
    """
    fixed = len(prefix) + len(parts)
    if suffix:
        fixed += len(suffix) + 1
    budget = max(max_length - fixed, len(parts))

    pieces = [prefix, *_fit_components(parts, budget)]
    if suffix:
        pieces.append(suffix)
    return "-".join(pieces)


def build_base_name(
    sanitized: SanitizedComponents,
    prefix: str = DEFAULT_PREFIX,
    suffix: str | None = None,
) -> str:
    """Assemble ``prefix-account-team-moniker`` with an optional custom suffix."""
    return assemble(prefix, sanitized.as_list(), suffix)


def build_hashed_name(
    sanitized: SanitizedComponents,
    region: str | None,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """
    Build the content-addressed name for a request.

    The same ``(sanitized, region, prefix)`` always yields the same string, across
    processes and time.

    Example:
    -------
        >>> components = SanitizedComponents(account="prod", team="data", moniker="config")
        >>> name = build_hashed_name(components, "us-west-2")
        >>> name.startswith("lcp-prod-data-config-"), len(name.rsplit("-", 1)[1])
        (True, 8)

    """
    return assemble(prefix, sanitized.as_list(), hash_suffix(sanitized, region))
