"""
Bucket name grammar validation.

Two entry points:
- validate_components: length/charset pre-check on raw request components
- validate_name: full grammar check on an assembled candidate name

Neither function raises or mutates its input; both return a ValidationOutcome.
"""

import re

from lcp_lib.config.schemas import ComponentLimits
from lcp_lib.naming.models import ValidationOutcome

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 63

DEFAULT_PREFIX = "lcp"
HASH_SUFFIX_LENGTH = 8
# separator + hash suffix
HASH_SUFFIX_BUDGET = HASH_SUFFIX_LENGTH + 1

RESERVED_PREFIXES = ("s3", "sthree", "xn--")
RESERVED_SUFFIXES = ("-s3alias", "--ol-s3", "--x-s3", ".mrap")
FORBIDDEN_SEQUENCES = ("--", ".-", "-.", "..")

_ALLOWED_CHARS = re.compile(r"^[a-z0-9.-]+$")
_IPV4_SHAPE = re.compile(r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$")
_ALNUM = re.compile(r"[A-Za-z0-9]")


def validate_components(
    account: str,
    team: str,
    moniker: str,
    limits: ComponentLimits | None = None,
    *,
    prefix: str = DEFAULT_PREFIX,
    suffix_length: int = HASH_SUFFIX_BUDGET,
) -> ValidationOutcome:
    """
    Pre-check raw request components.

    Args:
    ----
        account: Raw account component
        team: Raw team component
        moniker: Raw moniker component
        limits: Per-component maximum lengths (defaults: 20/20/15)
        prefix: Fixed name prefix counted in the assembled length
        suffix_length: Suffix budget (separator included) counted in the assembled length

    Returns:
    -------
        ValidationOutcome with one error per violated rule

    """
    limits = limits or ComponentLimits()
    outcome = ValidationOutcome()
    components = {"account": account, "team": team, "moniker": moniker}

    for name, value in components.items():
        max_length = getattr(limits, name)
        if not value:
            outcome.errors.append(f"{name} must not be empty")
            continue
        if not _ALNUM.search(value):
            outcome.errors.append(f"{name} must contain at least one ASCII letter or digit")
        if len(value) > max_length:
            outcome.errors.append(f"{name} length {len(value)} exceeds maximum of {max_length}")

    assembled = len(prefix) + len(components) + sum(len(v) for v in components.values()) + suffix_length
    if assembled > MAX_NAME_LENGTH:
        outcome.errors.append(
            f"assembled name length {assembled} (prefix, separators and suffix included) "
            f"exceeds maximum of {MAX_NAME_LENGTH}"
        )

    return outcome


def validate_name(name: str) -> ValidationOutcome:
    """
    Check an assembled bucket name against every grammar rule.

    Dots are accepted by the grammar but discouraged, so they only produce a warning
    (dot placement rules still produce errors).
    """
    outcome = ValidationOutcome()
    errors = outcome.errors

    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        errors.append(f"length {len(name)} is outside [{MIN_NAME_LENGTH}, {MAX_NAME_LENGTH}]")

    if not name:
        return outcome

    if not _ALLOWED_CHARS.match(name):
        errors.append("only lowercase letters, digits, hyphens and dots are allowed")

    if not name[0].isalnum() or not name[-1].isalnum():
        errors.append("must start and end with a letter or digit")

    for sequence in FORBIDDEN_SEQUENCES:
        if sequence in name:
            errors.append(f"must not contain '{sequence}'")

    for reserved in RESERVED_PREFIXES:
        if name.startswith(reserved):
            errors.append(f"must not start with reserved prefix '{reserved}'")

    for reserved in RESERVED_SUFFIXES:
        if name.endswith(reserved):
            errors.append(f"must not end with reserved suffix '{reserved}'")

    if _IPV4_SHAPE.match(name):
        errors.append("must not be formatted as an IP address")

    if "." in name:
        outcome.warnings.append("dots are discouraged in bucket names")

    return outcome
