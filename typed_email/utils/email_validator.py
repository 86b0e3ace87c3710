# typed_email/utils/email_validator.py
import logging
import re
from typing import Optional

from ..config_models import (
    LOCAL_PUNCTUATION,
    MAX_DOMAIN_LENGTH,
    MAX_LABEL_LENGTH,
    MAX_LOCAL_LENGTH,
    MAX_TOTAL_LENGTH,
    MIN_TLD_LENGTH,
)

module_logger = logging.getLogger(__name__)

# Matched with fullmatch so a trailing newline is not accepted.
_LOCAL_PART_PATTERN = re.compile(f"[A-Za-z0-9{re.escape(LOCAL_PUNCTUATION)}]+")
_DOMAIN_LABEL_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_LABEL_CHARS_PATTERN = re.compile(r"[A-Za-z0-9-]+")
_TLD_PATTERN = re.compile(r"[A-Za-z]+")


def _local_part_reason(local_part: str) -> Optional[str]:
    if not local_part:
        return "the part before '@' is empty"
    if len(local_part) > MAX_LOCAL_LENGTH:
        return f"the part before '@' is longer than {MAX_LOCAL_LENGTH} characters"
    if not _LOCAL_PART_PATTERN.fullmatch(local_part):
        return (
            "the part before '@' may only contain letters, digits and "
            f"the characters {LOCAL_PUNCTUATION!r}"
        )
    if local_part.startswith(".") or local_part.endswith("."):
        return "the part before '@' cannot start or end with a dot"
    if ".." in local_part:
        return "the part before '@' cannot contain consecutive dots"
    return None


def _domain_reason(domain: str) -> Optional[str]:
    if not domain:
        return "the part after '@' is empty"
    if len(domain) > MAX_DOMAIN_LENGTH:
        return f"the part after '@' is longer than {MAX_DOMAIN_LENGTH} characters"
    if "." not in domain:
        return "the domain must contain at least one dot"

    labels = domain.split(".")
    for label in labels:
        if not label:
            return "the domain contains an empty label"
        if len(label) > MAX_LABEL_LENGTH:
            return f"the domain label {label!r} is longer than {MAX_LABEL_LENGTH} characters"
        if not _LABEL_CHARS_PATTERN.fullmatch(label):
            return f"the domain label {label!r} may only contain letters, digits and hyphens"
        if not _DOMAIN_LABEL_PATTERN.fullmatch(label):
            return f"the domain label {label!r} cannot start or end with a hyphen"

    tld = labels[-1]
    if not _TLD_PATTERN.fullmatch(tld):
        return f"the top-level domain {tld!r} may only contain letters"
    if len(tld) < MIN_TLD_LENGTH:
        return f"the top-level domain {tld!r} must be at least {MIN_TLD_LENGTH} characters"
    return None


def email_rejection_reason(candidate: object) -> Optional[str]:
    """
    Checks a candidate string against the email grammar.

    Returns None when the candidate is structurally valid, otherwise a short
    human readable description of the first rule it breaks. Casing is
    irrelevant to the verdict and the candidate is never modified.
    """
    if not isinstance(candidate, str):
        return "an email address must be a string"
    if any(ch.isspace() or not ch.isprintable() for ch in candidate):
        return "whitespace and control characters are not allowed"
    if len(candidate) > MAX_TOTAL_LENGTH:
        return f"the address is longer than {MAX_TOTAL_LENGTH} characters"

    at_count = candidate.count("@")
    if at_count == 0:
        return "the address must contain an '@'"
    if at_count > 1:
        return "the address must contain exactly one '@'"

    local_part, domain = candidate.split("@")
    return _local_part_reason(local_part) or _domain_reason(domain)


def is_valid_email(candidate: object) -> bool:
    """Returns True if `candidate` is a structurally valid email address. Never raises."""
    reason = email_rejection_reason(candidate)
    if reason is not None:
        module_logger.debug(f"Rejected email candidate {candidate!r}: {reason}")
        return False
    return True
