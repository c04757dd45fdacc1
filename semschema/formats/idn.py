"""Internationalized e-mail and hostname formats (draft 2019-09+).

Both checks are structural only so that Unicode labels are accepted.
"""

from __future__ import annotations

MAX_HOSTNAME_LENGTH = 253
MAX_LABEL_LENGTH = 63


def validate_idn_email_format(value: str) -> bool:
    parts = value.split("@")
    if len(parts) != 2:
        return False
    local_part, domain = parts
    if not local_part or not domain:
        return False
    return not (domain.startswith(".") or domain.endswith("."))


def validate_idn_hostname_format(value: str) -> bool:
    if not value or len(value) > MAX_HOSTNAME_LENGTH:
        return False
    if value[0] in ".-" or value[-1] in ".-":
        return False
    for label in value.split("."):
        if not label or len(label) > MAX_LABEL_LENGTH:
            return False
        if label.startswith("-") or label.endswith("-"):
            return False
    return True
