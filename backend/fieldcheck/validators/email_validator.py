"""Email check: the field must be shaped like an email address.

Syntax only: no DNS lookups, no deliverability checks. Absent and empty
values pass so that emptiness is reported once, by NotBlank.
"""

import re
from typing import Any

from fieldcheck.validators.base import BaseConstraintCheck
from fieldcheck.validators.models import Constraint, ConstraintKind

MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_LENGTH = 255

_ATOM = r"[a-z0-9!#$%&'*+/=?^_`{|}~\u0080-\uFFFF-]+"
_QUOTED = r'"(?:[^"\\\r\n]|\\.)*"'
_WORD = rf"(?:{_ATOM}|{_QUOTED})"
_LABEL = r"[a-z0-9\u0080-\uFFFF](?:[a-z0-9\u0080-\uFFFF-]{0,61}[a-z0-9\u0080-\uFFFF])?"
_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])"

LOCAL_PART_PATTERN = re.compile(rf"{_WORD}(?:\.{_WORD})*", re.IGNORECASE)
DOMAIN_PATTERN = re.compile(
    rf"{_LABEL}(?:\.{_LABEL})*|\[{_OCTET}(?:\.{_OCTET}){{3}}\]",
    re.IGNORECASE,
)


def is_email_shaped(text: str) -> bool:
    """Return True if ``text`` is ``local@domain`` with a well-formed local part and domain."""
    local, at, domain = text.rpartition("@")
    if not at or not local or not domain:
        return False

    if len(local) > MAX_LOCAL_PART_LENGTH or len(domain) > MAX_DOMAIN_LENGTH:
        return False

    return bool(LOCAL_PART_PATTERN.fullmatch(local) and DOMAIN_PATTERN.fullmatch(domain))


class EmailCheck(BaseConstraintCheck):

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.EMAIL

    def is_valid(self, value: Any, constraint: Constraint) -> bool:
        if value is None:
            return True
        text = self._require_text(value)
        if not text:
            return True
        return is_email_shaped(text)
