# topmark:header:start
#
#   project      : RenderKit
#   file         : policy.py
#   file_relpath : src/renderkit/pipeline/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Return policy governing how far the renderer scan goes."""

from __future__ import annotations

from enum import Enum

from renderkit.core.enum_mixins import enum_from_name, enum_from_value
from renderkit.core.errors import ArgumentError


class ReturnPolicy(str, Enum):
    """Scan policy for [`TriggerManager.execute`][renderkit.pipeline.triggers.TriggerManager.execute].

    Attributes:
        FIRST: Stop at (and return) the first non-empty result.
        LAST: Scan every renderer; later non-empty results override earlier ones.
    """

    FIRST = "first"
    LAST = "last"

    @classmethod
    def parse(cls, value: ReturnPolicy | str) -> ReturnPolicy:
        """Return the policy for ``value`` (member, value or name, case-insensitive).

        Raises:
            ArgumentError: If ``value`` does not name a policy.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = enum_from_value(cls, value, case_insensitive=True) or enum_from_name(
                cls, value.strip(), case_insensitive=True
            )
            if member is not None:
                return member
        choices = ", ".join(repr(p.value) for p in cls)
        raise ArgumentError(f"Invalid return policy {value!r}; expected one of {choices}")
