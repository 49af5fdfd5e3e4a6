# topmark:header:start
#
#   project      : RenderKit
#   file         : exit_codes.py
#   file_relpath : src/renderkit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the RenderKit CLI.

RenderKit follows the BSD `sysexits` convention for error categories. The one
deliberate divergence is ``NO_MATCH = 2``, returned by ``renderkit render``
when no renderer produced a result. Click's own usage errors also exit with 2,
so tests must check ``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the RenderKit CLI.

    Attributes:
        SUCCESS: Successful execution, output was produced.
        FAILURE: Generic failure (e.g. a renderer or the content was rejected).
        NO_MATCH: No renderer produced a result for the given content.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        INPUT_ERROR: Unreadable input. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Missing, invalid or malformed configuration.
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    NO_MATCH = 2

    USAGE_ERROR = 64  # EX_USAGE
    INPUT_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
