# topmark:header:start
#
#   project      : RenderKit
#   file         : constants.py
#   file_relpath : src/renderkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    RENDERKIT_VERSION: str = get_version("renderkit")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    RENDERKIT_VERSION = "0.0.0"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "RENDERKIT_LOG_LEVEL"

# Configuration file names:
CONFIG_FILE_NAME: str = "renderkit.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Name of the zero-argument method the delegate renderer looks for on content:
SELF_RENDER_METHOD: str = "render"

# Separator between a key and its value in key-value dumps:
KEY_VALUE_SEPARATOR: str = ":\t"

# Style tag applied to padding cells in tables:
TABLE_MISSING_CLASS: str = "missing"

# Placeholder for unset values in CLI listings:
VALUE_NOT_SET: str = "<not set>"
