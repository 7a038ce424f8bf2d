"""Local configuration for heading_outline."""

from __future__ import annotations

import os


DEFAULT_MIN_LEVEL = 1
DEFAULT_MAX_LEVEL = 6
DEFAULT_LOG_LEVEL = "WARNING"

# Level range applied by extract_outline and the CLI when no bounds are given.
HEADING_OUTLINE_MIN_LEVEL = int(os.getenv("HEADING_OUTLINE_MIN_LEVEL", str(DEFAULT_MIN_LEVEL)))
HEADING_OUTLINE_MAX_LEVEL = int(os.getenv("HEADING_OUTLINE_MAX_LEVEL", str(DEFAULT_MAX_LEVEL)))
HEADING_OUTLINE_LOG_LEVEL = os.getenv("HEADING_OUTLINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
