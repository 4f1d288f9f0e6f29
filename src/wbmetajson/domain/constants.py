from __future__ import annotations

"""
Domain Constants.

Centralizes the literal markers, file naming conventions and filtering
rules shared by the tree builder, the document generator and the icon
materializer.
"""

import re
from typing import Tuple

# -----------------------------------------------------------------------------
# ENVIRONMENTS
# -----------------------------------------------------------------------------
ENV_PRODUCTION = "production"
ENV_DEVELOPMENT = "development"
ALLOWED_ENVIRONMENTS: Tuple[str, ...] = (ENV_DEVELOPMENT, ENV_PRODUCTION)
DEFAULT_ENVIRONMENT = ENV_PRODUCTION

# -----------------------------------------------------------------------------
# IN-CONTENT MARKERS
# -----------------------------------------------------------------------------
IGNORE_MARKER = "@ignore"
DESCRIPTION_MARKER = "@description"

# Two-character escape sequences left behind by the development minifier
ESCAPED_LINE_FEED = "\\n"
ESCAPED_CARRIAGE_RETURN = "\\r"

# -----------------------------------------------------------------------------
# OUTPUT LAYOUT
# -----------------------------------------------------------------------------
META_FILE_NAME = "meta.json"
ICONS_OUTPUT_DIR = "icons"
DEFAULT_DIST_DIR = "dist"

# -----------------------------------------------------------------------------
# FILTERING
# -----------------------------------------------------------------------------
# Artifacts that never become script records (images and json payloads)
NON_SCRIPT_FILE_RX = re.compile(r"\.(gif|svg|jpe?g|png|PNG|json)$")

# Icon references that are served remotely and must not be materialized
REMOTE_URL_RX = re.compile(r"(http(s?))://", re.IGNORECASE)

JSON_SUBSTRING = ".json"

SCRIPT_TYPE_ACTION = "action"
SCRIPT_TYPE_FOLDER = "folder"
