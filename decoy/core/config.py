"""
Configuration for the Decoy admin.

Values are read once from the environment at import time. Each one can be
overridden by exporting the variable of the same name before the app starts.
"""

import os
from typing import List


# ======================
# Admin
# ======================

# URL directory the admin lives under, ex: /admin/articles
DECOY_DIR = os.getenv("DECOY_DIR", "admin").strip("/")

# Dotted path to the class implementing decoy.core.auth.AuthInterface
DECOY_AUTH_CLASS = os.getenv("DECOY_AUTH_CLASS", "decoy.core.auth.DefaultAuth")

# Modules that define admin controllers; imported during boot so they register
DECOY_CONTROLLER_MODULES: List[str] = [
    module.strip()
    for module in os.getenv("DECOY_CONTROLLER_MODULES", "").split(",")
    if module.strip()
]

# CORS allowed origins
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")


# ======================
# Uploads
# ======================

# Prefixes of form fields that flag an existing upload for removal or replacement
UPLOAD_DELETE = os.getenv("UPLOAD_DELETE", "delete-")
UPLOAD_OLD = os.getenv("UPLOAD_OLD", "old-")
UPLOAD_REPLACE = os.getenv("UPLOAD_REPLACE", "replace-")


# ======================
# Formatting (strftime)
# ======================

FORMAT_DATE = os.getenv("FORMAT_DATE", "%m/%d/%y")
FORMAT_DATETIME = os.getenv("FORMAT_DATETIME", "%m/%d/%y %I:%M %p %Z")
FORMAT_TIME = os.getenv("FORMAT_TIME", "%I:%M %p %Z")
