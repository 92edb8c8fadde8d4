"""
Runtime configuration for the viewership dashboard.

Every setting can be overridden with an environment variable so the same
build can point at a staging or local backend:

    VIEWERSHIP_BACKEND_URL       base URL of the prediction service
    VIEWERSHIP_REQUEST_TIMEOUT   seconds before an HTTP call is abandoned
    VIEWERSHIP_LOG_LEVEL         root logging level for the Streamlit app
"""

import os

DEFAULT_BACKEND_URL = "https://henderson-viewership-backend.onrender.com"

BACKEND_URL     = os.environ.get("VIEWERSHIP_BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")
REQUEST_TIMEOUT = float(os.environ.get("VIEWERSHIP_REQUEST_TIMEOUT", "30"))
LOG_LEVEL       = os.environ.get("VIEWERSHIP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT      = "%(asctime)s %(levelname)s %(name)s: %(message)s"
