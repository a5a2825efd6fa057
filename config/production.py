import os

DOCUMENTS_DIR = os.getenv("FLEXITIME_DIR", os.path.expanduser("~/worklog"))
DOCUMENT_EXT = os.getenv("FLEXITIME_EXT", ".org")

WORKDAY_RULES = [
    ("2024-04-01", "9999-12-31", 6.0),
    ("1970-01-01", "2024-04-01", 7.5),
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False
