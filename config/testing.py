import os
import tempfile

DOCUMENTS_DIR = os.getenv("FLEXITIME_DIR", os.path.join(tempfile.gettempdir(), "flexitime-test"))
DOCUMENT_EXT = ".org"

WORKDAY_RULES = [
    ("2024-04-01", "9999-12-31", 6.0),
    ("1970-01-01", "2024-04-01", 7.5),
]

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True
