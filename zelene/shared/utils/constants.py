"""
Application Constants

Values shared across services that are not environment configuration.
"""

# ═══════════════════════════════════════════════════════════════════════════════
# OBJECT STORAGE
# ═══════════════════════════════════════════════════════════════════════════════

# MIME type → top-level folder for uploaded attachments
STORAGE_FOLDERS: dict[str, str] = {
    "image/jpeg": "images",
    "image/png": "images",
    "image/gif": "images",
    "image/webp": "images",
    "application/pdf": "pdfs",
    "text/plain": "texts",
    "text/csv": "texts",
    "application/json": "applications",
    "application/xml": "applications",
    "application/msword": "documents",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "documents",
}

DEFAULT_STORAGE_FOLDER = "others"

# Extension used when the uploaded filename has none
UNKNOWN_EXTENSION = "unknown"

# ═══════════════════════════════════════════════════════════════════════════════
# LISTINGS
# ═══════════════════════════════════════════════════════════════════════════════

TAG_SEARCH_LIMIT = 5

MIN_STATS_DAYS = 1
MAX_STATS_DAYS = 30
DEFAULT_STATS_DAYS = 7
