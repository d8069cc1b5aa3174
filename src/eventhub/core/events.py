"""Well-known event names and the operation-name convention.

Defined centrally so producers and subscribers reference the same strings.
"""

from __future__ import annotations

from eventhub.errors import InvalidArgumentError

# --- Auth events ----------------------------------------------------------

SIGN_IN = "signIn"
SIGN_OUT = "signOut"
SESSION_EXPIRED = "sessionExpired"

# --- Storage operation events ---------------------------------------------

STORAGE_CATEGORY = "Storage"
STORAGE_DOWNLOAD_FILE = "Storage.downloadFile"
STORAGE_UPLOAD_FILE = "Storage.uploadFile"
STORAGE_GET_URL = "Storage.getURL"


def operation_event_name(category: str, operation: str) -> str:
    """Join a category display name and an operation short name.

    ``operation_event_name("Storage", "downloadFile")`` → ``"Storage.downloadFile"``.
    """
    for label, part in (("category", category), ("operation", operation)):
        if not isinstance(part, str) or not part.strip():
            raise InvalidArgumentError(f"{label} must be a non-empty string")
    return f"{category}.{operation}"
