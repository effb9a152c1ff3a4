# ==============================================================================
# INTEGRATIONS PACKAGE INITIALIZATION
# ==============================================================================

"""
External Collaborators
======================

- blob_storage: Upload of thumbnails and profile pictures
- email_notification: Contact message delivery
"""

from online_course.integrations.blob_storage import BlobStorageService, LocalBlobStorage
from online_course.integrations.email_notification import (
    EmailNotification,
    LoggingEmailNotification,
    SMTPEmailNotification,
)

__all__ = [
    "BlobStorageService",
    "LocalBlobStorage",
    "EmailNotification",
    "LoggingEmailNotification",
    "SMTPEmailNotification",
]
