"""
Admin session model
"""

from datetime import datetime

from .base import StoredRecord

class SessionRecord(StoredRecord):
    created_at: datetime
    expires_at: datetime
