"""
Suite member model
"""

from typing import Optional

from .base import StoredRecord

class Member(StoredRecord):
    id: int
    name: str
    one_liner: str
    avatar_url: Optional[str] = None
