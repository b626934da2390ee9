"""
Admin authentication schemas
"""

from pydantic import BaseModel

class LoginRequest(BaseModel):
    password: str = ""
