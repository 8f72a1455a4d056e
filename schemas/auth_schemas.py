"""
Ziplan Authentication Schemas
Pydantic models for authentication requests

Fields are optional at the schema level so that presence is reported with
the service's own messages rather than a generic schema error.
"""

from typing import Optional
from pydantic import BaseModel


class Credentials(BaseModel):
    """Schema for signup and login"""
    email: Optional[str] = None
    password: Optional[str] = None


class EmailUpdate(BaseModel):
    """Schema for email change"""
    email: Optional[str] = None


class PasswordUpdate(BaseModel):
    """Schema for password change"""
    password: Optional[str] = None
