"""
Ziplan Common Schemas
The JSON envelope shared by every API response
"""

from typing import Optional
from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Uniform response envelope"""
    success: bool
    message: Optional[str] = None
    recipe: Optional[str] = None
    token: Optional[str] = None

    @classmethod
    def ok(cls, **fields) -> "ApiResponse":
        return cls(success=True, **fields)

    @classmethod
    def error(cls, message: str) -> "ApiResponse":
        return cls(success=False, message=message)

    def to_content(self) -> dict:
        """Envelope as a plain dict with unset fields dropped"""
        return self.model_dump(exclude_none=True)
