"""Error response model."""
from datetime import datetime, timezone
from typing import List
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response containing details about validation or server errors."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Error message")
    errors: List[str] = Field(default_factory=list, description="Error details")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
