"""Success body shared by handlers. Errors go through utils.error_handling."""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Generic API response."""

    message: str
    status: str = "ok"
    data: Optional[Dict[str, Any]] = None
    correlation_id: Optional[str] = None
