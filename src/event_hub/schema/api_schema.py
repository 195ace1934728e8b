"""
@file_name: api_schema.py
@author: NetMind.AI
@date: 2025-11-28
@description: API response schemas shared by all routes

Error body shape:
    {"error": {"code": "...", "message": "...", "details": [{"field": "...", "message": "..."}]}}
"""

from typing import List, Optional

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """A single field-level error"""
    field: str
    message: str


class ErrorBody(BaseModel):
    """Error payload"""
    code: str
    message: str
    details: Optional[List[ErrorDetail]] = None


class ErrorResponse(BaseModel):
    """Uniform error response returned by every exception handler"""
    error: ErrorBody


class HealthResponse(BaseModel):
    """Response model for the health check"""
    status: str
    timestamp: str
    uptime: float
