"""JSON shapes returned by the service routes."""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ready"


class TranscriptionResponse(BaseModel):
    data: str


class ErrorResponse(BaseModel):
    error: str
