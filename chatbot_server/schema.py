"""Pydantic models for request and response validation."""
from pydantic import BaseModel, StrictStr, field_validator


class ChatRequest(BaseModel):
    # StrictStr so that numbers, booleans and null are rejected instead of coerced
    message: StrictStr

    @field_validator("message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must contain non-whitespace characters")
        # the untrimmed text is kept, it is echoed back verbatim
        return value


class ChatReply(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
