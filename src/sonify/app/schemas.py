from typing import Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    query: Optional[str] = None


class ChatResponse(BaseModel):
    bot_message: str = Field(serialization_alias="botMessage")
    playlist: list[str]


class ErrorResponse(BaseModel):
    bot_message: str = Field(serialization_alias="botMessage")
    error: str
