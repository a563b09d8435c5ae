"""Schemas shared by several resources."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
