"""Shared lightweight schemas."""

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """Standard response envelope used for plain text messages.

    Instances are frozen: the text is fixed at construction and any later
    assignment raises a validation error.
    """

    model_config = ConfigDict(frozen=True)

    message: str
