# echome/schemas/memory.py

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Literal, Optional


class MessageRequestSchema(BaseModel):
    """Body of POST /api/message. `type` is accepted as a legacy alias of `kind`."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: str = Field(..., min_length=1, validation_alias=AliasChoices('userId', 'user_id'))
    message: str = Field(..., min_length=1)
    kind: Literal['chat', 'memory'] = Field(..., validation_alias=AliasChoices('kind', 'type'))
    session_id: Optional[str] = Field(None, validation_alias=AliasChoices('sessionId', 'session_id'))

    @field_validator('session_id', mode='before')
    @classmethod
    def blank_session_is_none(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value


class MemoryCreateSchema(BaseModel):
    """Body of the authenticated POST /memories. `text` is accepted for `message`."""
    message: str = Field(..., min_length=1, validation_alias=AliasChoices('message', 'text'))
    ai_response: str = Field('', validation_alias=AliasChoices('aiResponse', 'ai_response'))

    @field_validator('ai_response', mode='before')
    @classmethod
    def none_response_is_empty(cls, value):
        return '' if value is None else value
