"""
Pydantic schemas for payment notes.

Request bodies are deliberately loose: the service layer owns
the validation rules (trimming, amount flooring, direction
values) so that the same rules apply no matter how a note
arrives. Responses use the camelCase keys clients send.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from paynote.models.enums import Direction


# --- Request Schemas ---

class TransactionWrite(BaseModel):
    """Body of POST /transactions and PUT /transactions/{id}."""
    person_name: Any = Field(default=None, alias="personName")
    amount: Any = None
    purpose: Any = None
    direction: Any = Field(default=None, alias="type")

    model_config = ConfigDict(populate_by_name=True)


# --- Response Schemas ---

class TransactionResponse(BaseModel):
    id: uuid.UUID = Field(validation_alias=AliasChoices("external_id", "id"))
    person_name: str
    amount: int
    purpose: str
    direction: Direction = Field(alias="type")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    message: str
