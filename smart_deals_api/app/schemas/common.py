"""
Write acknowledgements returned by the store.

The field aliases follow the camel‑case names API clients already
consume (``insertedId``, ``modifiedCount`` and so on), while the Python
attribute names stay snake_case.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InsertAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: str = Field(..., alias="insertedId")


class UpdateAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    matched_count: int = Field(0, alias="matchedCount")
    modified_count: int = Field(0, alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")


class DeleteAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(0, alias="deletedCount")
