# app/domain/schemas.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict
from datetime import datetime


class ProductIn(BaseModel):
    """Body dla POST/PUT /products.

    Wszystkie pola opcjonalne - wymagalnosc zalezy od backendu i sprawdzana
    jest w serwisie, zeby zwrocic ten sam komunikat co API w node.
    """

    id: str | None = None
    name: str | None = None
    price: float | None = None
    user_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("userId", "user_id"),
        serialization_alias="userId",
    )

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class ProductOut(BaseModel):
    """Produkt z bazy relacyjnej (response)."""

    id: int
    name: str
    price: float
    user_id: str = Field(
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
    )
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = ConfigDict(from_attributes=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class SeedResult(BaseModel):
    inserted: int
    user_id: str = Field(serialization_alias="userId")


class UserIn(BaseModel):
    """Schema dla users-service (dev mock)."""

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=200)

    model_config = ConfigDict(coerce_numbers_to_str=True)


class UserOut(BaseModel):
    id: str
    name: str
    email: str
