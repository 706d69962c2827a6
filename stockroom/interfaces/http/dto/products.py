from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from stockroom.domain import Product, ProductDraft
from stockroom.infrastructure.db.models import INTEGER_MAX

_CENTS = Decimal("0.01")
_NOT_NULLABLE = ("product_name", "quantity", "price")


def _blank_description(value: Any) -> Any:
    return "" if value is None else value


class ProductSpecDTO(BaseModel):
    """Full set of writable fields, used by create and full replace."""

    model_config = ConfigDict(str_strip_whitespace=True)

    product_name: str = Field(min_length=1, max_length=255)
    description: str = ""
    quantity: int = Field(ge=0, le=INTEGER_MAX, strict=True)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    @field_validator("description", mode="before")
    @classmethod
    def _description_default(cls, value: Any) -> Any:
        return _blank_description(value)

    def to_draft(self) -> ProductDraft:
        return ProductDraft(
            product_name=self.product_name,
            description=self.description,
            quantity=self.quantity,
            price=self.price.quantize(_CENTS),
        )


class ProductRecordDTO(ProductSpecDTO):
    product_id: int


class ProductPatchDTO(BaseModel):
    """Any subset of the writable fields. Unknown keys, product_id included, are dropped."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    product_name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    quantity: int | None = Field(None, ge=0, le=INTEGER_MAX, strict=True)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)

    @model_validator(mode="after")
    def _reject_nulls(self) -> "ProductPatchDTO":
        for name in _NOT_NULLABLE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        if "description" in data:
            data["description"] = _blank_description(data["description"])
        if "price" in data:
            data["price"] = data["price"].quantize(_CENTS)
        return data


class BulkDeleteDTO(BaseModel):
    ids: list[Annotated[int, Field(ge=1, le=INTEGER_MAX)]] = Field(min_length=1)


class ProductDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: int
    product_name: str
    description: str
    quantity: int
    price: Decimal
    currentstamp: datetime

    @classmethod
    def dump(cls, product: Product) -> dict:
        return cls.model_validate(product).model_dump(mode="json")


PRODUCT_SPEC_LIST = TypeAdapter(list[ProductSpecDTO])
