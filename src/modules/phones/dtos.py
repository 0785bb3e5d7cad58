"""Phone DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``) and ignore keys
they do not declare, so a request body can never add or overwrite
fields such as ``id``.

- ``CreatePhoneDTO``: input for catalog insertion.
- ``UpdatePhoneDTO``: explicit per-field input for partial updates.
- ``PhoneFilterDTO``: optional list filters.

Creation keeps the catalog's historical rule that a falsy value counts as
missing: an empty name or brand, a zero price and a zero stock are all
rejected.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictInt,
    StrictStr,
    field_validator,
)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


def _json_number(v: Any) -> Any:
    """Let only numbers through to ``Decimal``; quoted prices and booleans are rejected."""
    if v is None:
        return v
    if isinstance(v, bool) or not isinstance(v, (int, float, Decimal)):
        raise ValueError("Price must be a number.")
    return v


# JSON numbers only; everything else is refused before Decimal coercion.
Price = Annotated[Decimal, BeforeValidator(_json_number)]


class CreatePhoneDTO(BaseModel):
    """Immutable DTO for phone creation requests.

    Validates:
    - ``name`` and ``brand`` are non-empty strings.
    - ``price`` is a number (not a string or boolean) greater than zero.
    - ``stock`` is a strict integer greater than zero.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    brand: StrictStr
    price: Price
    stock: StrictInt

    @field_validator("name", "brand")
    @classmethod
    def text_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Field must not be empty.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Stock must be greater than zero.")
        return v


class UpdatePhoneDTO(BaseModel):
    """Immutable DTO for phone update requests.

    All fields are optional; only supplied (non-null) fields will be
    updated.  Zero is a valid new ``price``/``stock`` as long as some other
    field carries a truthy value (see ``has_changes``).
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[StrictStr] = None
    brand: Optional[StrictStr] = None
    price: Optional[Price] = None
    stock: Optional[StrictInt] = None

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal | None) -> Decimal | None:
        if v is not None and (not v.is_finite() or v < 0):
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_be_non_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("Stock cannot be negative.")
        return v

    def has_changes(self) -> bool:
        """True when at least one field holds a truthy value."""
        return any((self.name, self.brand, self.price, self.stock))

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class PhoneFilterDTO(BaseModel):
    """Conjunctive catalog filters; ``None`` means unconstrained."""

    model_config = ConfigDict(frozen=True)

    brand: Optional[str] = None
    max_price: Optional[Decimal] = None

    @field_validator("max_price")
    @classmethod
    def max_price_must_be_a_number(cls, v: Decimal | None) -> Decimal | None:
        if v is not None and v.is_nan():
            raise ValueError("Price bound must be a number.")
        return v

    def matches(self, phone) -> bool:
        if self.brand is not None and phone.brand != self.brand:
            return False
        if self.max_price is not None and phone.price > self.max_price:
            return False
        return True
