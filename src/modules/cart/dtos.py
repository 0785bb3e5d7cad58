"""Cart DTOs for the Service Layer.

- ``AddToCartDTO``: input for reserving stock into the cart.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator


class AddToCartDTO(BaseModel):
    """Immutable DTO for add-to-cart requests.

    Both fields must be JSON integers; numeric strings and booleans are
    rejected rather than coerced.
    """

    model_config = ConfigDict(frozen=True)

    phone_id: StrictInt
    quantity: StrictInt

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v
