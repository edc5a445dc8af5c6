from decimal import Decimal, ROUND_HALF_UP

from pydantic import BaseModel, ConfigDict, field_validator

TWO_PLACES = Decimal("0.01")


class ProductInput(BaseModel):
    """Body of POST /product and PUT /product/{id}. Any id in the body is ignored."""

    name: str
    description: str | None = None
    price: Decimal = Decimal("0.00")
    changed: int = 0

    @field_validator("price")
    @classmethod
    def round_price(cls, value: Decimal) -> Decimal:
        # Column is numeric(10,2)
        return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    price: float
    changed: int | None = None


class DeleteResult(BaseModel):
    result: str = "success"
