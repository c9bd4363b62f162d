"""Pydantic schemas for receipt endpoints."""

from pydantic import BaseModel, Field

from app.models.receipt import Item, Receipt


class ItemPayload(BaseModel):
    """One line item as it arrives on the wire."""
    short_description: str = Field(alias="shortDescription")
    price: str

    class Config:
        populate_by_name = True


class ReceiptPayload(BaseModel):
    """Request body for submitting a receipt.

    Only the shape is checked here (fields present, strings where strings
    belong). Format rules are the validator's job so that every format
    failure gets its specific reason.
    """
    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: list[ItemPayload]
    total: str

    class Config:
        populate_by_name = True

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            items=tuple(
                Item(short_description=item.short_description, price=item.price)
                for item in self.items
            ),
            total=self.total,
        )


class ProcessReceiptResponse(BaseModel):
    """Response after a receipt has been scored and stored."""
    id: str


class PointsResponse(BaseModel):
    points: int


class BreakdownResponse(BaseModel):
    """Points with the per-rule explanation, in rule order."""
    points: int
    breakdown: list[str]
