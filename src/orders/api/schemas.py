"""Pydantic request/response schemas for the Orders API.

These are external contracts: camelCase on the wire, separate from the
aggregates' own field names.
"""

from pydantic import BaseModel, Field


class CreateOrderRequest(BaseModel):
    """Documents the create-order body. The route reads the raw body itself."""

    productId: str
    quantity: int = Field(ge=0)
    storeId: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "productId": "MacPro",
                    "quantity": 2,
                    "storeId": "59b8a675-9bb7-46c7-955d-2566edfba8ea",
                }
            ]
        }
    }


class OrderResponse(BaseModel):
    id: str
    productId: str
    quantity: int
    storeId: str
    created: str
    type: str


class ErrorResponse(BaseModel):
    error: str
    message: str
