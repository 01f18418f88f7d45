"""
Pydantic models for orders.

Order requests are free‑form JSON objects and are not modelled here;
only the confirmation returned after an order is stored has a fixed
shape.
"""

from pydantic import BaseModel, Field


class OrderConfirmation(BaseModel):
    success: bool = True
    order_id: str = Field(..., alias="orderId")
    message: str = "Order submitted successfully"

    model_config = {
        "populate_by_name": True,
    }
