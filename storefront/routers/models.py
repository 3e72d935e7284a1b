"""
Storefront API Pydantic Models

Request bodies for the cart endpoints.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    product_id: Optional[int] = None
    quantity: int = Field(default=1, ge=1)
    variation: Optional[list[dict[str, Any]]] = None


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=0)  # 0 removes the line
