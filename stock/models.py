# stock/models.py
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class Product(BaseModel):
    id: Optional[int] = Field(default=None, description="Assigned by the store on creation")
    name: str = Field(..., min_length=1)
    quantity: int
    price: float
