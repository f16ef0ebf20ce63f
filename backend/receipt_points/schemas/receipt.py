# receipt_points/schemas/receipt.py
# Wire format of the receipt API. Field names follow the JSON body (camelCase);
# format rules live in services/validation.py, not here.
from pydantic import BaseModel, ConfigDict, Field
from typing import List

class Item(BaseModel):
    shortDescription: str = Field(..., examples=["Mountain Dew 12PK"])
    price: str = Field(..., examples=["6.49"])

    model_config = ConfigDict(frozen=True)

class Receipt(BaseModel):
    retailer: str = Field(..., examples=["M&M Corner Market"])
    purchaseDate: str = Field(..., examples=["2022-01-01"])
    purchaseTime: str = Field(..., examples=["13:01"])
    items: List[Item]
    total: str = Field(..., examples=["6.49"])

    model_config = ConfigDict(frozen=True)

class ReceiptId(BaseModel):
    id: str

class Points(BaseModel):
    points: int

class ErrorOut(BaseModel):
    error: str
