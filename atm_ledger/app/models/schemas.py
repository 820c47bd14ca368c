from decimal import Decimal
from typing import Union

from pydantic import BaseModel, Field

class AccountCreate(BaseModel):
    card_number: int = Field(..., ge=0, description="Card number printed on the card")
    pin: int = Field(..., ge=0, description="Personal identification number")
    holder_name: str = Field(..., min_length=1, description="Name of the account holder")
    initial_balance: Union[int, float, Decimal] = Field(default=0, description="Opening cash balance")

class AccountResponse(BaseModel):
    card_number: int
    holder_name: str
    balance: float = Field(..., ge=0, description="Current balance")

class MoneyMovementRequest(BaseModel):
    # Sign is checked by the registry so negative amounts surface as domain errors.
    amount: Union[int, float, Decimal]

class TransactionsResponse(BaseModel):
    card_number: int
    entries: list[str]
