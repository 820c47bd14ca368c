from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import PlainTextResponse

from ..core.dependencies import get_atm
from ..models import (
    AccountCreate,
    AccountResponse,
    MoneyMovementRequest,
    TransactionsResponse,
)
from ..services import AccountKey, Atm


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def register_account(
    payload: AccountCreate,
    atm: Atm = Depends(get_atm),
) -> AccountResponse:
    atm.register_account(
        payload.card_number,
        payload.pin,
        payload.holder_name,
        payload.initial_balance,
    )
    return atm.get_account(payload.card_number, payload.pin)

@router.get("/{card_number}", response_model=AccountResponse)
def get_account(
    card_number: int,
    pin: int = Header(..., alias="X-Card-Pin"),
    atm: Atm = Depends(get_atm),
) -> AccountResponse:
    return atm.get_account(card_number, pin)

@router.post("/{card_number}/deposit", response_model=AccountResponse)
def deposit(
    card_number: int,
    payload: MoneyMovementRequest,
    pin: int = Header(..., alias="X-Card-Pin"),
    atm: Atm = Depends(get_atm),
) -> AccountResponse:
    atm.deposit_cash(card_number, pin, payload.amount)
    return atm.get_account(card_number, pin)

@router.post("/{card_number}/withdraw", response_model=AccountResponse)
def withdraw(
    card_number: int,
    payload: MoneyMovementRequest,
    pin: int = Header(..., alias="X-Card-Pin"),
    atm: Atm = Depends(get_atm),
) -> AccountResponse:
    atm.withdraw_cash(card_number, pin, payload.amount)
    return atm.get_account(card_number, pin)

@router.get("/{card_number}/transactions", response_model=TransactionsResponse)
def get_transactions(
    card_number: int,
    pin: int = Header(..., alias="X-Card-Pin"),
    atm: Atm = Depends(get_atm),
) -> TransactionsResponse:
    atm.get_account(card_number, pin)  # ensure account exists
    entries = atm.get_transactions()[AccountKey(card_number, pin)]
    return TransactionsResponse(card_number=card_number, entries=list(entries))

@router.get("/{card_number}/statement", response_class=PlainTextResponse)
def get_statement(
    card_number: int,
    pin: int = Header(..., alias="X-Card-Pin"),
    atm: Atm = Depends(get_atm),
) -> str:
    return atm.render_statement(card_number, pin)

__all__ = ["router"]
