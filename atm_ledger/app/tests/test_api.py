import pytest
from fastapi.testclient import TestClient

from ..core.config import Settings
from ..core.dependencies import get_atm
from ..main import app, create_app
from ..services import Atm


@pytest.fixture
def client() -> TestClient:
    atm = Atm()
    app.dependency_overrides[get_atm] = lambda: atm

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _register(client: TestClient, card_number: int, pin: int, name: str, balance: float):
    return client.post(
        "/accounts",
        json={
            "card_number": card_number,
            "pin": pin,
            "holder_name": name,
            "initial_balance": balance,
        },
    )


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_register_deposit_withdraw(client: TestClient) -> None:
    response = _register(client, 7777, 8888, "Eve", 300.0)
    assert response.status_code == 201
    assert response.json() == {"card_number": 7777, "holder_name": "Eve", "balance": 300.0}

    deposit = client.post(
        "/accounts/7777/deposit",
        json={"amount": 200.0},
        headers={"X-Card-Pin": "8888"},
    )
    assert deposit.status_code == 200
    assert deposit.json()["balance"] == 500.0

    withdraw = client.post(
        "/accounts/7777/withdraw",
        json={"amount": 125.5},
        headers={"X-Card-Pin": "8888"},
    )
    assert withdraw.status_code == 200
    assert withdraw.json()["balance"] == 374.5

    snapshot = client.get("/accounts/7777", headers={"X-Card-Pin": "8888"})
    assert snapshot.json()["balance"] == 374.5


def test_duplicate_registration_returns_400(client: TestClient) -> None:
    _register(client, 1111, 2222, "Alice", 100.0)

    response = _register(client, 1111, 2222, "AliceAgain", 999.0)

    assert response.status_code == 400
    snapshot = client.get("/accounts/1111", headers={"X-Card-Pin": "2222"})
    assert snapshot.json()["holder_name"] == "Alice"


def test_negative_deposit_returns_400(client: TestClient) -> None:
    _register(client, 1, 2, "Zed", 10.0)

    response = client.post(
        "/accounts/1/deposit",
        json={"amount": -5},
        headers={"X-Card-Pin": "2"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Deposit amount cannot be negative"


def test_overdraft_returns_409(client: TestClient) -> None:
    _register(client, 1234, 1111, "Carol", 100.0)

    response = client.post(
        "/accounts/1234/withdraw",
        json={"amount": 150.0},
        headers={"X-Card-Pin": "1111"},
    )

    assert response.status_code == 409
    assert response.json()["detail"] == "Insufficient funds for withdrawal"


def test_unknown_account_returns_404(client: TestClient) -> None:
    response = client.get("/accounts/1", headers={"X-Card-Pin": "1"})
    assert response.status_code == 404

    response = client.get("/accounts/1/statement", headers={"X-Card-Pin": "1"})
    assert response.status_code == 404


def test_missing_pin_header_is_rejected(client: TestClient) -> None:
    _register(client, 1, 2, "Zed", 10.0)

    assert client.get("/accounts/1").status_code == 422


def test_transactions_and_statement(client: TestClient) -> None:
    _register(client, 2468, 1357, "Grace", 500.0)
    headers = {"X-Card-Pin": "1357"}
    client.post("/accounts/2468/deposit", json={"amount": 100}, headers=headers)
    client.post("/accounts/2468/withdraw", json={"amount": 50}, headers=headers)

    transactions = client.get("/accounts/2468/transactions", headers=headers)
    assert transactions.status_code == 200
    assert transactions.json()["entries"] == [
        "Deposit - Amount: $100.00",
        "Withdrawal - Amount: $50.00",
    ]

    statement = client.get("/accounts/2468/statement", headers=headers)
    assert statement.status_code == 200
    assert statement.headers["content-type"].startswith("text/plain")
    assert statement.text.splitlines() == [
        "Name: Grace",
        "Card Number: 2468",
        "PIN: 1357",
        "----------------------------",
        "Deposit - Amount: $100.00",
        "Withdrawal - Amount: $50.00",
    ]


def test_create_app_uses_given_settings() -> None:
    custom = create_app(Settings(app_name="Branch ATM", log_level="WARNING"))

    assert custom.title == "Branch ATM"
    with TestClient(custom) as test_client:
        assert test_client.get("/health").json() == {"status": "ok"}
        response = test_client.get("/accounts/1", headers={"X-Card-Pin": "1"})
    assert response.status_code == 404
