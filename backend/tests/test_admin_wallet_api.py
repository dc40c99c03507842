"""Tests for the admin wallet API endpoints."""

from uuid import uuid4

from app.core.auth import encode_admin_token
from app.repositories.wallet_transaction_repository import WalletTransactionRepository
from tests.conftest import ADMIN_ID

BASE = "/v1/admin/wallet"


class TestAuth:
    def test_missing_token(self, client):
        response = client.get(f"{BASE}/summary")
        assert response.status_code == 401
        assert response.json() == {
            "status": "error",
            "message": "Authorization header is required",
        }

    def test_malformed_header(self, client):
        response = client.get(f"{BASE}/summary", headers={"Authorization": "Token abc"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid authorization header format"

    def test_invalid_token(self, client):
        response = client.get(f"{BASE}/summary", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    def test_non_admin_token(self, client):
        token = encode_admin_token(uuid4(), role="user")
        response = client.post(
            f"{BASE}/credits",
            json={"userId": str(uuid4()), "amount": 10},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 403
        assert response.json() == {"status": "error", "message": "Admin access required"}


class TestSummaryEndpoint:
    def test_summary(self, client, admin_headers, make_user):
        for balance in (0, 50, 0, 150):
            make_user(wallet_balance=balance)

        response = client.get(f"{BASE}/summary", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "data": {
                "totalUsers": 4,
                "usersWithBalance": 2,
                "totalWalletBalance": 200,
                "avgWalletBalance": 100,
                "maxWalletBalance": 150,
            },
        }


class TestCreditEndpoint:
    def test_credit(self, client, admin_headers, make_user, db_session):
        user = make_user(wallet_balance=20)

        response = client.post(
            f"{BASE}/credits",
            json={"userId": str(user.id), "amount": 80, "note": "Goodwill credit"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        data = body["data"]
        assert data["userId"] == str(user.id)
        assert data["amount"] == 80
        assert data["note"] == "Goodwill credit"
        assert data["walletBalance"] == 100
        assert data["createdAt"]

        db_session.refresh(user)
        assert user.wallet_balance == 100
        txn = WalletTransactionRepository(db_session).get_by_user_id(user.id)[0]
        assert txn.created_by_user_id == ADMIN_ID
        assert (txn.balance_before, txn.balance_after) == (20, 100)

    def test_credit_without_note(self, client, admin_headers, make_user):
        user = make_user()
        response = client.post(
            f"{BASE}/credits",
            json={"userId": str(user.id), "amount": "15"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["note"] is None

    def test_long_note_is_truncated(self, client, admin_headers, make_user):
        user = make_user()
        response = client.post(
            f"{BASE}/credits",
            json={"userId": str(user.id), "amount": 5, "note": "z" * 300},
            headers=admin_headers,
        )
        assert response.json()["data"]["note"] == "z" * 200

        listing = client.get(f"{BASE}/transactions", headers=admin_headers).json()
        assert listing["data"]["items"][0]["description"] == "z" * 200

    def test_invalid_user_id(self, client, admin_headers):
        response = client.post(
            f"{BASE}/credits", json={"userId": "123", "amount": 10}, headers=admin_headers
        )
        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Invalid userId"}

    def test_non_positive_amount(self, client, admin_headers, make_user, db_session):
        user = make_user(wallet_balance=7)
        for amount in (0, -3, "abc", None):
            response = client.post(
                f"{BASE}/credits",
                json={"userId": str(user.id), "amount": amount},
                headers=admin_headers,
            )
            assert response.status_code == 400
            assert response.json()["message"] == "amount must be a positive number"

        db_session.refresh(user)
        assert user.wallet_balance == 7
        assert WalletTransactionRepository(db_session).count() == 0

    def test_amount_too_large(self, client, admin_headers, make_user):
        user = make_user()
        response = client.post(
            f"{BASE}/credits",
            json={"userId": str(user.id), "amount": 1_000_001},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "amount is too large"}

    def test_unknown_user(self, client, admin_headers, db_session):
        response = client.post(
            f"{BASE}/credits",
            json={"userId": str(uuid4()), "amount": 10},
            headers=admin_headers,
        )
        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "User not found"}
        assert WalletTransactionRepository(db_session).count() == 0

    def test_malformed_body(self, client, admin_headers):
        response = client.post(
            f"{BASE}/credits",
            content="not json",
            headers={**admin_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["status"] == "error"


class TestTransactionsEndpoint:
    def test_item_shape(self, client, admin_headers, make_user):
        user = make_user(name="Priya")
        client.post(
            f"{BASE}/credits",
            json={"userId": str(user.id), "amount": 40},
            headers=admin_headers,
        )

        response = client.get(f"{BASE}/transactions", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["items"]) == 1
        item = data["items"][0]
        assert item["userId"] == str(user.id)
        assert item["user"] == {"id": str(user.id), "email": user.email, "name": "Priya"}
        assert item["type"] == "CREDIT"
        assert item["amount"] == 40
        assert item["currency"] == "INR"
        assert item["reason"] == "ADMIN_ADJUSTMENT"
        assert item["description"] == "Admin wallet credit"
        assert item["balanceBefore"] == 0
        assert item["balanceAfter"] == 40
        assert item["createdBy"] == "ADMIN"
        assert item["createdByUserId"] == str(ADMIN_ID)
        assert item["metadata"] is None
        assert data["nextCursor"] == str(item["id"])

    def test_cursor_pagination(self, client, admin_headers, make_user):
        user = make_user()
        for amount in (1, 2, 3, 4, 5):
            client.post(
                f"{BASE}/credits",
                json={"userId": str(user.id), "amount": amount},
                headers=admin_headers,
            )

        first = client.get(f"{BASE}/transactions?limit=2", headers=admin_headers).json()["data"]
        assert [i["amount"] for i in first["items"]] == [5, 4]

        second = client.get(
            f"{BASE}/transactions?limit=2&cursor={first['nextCursor']}", headers=admin_headers
        ).json()["data"]
        assert [i["amount"] for i in second["items"]] == [3, 2]

        third = client.get(
            f"{BASE}/transactions?limit=2&cursor={second['nextCursor']}", headers=admin_headers
        ).json()["data"]
        assert [i["amount"] for i in third["items"]] == [1]

        last = client.get(
            f"{BASE}/transactions?limit=2&cursor={third['nextCursor']}", headers=admin_headers
        ).json()["data"]
        assert last == {"items": [], "nextCursor": None}

    def test_filter_by_user(self, client, admin_headers, make_user):
        alice = make_user()
        bob = make_user()
        for user, amount in ((alice, 10), (bob, 20), (alice, 30)):
            client.post(
                f"{BASE}/credits",
                json={"userId": str(user.id), "amount": amount},
                headers=admin_headers,
            )

        response = client.get(
            f"{BASE}/transactions", params={"userId": str(bob.id)}, headers=admin_headers
        )
        items = response.json()["data"]["items"]
        assert [i["amount"] for i in items] == [20]

    def test_non_numeric_limit_uses_default(self, client, admin_headers):
        response = client.get(f"{BASE}/transactions?limit=lots", headers=admin_headers)
        assert response.status_code == 200

    def test_invalid_user_id(self, client, admin_headers):
        response = client.get(f"{BASE}/transactions?userId=xyz", headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Invalid userId"}

    def test_invalid_cursor(self, client, admin_headers):
        response = client.get(f"{BASE}/transactions?cursor=abc", headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Invalid cursor"}

    def test_oversized_cursor(self, client, admin_headers):
        response = client.get(
            f"{BASE}/transactions", params={"cursor": "9" * 5000}, headers=admin_headers
        )
        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Invalid cursor"}
