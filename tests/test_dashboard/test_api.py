"""Tests for the dashboard JSON API using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from dutch_auction.config import AppSettings
from dutch_auction.dashboard.app import create_dashboard_app


@pytest.fixture
def client(app_settings: AppSettings) -> TestClient:
    return TestClient(create_dashboard_app(settings=app_settings))


@pytest.fixture
def spec_payload() -> dict:
    return {
        "start_price": "1000",
        "floor_price": "100",
        "decay_per_second": "10",
        "duration_seconds": 3600,
        "token0": "WETH",
        "token1": "USDC",
        "fee": 3000,
    }


@pytest.fixture
def auction_payload() -> dict:
    return {
        "auction_id": "0xpool",
        "token0": "WETH",
        "token1": "USDC",
        "fee_tier": 3000,
        "start_price": "1000",
        "floor_price": "100",
        "decay_per_second": "10",
        "start_time": 0,
        "end_time": 3600,
        "active": True,
    }


class TestConfigEndpoint:
    def test_returns_bounds_and_tiers(self, client: TestClient) -> None:
        resp = client.get("/api/config")
        assert resp.status_code == 200
        data = resp.json()
        assert data["bounds"]["max_start_price"] == "1000000"
        assert data["bounds"]["min_auction_duration"] == 300
        assert [t["value"] for t in data["fee_tiers"]] == [100, 500, 1000, 3000, 10000]
        assert data["fee_tiers"][3]["label"] == "0.3% (30 bps)"
        assert data["gateway"]["network_name"] == "local"


class TestValidateEndpoint:
    def test_valid_spec(self, client: TestClient, spec_payload: dict) -> None:
        resp = client.post("/api/auctions/validate", json=spec_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["valid"] is True
        assert data["projected_end_price"] == "100"
        assert data["duration"] == "60 minutes"

    def test_start_below_floor(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload.update(start_price="100", floor_price="200")
        data = client.post("/api/auctions/validate", json=spec_payload).json()
        assert data["valid"] is False
        assert data["error"]["rule"] == "start_not_above_floor"
        assert data["error"]["field"] == "start_price"

    def test_non_numeric_price_is_bad_request(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload["start_price"] = "lots"
        resp = client.post("/api/auctions/validate", json=spec_payload)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Field start_price must be a number"

    def test_missing_field_is_bad_request(self, client: TestClient, spec_payload: dict) -> None:
        del spec_payload["duration_seconds"]
        resp = client.post("/api/auctions/validate", json=spec_payload)
        assert resp.status_code == 400
        assert "duration_seconds" in resp.json()["error"]

    def test_non_object_body_is_bad_request(self, client: TestClient) -> None:
        resp = client.post("/api/auctions/validate", json=[1, 2, 3])
        assert resp.status_code == 400


class TestCreateEndpoint:
    def test_creates_auction_record(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload.update(start_time=1_700_000_000, auction_id="0xpool")
        resp = client.post("/api/auctions", json=spec_payload)
        assert resp.status_code == 200
        auction = resp.json()["auction"]
        assert auction["start_time"] == 1_700_000_000
        assert auction["end_time"] == 1_700_003_600
        assert auction["active"] is True
        assert auction["fee_tier"] == 3000
        assert auction["start_price"] == "1000"
        assert auction["auction_id"] == "0xpool"

    def test_invalid_spec_is_unprocessable(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload["fee"] = 2500
        resp = client.post("/api/auctions", json=spec_payload)
        assert resp.status_code == 422
        assert resp.json()["error"]["rule"] == "fee_tier"

    def test_created_record_round_trips_to_status(
        self, client: TestClient, spec_payload: dict
    ) -> None:
        spec_payload["start_time"] = 0
        auction = client.post("/api/auctions", json=spec_payload).json()["auction"]
        data = client.post("/api/auctions/status", json={"auction": auction, "now": 50}).json()
        assert data["current_price"] == "500"


class TestStatusEndpoint:
    def test_active_auction(self, client: TestClient, auction_payload: dict) -> None:
        resp = client.post("/api/auctions/status", json={"auction": auction_payload, "now": 50})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "active"
        assert data["status_label"] == "Active"
        assert data["current_price"] == "500"
        assert data["time_remaining_label"] == "59m 10s"
        assert data["floor_reached_at"] == "90"

    def test_expired_auction(self, client: TestClient, auction_payload: dict) -> None:
        data = client.post(
            "/api/auctions/status", json={"auction": auction_payload, "now": 4000}
        ).json()
        assert data["status"] == "expired"
        assert data["current_price"] == "100"
        assert data["time_remaining"] == "0"

    def test_missing_auction_is_bad_request(self, client: TestClient) -> None:
        resp = client.post("/api/auctions/status", json={"now": 50})
        assert resp.status_code == 400

    def test_end_before_start_is_bad_request(self, client: TestClient, auction_payload: dict) -> None:
        auction_payload["end_time"] = -1
        resp = client.post("/api/auctions/status", json={"auction": auction_payload})
        assert resp.status_code == 400


class TestBidEndpoint:
    def test_accepted_bid(self, client: TestClient, auction_payload: dict) -> None:
        resp = client.post(
            "/api/bids/evaluate",
            json={"auction": auction_payload, "bid_amount": "600", "now": 50},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["outcome"] == "accepted"
        assert data["accepted"] is True
        assert data["current_price"] == "500"

    def test_too_low_bid(self, client: TestClient, auction_payload: dict) -> None:
        data = client.post(
            "/api/bids/evaluate",
            json={"auction": auction_payload, "bid_amount": 400, "now": 50},
        ).json()
        assert data["outcome"] == "rejected_too_low"
        assert data["shortfall"] == "100"

    def test_inactive_auction(self, client: TestClient, auction_payload: dict) -> None:
        auction_payload["active"] = False
        data = client.post(
            "/api/bids/evaluate",
            json={"auction": auction_payload, "bid_amount": "600", "now": 50},
        ).json()
        assert data["outcome"] == "rejected_auction_inactive"

    def test_invalid_amount(self, client: TestClient, auction_payload: dict) -> None:
        data = client.post(
            "/api/bids/evaluate",
            json={"auction": auction_payload, "bid_amount": "-3", "now": 50},
        ).json()
        assert data["outcome"] == "rejected_invalid_amount"
        assert data["current_price"] is None


class TestAuctionRecordChecks:
    """Client-supplied auction records are rejected before pricing."""

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("start_price", "NaN"),
            ("floor_price", "sNaN"),
            ("decay_per_second", "Infinity"),
            ("start_price", "-Infinity"),
        ],
    )
    @pytest.mark.parametrize("path", ["/api/auctions/status", "/api/bids/evaluate"])
    def test_non_finite_prices_are_bad_request(
        self, client: TestClient, auction_payload: dict, path: str, field: str, value: str
    ) -> None:
        auction_payload[field] = value
        resp = client.post(path, json={"auction": auction_payload, "bid_amount": "600", "now": 50})
        assert resp.status_code == 400
        assert resp.json()["error"] == f"Field {field} must be a finite number"

    def test_floor_above_start_is_bad_request(self, client: TestClient, auction_payload: dict) -> None:
        auction_payload.update(start_price="100", floor_price="500")
        resp = client.post("/api/auctions/status", json={"auction": auction_payload, "now": 50})
        assert resp.status_code == 400
        assert "greater than floor_price" in resp.json()["error"]

    def test_floor_equal_to_start_is_bad_request(self, client: TestClient, auction_payload: dict) -> None:
        auction_payload.update(start_price="500", floor_price="500")
        resp = client.post(
            "/api/bids/evaluate", json={"auction": auction_payload, "bid_amount": "600", "now": 50}
        )
        assert resp.status_code == 400

    def test_negative_decay_is_bad_request(self, client: TestClient, auction_payload: dict) -> None:
        auction_payload["decay_per_second"] = "-1"
        resp = client.post("/api/auctions/status", json={"auction": auction_payload, "now": 50})
        assert resp.status_code == 400
        assert "must not be negative" in resp.json()["error"]

    def test_zero_decay_is_allowed(self, client: TestClient, auction_payload: dict) -> None:
        auction_payload["decay_per_second"] = "0"
        data = client.post("/api/auctions/status", json={"auction": auction_payload, "now": 50}).json()
        assert data["current_price"] == "1000"
        assert data["floor_reached_at"] is None


class TestIntegerFields:
    """duration_seconds and fee must be whole numbers."""

    def test_fractional_duration_is_bad_request(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload.update(duration_seconds=300.9, start_time=0)
        resp = client.post("/api/auctions", json=spec_payload)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Field duration_seconds must be an integer"

    def test_fractional_duration_string_is_bad_request(
        self, client: TestClient, spec_payload: dict
    ) -> None:
        spec_payload["duration_seconds"] = "300.9"
        resp = client.post("/api/auctions/validate", json=spec_payload)
        assert resp.status_code == 400

    def test_whole_float_duration_accepted(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload.update(duration_seconds=300.0, start_time=0)
        resp = client.post("/api/auctions", json=spec_payload)
        assert resp.status_code == 200
        assert resp.json()["auction"]["end_time"] == 300

    def test_fractional_fee_is_bad_request(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload["fee"] = 3000.5
        resp = client.post("/api/auctions/validate", json=spec_payload)
        assert resp.status_code == 400

    def test_non_finite_spec_price_is_bad_request(self, client: TestClient, spec_payload: dict) -> None:
        spec_payload["start_price"] = "NaN"
        resp = client.post("/api/auctions/validate", json=spec_payload)
        assert resp.status_code == 400
