# tests/integration/test_pool_flow.py
"""End-to-end HTTP tests for token, pool and dashboard endpoints."""

import asyncio

import pytest

WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"

pytestmark = pytest.mark.asyncio


async def _create_pool(client, liquidity: str = "1", mint: str = "MINT-1") -> dict:
    resp = await client.post(
        "/api/pool/create", json={"tokenMint": mint, "initialLiquidity": liquidity}
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


class TestHealth:
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestWalletHeader:
    async def test_create_requires_wallet(self, client):
        resp = await client.post(
            "/api/pool/create", json={"tokenMint": "MINT-1", "initialLiquidity": "1"}
        )
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == 1002
        assert body["data"] is None
        assert body["request_id"].startswith("req_")

    async def test_buy_requires_wallet(self, client):
        resp = await client.post("/api/pool/buy", json={"poolId": "x", "amount": "0.2"})
        assert resp.status_code == 400

    async def test_reads_do_not_require_wallet(self, client):
        resp = await client.get("/api/pool")
        assert resp.status_code == 200
        assert resp.json()["data"] == []


class TestPoolLifecycle:
    async def test_create_pool(self, wallet_client):
        data = await _create_pool(wallet_client)

        pool = data["pool"]
        assert data["txHash"].startswith("simulated_pool_create_tx_")
        assert pool["tokenMint"] == "MINT-1"
        assert pool["status"] == "active"
        assert pool["tokenReserve"] == "1000000"
        assert pool["solReserve"] == "1"
        assert pool["currentPrice"] == "0.100001"
        assert pool["totalVolume"] == "0"
        assert pool["creator"] == WALLET
        assert pool["curveParams"]["basePrice"] == "0.000001"

    async def test_buy_and_sell(self, wallet_client):
        pool_id = (await _create_pool(wallet_client))["pool"]["id"]

        buy = await wallet_client.post("/api/pool/buy", json={"poolId": pool_id, "amount": "0.2"})
        assert buy.status_code == 200, buy.text
        assert buy.json()["data"]["tokensReceived"] == "1"
        assert buy.json()["data"]["newPrice"] == "0.1000009"

        sell = await wallet_client.post("/api/pool/sell", json={"poolId": pool_id, "amount": "1"})
        assert sell.status_code == 200, sell.text
        sold = sell.json()["data"]
        assert sold["solReceived"] == "0.1000008"
        assert sold["newPrice"] == "0.100001"
        assert sold["txHash"].startswith("simulated_sell_tx_")

        detail = (await wallet_client.get(f"/api/pool/{pool_id}")).json()["data"]
        assert detail["solReserve"] == "1.0999992"
        assert detail["tokenReserve"] == "1000000"
        assert detail["totalVolume"] == "0.3000008"

    async def test_list_filtered_by_mint(self, wallet_client):
        await _create_pool(wallet_client, mint="MINT-A")
        await _create_pool(wallet_client, mint="MINT-B")

        resp = await wallet_client.get("/api/pool", params={"tokenMint": "MINT-A"})

        assert [p["tokenMint"] for p in resp.json()["data"]] == ["MINT-A"]

    async def test_concurrent_buys(self, wallet_client):
        pool_id = (await _create_pool(wallet_client))["pool"]["id"]

        responses = await asyncio.gather(*(
            wallet_client.post("/api/pool/buy", json={"poolId": pool_id, "amount": "0.2"})
            for _ in range(10)
        ))

        assert all(r.status_code == 200 for r in responses)
        detail = (await wallet_client.get(f"/api/pool/{pool_id}")).json()["data"]
        assert detail["tokenReserve"] == "999990"
        assert detail["solReserve"] == "3"
        assert detail["totalVolume"] == "2"
        assert detail["currentPrice"] == "0.1"


class TestPoolErrors:
    async def test_unknown_pool(self, wallet_client):
        resp = await wallet_client.get("/api/pool/does-not-exist")
        assert resp.status_code == 404
        assert resp.json()["code"] == 2001

    async def test_buy_unknown_pool(self, wallet_client):
        resp = await wallet_client.post(
            "/api/pool/buy", json={"poolId": "does-not-exist", "amount": "0.2"}
        )
        assert resp.status_code == 404

    async def test_buy_below_unit_price(self, wallet_client):
        pool_id = (await _create_pool(wallet_client))["pool"]["id"]
        resp = await wallet_client.post("/api/pool/buy", json={"poolId": pool_id, "amount": "0.1"})
        assert resp.status_code == 422
        assert resp.json()["code"] == 2003

    async def test_buy_above_max_trade(self, wallet_client):
        pool_id = (await _create_pool(wallet_client))["pool"]["id"]
        resp = await wallet_client.post("/api/pool/buy", json={"poolId": pool_id, "amount": "10.5"})
        assert resp.status_code == 422
        assert resp.json()["code"] == 1001

    async def test_sell_exceeding_sol_reserve(self, wallet_client):
        pool_id = (await _create_pool(wallet_client))["pool"]["id"]
        resp = await wallet_client.post("/api/pool/sell", json={"poolId": pool_id, "amount": "100"})
        assert resp.status_code == 422
        assert resp.json()["code"] == 2003

    async def test_non_positive_amount_rejected_by_schema(self, wallet_client):
        resp = await wallet_client.post("/api/pool/buy", json={"poolId": "p", "amount": "-1"})
        assert resp.status_code == 422

    async def test_ledger_outage(self, wallet_client, services):
        pool_id = (await _create_pool(wallet_client))["pool"]["id"]
        services.ledger.fail_with = "rpc unavailable"

        resp = await wallet_client.post("/api/pool/buy", json={"poolId": pool_id, "amount": "0.2"})

        assert resp.status_code == 502
        assert resp.json()["code"] == 4001


class TestTokensAndDashboard:
    async def test_token_then_pool_on_dashboard(self, wallet_client):
        created = await wallet_client.post("/api/token/create", json={
            "name": "Launch Coin",
            "symbol": "LCH",
            "decimals": 9,
            "initialSupply": "1000000",
            "description": "test token",
        })
        assert created.status_code == 201, created.text
        mint = created.json()["data"]["token"]["mint"]
        assert created.json()["data"]["txHash"].startswith("simulated_mint_tx_")
        await _create_pool(wallet_client, mint=mint)

        token = (await wallet_client.get(f"/api/token/{mint}")).json()["data"]
        assert token["symbol"] == "LCH"
        assert token["totalSupply"] == "1000000"

        rows = (await wallet_client.get("/api/dashboard/tokens")).json()["data"]
        assert rows[0]["tokenMint"] == mint
        assert rows[0]["status"] == "active"
        assert rows[0]["currentPrice"] == "0.100001"

        stats = (await wallet_client.get("/api/dashboard/stats")).json()["data"]
        assert stats["totalTokens"] == 1
        assert stats["activePools"] == 1
        assert stats["totalLiquidity"] == "1"

        pools = (await wallet_client.get("/api/dashboard/pools")).json()["data"]
        assert pools[0]["tokenSymbol"] == "LCH"

    async def test_unknown_token(self, client):
        resp = await client.get("/api/token/nope")
        assert resp.status_code == 404
        assert resp.json()["code"] == 3001

    async def test_list_tokens_by_creator(self, wallet_client):
        await wallet_client.post("/api/token/create", json={
            "name": "A", "symbol": "A", "decimals": 6, "initialSupply": "10",
        })
        mine = (await wallet_client.get("/api/token", params={"creator": WALLET})).json()["data"]
        others = (await wallet_client.get("/api/token", params={"creator": "someone"})).json()["data"]
        assert len(mine) == 1
        assert others == []


class TestRequestId:
    async def test_generated_request_id_echoed(self, client):
        resp = await client.get("/api/pool")
        assert resp.headers["x-request-id"] == resp.json()["request_id"]

    async def test_caller_request_id_used(self, client):
        resp = await client.get("/api/pool/nope", headers={"x-request-id": "req_caller"})
        assert resp.headers["x-request-id"] == "req_caller"
        assert resp.json()["request_id"] == "req_caller"


class TestCors:
    async def test_preflight_for_wallet_header(self, client):
        resp = await client.options(
            "/api/pool/buy",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type,x-wallet-address",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "*"
        assert "x-wallet-address" in resp.headers["access-control-allow-headers"].lower()

    async def test_simple_request_carries_cors_headers(self, client):
        resp = await client.get("/api/pool", headers={"Origin": "http://localhost:3000"})
        assert resp.headers["access-control-allow-origin"] == "*"
        assert "x-request-id" in resp.headers["access-control-expose-headers"]


class TestQuotePrecision:
    async def test_quote_precision_rejected_over_http(self, wallet_client):
        pool_id = (await _create_pool(wallet_client))["pool"]["id"]
        resp = await wallet_client.post(
            "/api/pool/buy",
            json={"poolId": pool_id, "amount": "0.2000000000000000000000000001"},
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 1001
