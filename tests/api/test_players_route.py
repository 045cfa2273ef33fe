"""Player listing — /data returns the whole players collection unchanged."""

from datetime import datetime, timezone

from bson import ObjectId, Timestamp


async def test_data_empty_collection_returns_empty_array(client):
    res = await client.get("/data")
    assert res.status_code == 200
    assert res.text == "[]"


async def test_data_single_document_round_trips_exactly(client, fake_store):
    fake_store.players = [{"_id": 1, "name": "A"}]
    res = await client.get("/data")
    assert res.status_code == 200
    assert res.text == '[{"_id":1,"name":"A"}]'
    assert res.headers["content-type"] == "application/json"


async def test_data_returns_every_document_with_its_fields(client, fake_store):
    fake_store.players = [
        {"_id": 1, "name": "LeBron James", "team": "LAL", "stats": {"ppg": 27.1}},
        {"_id": 2, "name": "Nikola Jokic", "position": "C"},
        {"_id": 3, "name": "Stephen Curry", "tags": ["guard", "shooter"], "retired": False},
    ]
    res = await client.get("/data")
    assert res.status_code == 200
    body = res.json()
    assert len(body) == 3
    for returned, stored in zip(body, fake_store.players):
        assert list(returned.keys()) == list(stored.keys())
        assert returned == stored


async def test_data_encodes_bson_types(client, fake_store):
    oid = ObjectId("64b7f0c2a1b2c3d4e5f60718")
    fake_store.players = [{
        "_id": oid,
        "name": "A",
        "signed_at": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    }]
    res = await client.get("/data")
    assert res.json() == [{
        "_id": "64b7f0c2a1b2c3d4e5f60718",
        "name": "A",
        "signed_at": "2024-01-02T03:04:05+00:00",
    }]


async def test_data_failure_returns_500_empty_body(client, fake_store):
    fake_store.fail = True
    res = await client.get("/data")
    assert res.status_code == 500
    assert res.content == b""
    assert fake_store.calls == ["find_players"]


async def test_data_any_method_and_sub_path(client, fake_store):
    fake_store.players = [{"_id": 7}]
    res = await client.delete("/data/players")
    assert res.status_code == 200
    assert res.json() == [{"_id": 7}]


async def test_data_serves_nan_and_timestamp_values(client, fake_store):
    fake_store.players = [
        {"_id": 1, "ppg": float("nan")},
        {"_id": 2, "updated": Timestamp(1700000000, 1)},
    ]
    res = await client.get("/data")
    assert res.status_code == 200
    assert res.json() == [
        {"_id": 1, "ppg": None},
        {"_id": 2, "updated": {"$timestamp": {"t": 1700000000, "i": 1}}},
    ]


async def test_data_renders_naive_dates_as_utc(client, fake_store):
    fake_store.players = [{"_id": 1, "at": datetime(2024, 1, 2, 3, 4, 5)}]
    res = await client.get("/data")
    assert res.status_code == 200
    assert res.text == '[{"_id":1,"at":"2024-01-02T03:04:05+00:00"}]'
