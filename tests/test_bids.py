from bson import ObjectId


def place_bid(client, **fields):
    response = client.post("/bids", json=fields)
    assert response.status_code == 200
    return response.json()["insertedId"]


def test_product_bids_are_highest_first(client):
    place_bid(client, buyer_email="a@x.com", bid_price=100, product="p1")
    place_bid(client, buyer_email="b@x.com", bid_price=150, product="p1")
    place_bid(client, buyer_email="c@x.com", bid_price=999, product="p2")

    bids = client.get("/product/bids/p1").json()
    assert [bid["buyer_email"] for bid in bids] == ["b@x.com", "a@x.com"]
    assert [bid["bid_price"] for bid in bids] == [150, 100]
    assert {bid["product"] for bid in bids} == {"p1"}


def test_product_bids_for_unknown_product_is_empty(client):
    assert client.get("/product/bids/nothing-here").json() == []


def test_bids_by_buyer_are_sorted(client):
    place_bid(client, buyer_email="a@x.com", bid_price=10, product="p1")
    place_bid(client, buyer_email="a@x.com", bid_price=30, product="p2")
    place_bid(client, buyer_email="b@x.com", bid_price=20, product="p1")

    bids = client.get("/bids", params={"email": "a@x.com"}).json()
    assert [bid["bid_price"] for bid in bids] == [30, 10]


def test_bids_without_email_returns_all(client):
    place_bid(client, buyer_email="a@x.com", bid_price=10, product="p1")
    place_bid(client, buyer_email="b@x.com", bid_price=20, product="p1")
    assert len(client.get("/bids").json()) == 2


def test_bid_keeps_unknown_fields(client):
    bid_id = place_bid(client, buyer_email="a@x.com", bid_price=5, product="p1", note="hi")
    (bid,) = client.get("/bids").json()
    assert bid["_id"] == bid_id
    assert bid["note"] == "hi"


def test_bid_product_need_not_exist(client):
    place_bid(client, buyer_email="a@x.com", bid_price=5, product=str(ObjectId()))
    assert len(client.get("/bids").json()) == 1


def test_bid_price_is_stored_as_sent(client):
    place_bid(client, buyer_email="a@x.com", bid_price="150", product="p1")
    (bid,) = client.get("/product/bids/p1").json()
    assert bid["bid_price"] == "150"
    assert isinstance(bid["bid_price"], str)


def test_legacy_bids_with_odd_fields_are_listed(client, store):
    store.bids.insert_one({"buyer_email": 7, "bid_price": "n/a", "product": "p1"})
    place_bid(client, buyer_email="a@x.com", bid_price=10, product="p1")
    response = client.get("/bids")
    assert response.status_code == 200
    assert {bid["bid_price"] for bid in response.json()} == {"n/a", 10}


def test_delete_bid(client):
    bid_id = place_bid(client, buyer_email="a@x.com", bid_price=5, product="p1")
    assert client.delete(f"/bids/{bid_id}").json()["deletedCount"] == 1
    assert client.get("/bids").json() == []


def test_delete_unknown_bid_reports_zero(client):
    assert client.delete(f"/bids/{ObjectId()}").json()["deletedCount"] == 0


def test_delete_bid_with_malformed_id_is_rejected(client):
    response = client.delete("/bids/xyz")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid identifier: xyz"
