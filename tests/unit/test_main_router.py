import json

from handlers import main


def test_main_routes_health(monkeypatch):
    monkeypatch.setattr(main.health_check, "lambda_handler", lambda e, c: {"status": "ok"})
    event = {"requestContext": {"http": {"method": "GET", "path": "/health"}}}
    resp = main.lambda_handler(event, None)
    assert resp["status"] == "ok"


def test_main_routes_purchases(monkeypatch):
    marker = {}

    def fake_handler(event, context):
        marker["called"] = True
        return {"statusCode": 200}

    monkeypatch.setattr(main.purchase_tickets, "lambda_handler", fake_handler)
    event = {"requestContext": {"http": {"method": "POST", "path": "/purchases/"}}}
    resp = main.lambda_handler(event, None)
    assert resp["statusCode"] == 200
    assert marker["called"] is True


def test_main_wrong_method_is_not_routed():
    event = {"requestContext": {"http": {"method": "GET", "path": "/purchases"}}}
    resp = main.lambda_handler(event, None)
    assert resp["statusCode"] == 404


def test_main_unknown_route():
    event = {"requestContext": {"http": {"method": "GET", "path": "/unknown"}}}
    resp = main.lambda_handler(event, None)
    assert resp["statusCode"] == 404
    body = json.loads(resp["body"])
    assert body["message"] == "Route not found"
