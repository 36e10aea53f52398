import json

import requests

from app.core.config import settings
from app.models.sql_models import Order
from app.services import notifier


class FakeResponse:
    def __init__(self, status_code=200):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def _order():
    return Order(
        id=5,
        items=json.dumps([{"name": "Plov", "quantity": 2, "price": 12}]),
        customer_name="Aysel",
        table_number="7",
        table_description="terrace",
        total_price=24,
        status="yeni",
    )


def test_format_order_alert():
    text = notifier.format_order_alert(_order())
    assert "#5" in text
    assert "Aysel" in text
    assert "terrace" in text
    assert "- Plov x2" in text
    assert "24.00" in text


def test_notify_skipped_without_config(monkeypatch):
    calls = []
    monkeypatch.setattr(notifier.requests, "post", lambda *a, **kw: calls.append(a))
    assert notifier.notify_new_order(_order()) is False
    assert calls == []


def test_notify_posts_to_owner_chat(monkeypatch):
    monkeypatch.setattr(settings, "TELEGRAM_BOT_TOKEN", "tkn")
    monkeypatch.setattr(settings, "OWNER_CHAT_ID", "42")
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json, timeout))
        return FakeResponse()

    monkeypatch.setattr(notifier.requests, "post", fake_post)
    assert notifier.notify_new_order(_order()) is True

    url, payload, timeout = calls[0]
    assert url == "https://api.telegram.org/bottkn/sendMessage"
    assert payload["chat_id"] == "42"
    assert timeout == 2.0


def test_notify_swallows_network_errors(monkeypatch):
    monkeypatch.setattr(settings, "TELEGRAM_BOT_TOKEN", "tkn")
    monkeypatch.setattr(settings, "OWNER_CHAT_ID", "42")

    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(notifier.requests, "post", fake_post)
    assert notifier.notify_new_order(_order()) is False


def test_order_creation_triggers_alert(client, monkeypatch):
    monkeypatch.setattr(settings, "TELEGRAM_BOT_TOKEN", "tkn")
    monkeypatch.setattr(settings, "OWNER_CHAT_ID", "42")
    sent = []

    def fake_post(url, json=None, timeout=None):
        sent.append(json["text"])
        return FakeResponse()

    monkeypatch.setattr(notifier.requests, "post", fake_post)
    resp = client.post("/api/orders", json={
        "customerName": "Rauf",
        "tableNumber": "2",
        "items": [{"name": "Çay", "quantity": 3, "price": 2}],
        "totalPrice": 6,
    })
    assert resp.status_code == 201
    assert len(sent) == 1
    assert "Rauf" in sent[0]
