# app/services/notifier.py
import logging

import requests

from app.core.config import settings
from app.models.sql_models import Order

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org/bot{token}/sendMessage"


def format_order_alert(order: Order) -> str:
    lines = [f"🛎 New order #{order.id}", f"Customer: {order.customer_name}", f"Table: {order.table_number}"]
    if order.table_description:
        lines.append(f"Note: {order.table_description}")
    for item in order.item_list:
        lines.append(f"- {item['name']} x{item['quantity']}")
    lines.append(f"Total: {order.total_price:.2f}")
    return "\n".join(lines)


def notify_new_order(order: Order) -> bool:
    """Ping the owner's Telegram chat about a new order.

    Returns False when alerts are not configured or the send failed.
    """
    if not settings.TELEGRAM_BOT_TOKEN or not settings.OWNER_CHAT_ID:
        return False

    url = TELEGRAM_API.format(token=settings.TELEGRAM_BOT_TOKEN)
    payload = {"chat_id": settings.OWNER_CHAT_ID, "text": format_order_alert(order)}
    try:
        resp = requests.post(url, json=payload, timeout=2.0)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Telegram alert for order %s failed: %s", order.id, e)
        return False
    return True
