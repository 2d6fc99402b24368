"""
prices.tf 어댑터

가격 피드 WebSocket 및 인증 토큰 API 연동.
"""

from adapters.pricestf.rest_client import PricesTfApi, PricesTfApiError
from adapters.pricestf.reconnecting import ReconnectingWebSocket
from adapters.pricestf.ws_client import (
    PricesTfSocketManager,
    create_connection_factory,
    is_unauthorized,
)
from adapters.pricestf.models import PriceUpdate, parse_price_message

__all__ = [
    "PricesTfApi",
    "PricesTfApiError",
    "ReconnectingWebSocket",
    "PricesTfSocketManager",
    "create_connection_factory",
    "is_unauthorized",
    "PriceUpdate",
    "parse_price_message",
]
