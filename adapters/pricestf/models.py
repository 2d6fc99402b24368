"""
prices.tf 가격 피드 메시지 파싱
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


PRICE_UPDATED = "PRICE_UPDATED"


@dataclass(frozen=True)
class PriceUpdate:
    """가격 갱신 이벤트

    가격은 key 수량 + half scrap 단위 금속 가격으로 표현.
    """

    sku: str
    buy_keys: int
    buy_half_scrap: int
    sell_keys: int
    sell_half_scrap: int


def parse_price_update(data: dict[str, Any]) -> PriceUpdate:
    """PRICE_UPDATED 이벤트의 data 변환"""
    return PriceUpdate(
        sku=str(data["sku"]),
        buy_keys=int(data.get("buyKeys", 0)),
        buy_half_scrap=int(data.get("buyHalfScrap", 0)),
        sell_keys=int(data.get("sellKeys", 0)),
        sell_half_scrap=int(data.get("sellHalfScrap", 0)),
    )


def parse_price_message(raw: str | bytes) -> PriceUpdate | None:
    """소켓 메시지 변환

    Returns:
        PRICE_UPDATED 이벤트면 PriceUpdate, 그 외 이벤트나 파싱 실패는 None
    """
    try:
        message = json.loads(raw)
    except ValueError as e:
        logger.warning(
            "메시지 파싱 실패",
            extra={"error": str(e), "raw": str(raw)[:100]},
        )
        return None

    if not isinstance(message, dict) or message.get("type") != PRICE_UPDATED:
        return None

    try:
        return parse_price_update(message["data"])
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("가격 이벤트 형식 오류", extra={"error": str(e)})
        return None
