"""
Mock 거래 제안

ITradeOffer Protocol 준수.
"""

from typing import Any


class MockTradeOffer:
    """Mock 거래 제안

    Args:
        partner: 거래 상대방 steamID
        data: 제안에 첨부된 데이터 (key → value)
    """

    def __init__(self, partner: str, data: dict[str, Any] | None = None):
        self._partner = partner
        self._data: dict[str, Any] = dict(data or {})

    @property
    def partner(self) -> str:
        return self._partner

    def data(self, key: str) -> Any:
        """첨부 데이터 조회 (없으면 None)"""
        return self._data.get(key)

    def set_data(self, key: str, value: Any) -> None:
        """첨부 데이터 저장"""
        self._data[key] = value
