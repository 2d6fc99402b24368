"""
어댑터 레이어

외부 서비스(평판 API, 가격 피드 등)와의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import (
    ITokenProvider,
    IMessageSender,
    ITradeOffer,
)
from adapters.models import (
    SiteResult,
    SiteOutcome,
    IsBanned,
    BanCache,
)

__all__ = [
    # Interfaces
    "ITokenProvider",
    "IMessageSender",
    "ITradeOffer",
    # Models
    "SiteResult",
    "SiteOutcome",
    "IsBanned",
    "BanCache",
]
