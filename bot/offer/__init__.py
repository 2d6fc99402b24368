"""
Offer 모듈

거래 제안 인벤토리 차이 계산 및 상대방 안내 메시지.
"""

from bot.offer.diff import compute_diff, get_diff
from bot.offer.notify import notify_invalid

__all__ = [
    "compute_diff",
    "get_diff",
    "notify_invalid",
]
