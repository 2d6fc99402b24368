"""
Bans 모듈

통합 평판 서비스 + 사이트별 fallback 밴 조회.
"""

from bot.bans.checker import (
    BanChecker,
    BanCheckError,
    ConfigurationError,
    check_bptf_banned,
)

__all__ = [
    "BanChecker",
    "BanCheckError",
    "ConfigurationError",
    "check_bptf_banned",
]
