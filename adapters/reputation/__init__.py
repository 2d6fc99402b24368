"""
평판 어댑터

통합 평판 서비스 및 사이트별 밴 조회 API 연동.
"""

from adapters.reputation.rest_client import (
    ReputationRestClient,
    ReputationApiError,
    ReputationTimeoutError,
)
from adapters.reputation.models import (
    AutobotReputation,
    BptfUserBans,
    MptfBanEntry,
    UntrustedEntry,
)

__all__ = [
    "ReputationRestClient",
    "ReputationApiError",
    "ReputationTimeoutError",
    "AutobotReputation",
    "BptfUserBans",
    "MptfBanEntry",
    "UntrustedEntry",
]
