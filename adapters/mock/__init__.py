"""
Mock 어댑터

테스트용 Mock 구현체.
"""

from adapters.mock.messenger import MockMessageSender, MessageRecord
from adapters.mock.offer import MockTradeOffer
from adapters.mock.token_provider import MockTokenProvider

__all__ = [
    "MockMessageSender",
    "MessageRecord",
    "MockTradeOffer",
    "MockTokenProvider",
]
