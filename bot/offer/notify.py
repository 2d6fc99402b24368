"""
거래 제안 알림 메시지

제안이 더 이상 유효하지 않을 때 상대방에게 고정 메시지 전송.
"""

import logging

from adapters.interfaces import IMessageSender, ITradeOffer
from core.config.loader import Options
from core.constants import Defaults

logger = logging.getLogger(__name__)


async def notify_invalid(
    offer: ITradeOffer,
    sender: IMessageSender,
    options: Options,
) -> None:
    """아이템이 다른 거래로 빠져나간 제안에 대한 안내 전송

    사용자 정의 메시지(custom_message.traded_away)가 있으면 그것을 사용.
    재시도 없음.
    """
    message = options.custom_message.traded_away or Defaults.TRADED_AWAY_MESSAGE

    logger.debug("유효하지 않은 제안 안내 전송", extra={"partner": offer.partner})
    await sender.send_message(offer.partner, message)
