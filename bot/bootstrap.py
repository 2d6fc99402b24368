"""
Bot Bootstrap

설정 로드, 의존성 주입, 생명주기 관리.
- prices.tf 토큰 발급 및 가격 피드 소켓 연결
- 평판 조회용 REST 클라이언트 공유
"""

import asyncio
import logging
import signal
import sys
from typing import Any

from adapters.pricestf.models import parse_price_message
from adapters.pricestf.rest_client import PricesTfApi, PricesTfApiError
from adapters.pricestf.ws_client import PricesTfSocketManager
from adapters.reputation.rest_client import ReputationRestClient
from bot.bans.checker import BanChecker
from core.config.loader import Options, get_settings
from core.constants import VERSION
from core.logging import setup_logging
from core.types import ShowLog, SocketEvent

logger = logging.getLogger("bot")


class BotEngine:
    """Bot 엔진

    가격 피드 소켓과 평판 조회 클라이언트를 생성하고 관리.

    Args:
        options: 봇 옵션
        api: prices.tf 토큰 제공자 (None이면 생성)
        socket_manager: 가격 피드 소켓 관리자 (None이면 생성)
    """

    def __init__(
        self,
        options: Options,
        api: PricesTfApi | None = None,
        socket_manager: PricesTfSocketManager | None = None,
    ):
        self.options = options
        self.api = api or PricesTfApi()
        self.socket_manager = socket_manager or PricesTfSocketManager(self.api)
        self.reputation_client = ReputationRestClient()

        self._price_update_count = 0

    @property
    def price_update_count(self) -> int:
        """수신한 가격 갱신 이벤트 수"""
        return self._price_update_count

    def create_ban_checker(
        self,
        steam_id: str,
        show_log: ShowLog | None = ShowLog.ALL,
    ) -> BanChecker:
        """steamID 밴 조회기 생성 (REST 클라이언트 공유)"""
        return BanChecker(
            self.options,
            steam_id=steam_id,
            user_id=self.options.bptf_user_id or None,
            show_log=show_log,
            client=self.reputation_client,
        )

    async def start(self) -> None:
        """엔진 시작"""
        # 토큰 발급 실패 시에도 소켓은 시작 (401 수신 시 재발급)
        try:
            await self.api.setup_token()
        except PricesTfApiError as e:
            logger.warning(f"prices.tf 토큰 발급 실패: {e}")

        self.socket_manager.initialize()
        self.socket_manager.on(SocketEvent.MESSAGE, self._on_price_message)
        self.socket_manager.connect()
        logger.info("가격 피드 소켓 연결 시작")

    async def stop(self) -> None:
        """엔진 종료"""
        logger.info("Bot Engine 종료 중...")
        self.socket_manager.shutdown()
        await self.socket_manager.wait_closed()
        await self.api.close()
        await self.reputation_client.close()

    def _on_price_message(self, message: Any) -> None:
        update = parse_price_message(message)
        if update is None:
            return
        self._price_update_count += 1
        logger.debug(
            "가격 갱신",
            extra={
                "sku": update.sku,
                "buy": f"{update.buy_keys}k {update.buy_half_scrap}hs",
                "sell": f"{update.sell_keys}k {update.sell_half_scrap}hs",
            },
        )


def _install_signal_handlers(shutdown_event: asyncio.Event) -> None:
    """SIGINT/SIGTERM 시 종료 이벤트 설정 (Windows는 미지원)"""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_event.set)
        except NotImplementedError:
            pass


async def main() -> None:
    """Bot 메인 함수"""
    setup_logging("bot")

    logger.info("=" * 60)
    logger.info(f"Bot v{VERSION} 시작")
    logger.info("=" * 60)

    # 1. 설정 로드
    try:
        settings = get_settings()
    except Exception as e:
        logger.error(f"설정 로드 실패: {e}")
        sys.exit(1)

    # 2. 엔진 생성
    engine = BotEngine(settings.options)
    shutdown_event = asyncio.Event()
    _install_signal_handlers(shutdown_event)

    logger.info("Bot 실행 (종료: Ctrl+C)")

    try:
        await engine.start()
        await shutdown_event.wait()
    except asyncio.CancelledError:
        logger.info("메인 루프 취소됨")
    finally:
        await engine.stop()

    logger.info("Bot 정상 종료")


if __name__ == "__main__":
    asyncio.run(main())
