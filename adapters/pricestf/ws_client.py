"""
prices.tf 가격 피드 WebSocket 클라이언트

bearer 토큰으로 인증하는 자동 재연결 소켓을 관리.
401 응답을 받으면 토큰을 새로 발급받고 재연결.
"""

import logging
from typing import Any

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import InvalidStatus

from adapters.interfaces import ITokenProvider
from adapters.pricestf.reconnecting import (
    ConnectionFactory,
    EventListener,
    ReconnectingWebSocket,
)
from core.constants import PricesTfEndpoints
from core.types import SocketEvent, SocketState

logger = logging.getLogger(__name__)


OPEN_TIMEOUT = 10  # 연결 타임아웃 (초)
PING_INTERVAL = 30  # ping 간격 (초)
PING_TIMEOUT = 10  # ping 타임아웃 (초)


def create_connection_factory(
    url: str,
    token_provider: ITokenProvider,
) -> ConnectionFactory:
    """토큰 제공자를 사용하는 연결 생성 함수 반환

    토큰은 연결 시도마다 다시 읽으므로 setup_token() 이후 재연결하면
    새 토큰이 사용된다.
    """

    async def open_connection() -> ClientConnection:
        headers = {}
        if token_provider.token:
            headers["Authorization"] = f"Bearer {token_provider.token}"
        return await connect(
            url,
            additional_headers=headers,
            open_timeout=OPEN_TIMEOUT,
            ping_interval=PING_INTERVAL,
            ping_timeout=PING_TIMEOUT,
        )

    return open_connection


def is_unauthorized(error: Any) -> bool:
    """서버가 401로 핸드셰이크를 거절했는지 여부"""
    return isinstance(error, InvalidStatus) and error.response.status_code == 401


class PricesTfSocketManager:
    """prices.tf 소켓 관리자

    Args:
        api: 토큰 제공자 (token, setup_token)
        url: WebSocket URL
        connection_factory: 연결 생성 함수 (None이면 url/api로 생성)

    사용 예시:
    ```python
    manager = PricesTfSocketManager(api)
    manager.initialize()
    manager.on("message", handle_price)
    manager.connect()
    # ...
    manager.shutdown()
    ```
    """

    def __init__(
        self,
        api: ITokenProvider,
        url: str = PricesTfEndpoints.WS_URL,
        connection_factory: ConnectionFactory | None = None,
    ):
        self.api = api
        self.url = url
        self._connection_factory = connection_factory or create_connection_factory(url, api)

        self._ws: ReconnectingWebSocket | None = None
        self._closing: ReconnectingWebSocket | None = None
        self._authenticating = False

    @property
    def state(self) -> SocketState:
        """현재 연결 상태"""
        if self._ws is None:
            return SocketState.UNINITIALIZED
        if self._authenticating:
            return SocketState.AUTHENTICATING
        return self._ws.state

    def initialize(self) -> None:
        """소켓 생성 (기존 소켓은 종료)

        생성만 하고 연결은 connect()에서 시작한다.
        """
        self.shutdown()

        self._ws = ReconnectingWebSocket(
            self._connection_factory,
            start_closed=True,
            max_enqueued_messages=0,
        )
        self._ws.add_event_listener(SocketEvent.OPEN, self._on_open)
        self._ws.add_event_listener(SocketEvent.ERROR, self._on_error)
        self._ws.add_event_listener(SocketEvent.CLOSE, self._on_close)

    def connect(self) -> None:
        """연결 (재)시작"""
        self._require_socket().reconnect()

    def shutdown(self) -> None:
        """소켓 종료 (이미 종료된 경우 무시)"""
        if self._ws is not None:
            self._ws.close()
            self._closing = self._ws
            self._ws = None

    async def wait_closed(self) -> None:
        """shutdown()한 소켓의 연결 루프가 끝날 때까지 대기"""
        closing, self._closing = self._closing, None
        if closing is not None:
            await closing.wait_closed()

    def on(self, event: SocketEvent | str, handler: EventListener) -> None:
        """외부 이벤트 리스너 등록 (open, error, close, message)"""
        self._require_socket().add_event_listener(event, handler)

    async def send(self, data: str | bytes) -> bool:
        """메시지 송신 (연결되지 않았으면 폐기)"""
        if self._ws is None:
            return False
        return await self._ws.send(data)

    def _require_socket(self) -> ReconnectingWebSocket:
        if self._ws is None:
            raise RuntimeError("소켓이 초기화되지 않았습니다. initialize()를 먼저 호출하세요")
        return self._ws

    # -------------------------------------------------------------------------
    # 내부 이벤트 핸들러
    # -------------------------------------------------------------------------

    def _on_open(self, _: Any) -> None:
        logger.debug("Connected to socket server")

    def _on_close(self, _: Any) -> None:
        logger.debug("Disconnected from socket server")

    async def _on_error(self, error: Any) -> None:
        """연결 에러 처리

        현재 연결 시도를 즉시 닫고, 401이면 토큰 갱신 후 재연결.
        토큰 갱신이 실패해도 재연결은 시도한다.
        """
        ws = self._ws
        if ws is None:
            return

        ws.close()

        if not is_unauthorized(error):
            logger.error(
                "Error in prices.tf socket manager",
                extra={"error": str(error)},
            )
            return

        logger.warning("Failed to authenticate with socket server")

        self._authenticating = True
        try:
            await self.api.setup_token()
        except Exception as e:
            logger.error(
                "Error in prices.tf socket manager: 토큰 갱신 실패",
                extra={"error": str(e)},
            )
        finally:
            self._authenticating = False

        # 토큰 갱신 중 shutdown/initialize 되었으면 재연결하지 않음
        if self._ws is ws:
            ws.reconnect()
