"""
자동 재연결 WebSocket

websockets 연결을 감싸 이벤트(open/error/close/message) 리스너 방식으로 제공.
- start_closed=True면 reconnect() 호출 전까지 연결하지 않음
- 서버가 연결을 끊으면 지수 백오프로 재연결
- 연결 시도 실패 시 error 이벤트 후 재시도 (리스너가 close()하면 중단)
- 연결되지 않은 동안 send()한 메시지는 max_enqueued_messages까지만 보관
"""

import asyncio
import inspect
import logging
from collections import deque
from typing import Any, Awaitable, Callable

from websockets.asyncio.client import ClientConnection
from websockets.exceptions import ConnectionClosed

from core.types import SocketEvent, SocketState

logger = logging.getLogger(__name__)


# 콜백 타입 정의
ConnectionFactory = Callable[[], Awaitable[ClientConnection]]
EventListener = Callable[[Any], Awaitable[None] | None]


class ReconnectingWebSocket:
    """자동 재연결 WebSocket

    리스너는 인자 1개를 받는다:
    - open: None
    - error: 발생한 예외
    - close: None
    - message: 수신한 메시지 (str 또는 bytes)

    reconnect()/close()는 실행 중인 이벤트 루프 안에서 호출해야 한다.

    Args:
        connection_factory: 연결 생성 함수 (매 연결 시도마다 호출)
        start_closed: True면 생성 시 연결하지 않음
        max_enqueued_messages: 연결 전 보관할 최대 메시지 수 (0이면 폐기)
    """

    RECONNECT_MIN_DELAY = 1  # 최소 재연결 대기 (초)
    RECONNECT_MAX_DELAY = 30  # 최대 재연결 대기 (초)

    def __init__(
        self,
        connection_factory: ConnectionFactory,
        start_closed: bool = True,
        max_enqueued_messages: int = 0,
    ):
        self._connection_factory = connection_factory
        self.max_enqueued_messages = max_enqueued_messages

        self._listeners: dict[str, list[EventListener]] = {
            event.value: [] for event in SocketEvent
        }
        self._queue: deque[str | bytes] = deque()

        self._state = SocketState.CLOSED
        self._ws: ClientConnection | None = None
        self._task: asyncio.Task[None] | None = None
        # reconnect()/close()마다 증가, 이전 실행 루프 종료 판단용
        self._generation = 0

        if not start_closed:
            self.reconnect()

    @property
    def state(self) -> SocketState:
        """현재 연결 상태"""
        return self._state

    # -------------------------------------------------------------------------
    # 리스너
    # -------------------------------------------------------------------------

    def add_event_listener(self, event: SocketEvent | str, listener: EventListener) -> None:
        """이벤트 리스너 등록"""
        self._listeners[SocketEvent(event).value].append(listener)

    async def _dispatch(self, event: SocketEvent, payload: Any) -> None:
        """리스너 호출 (리스너 예외는 로그만 남김)"""
        for listener in list(self._listeners[event.value]):
            try:
                result = listener(payload)
                if inspect.isawaitable(result):
                    await result
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(
                    "이벤트 리스너 에러",
                    extra={"event": event.value, "error": str(e)},
                )

    # -------------------------------------------------------------------------
    # 연결 제어
    # -------------------------------------------------------------------------

    def reconnect(self) -> None:
        """(재)연결 시작

        진행 중인 연결은 정리하고 새 연결 루프를 시작한다.
        """
        self._generation += 1
        self._cancel_task()
        self._task = asyncio.get_running_loop().create_task(
            self._run(self._generation)
        )

    def close(self) -> None:
        """연결 종료 (자동 재연결 중단)"""
        self._generation += 1
        self._cancel_task()
        self._queue.clear()
        self._state = SocketState.CLOSED

    async def wait_closed(self) -> None:
        """실행 중인 연결 루프가 끝날 때까지 대기"""
        task = self._task
        if task is None or task is asyncio.current_task():
            return
        try:
            await task
        except asyncio.CancelledError:
            pass

    def _cancel_task(self) -> None:
        """이전 연결 루프 취소

        리스너 안(연결 루프 자신)에서 호출된 경우에는 취소하지 않고
        generation 변경으로 루프가 스스로 종료하게 둔다.
        """
        task = self._task
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    # -------------------------------------------------------------------------
    # 송신
    # -------------------------------------------------------------------------

    async def send(self, data: str | bytes) -> bool:
        """메시지 송신

        Returns:
            송신(또는 보관) 여부. 연결 전이고 보관 한도를 넘으면 False
        """
        if self._ws is not None and self._state == SocketState.OPEN:
            await self._ws.send(data)
            return True

        if len(self._queue) < self.max_enqueued_messages:
            self._queue.append(data)
            return True

        logger.debug("연결되지 않아 메시지 폐기")
        return False

    async def _flush_queue(self, ws: ClientConnection) -> None:
        while self._queue:
            await ws.send(self._queue.popleft())

    # -------------------------------------------------------------------------
    # 연결 루프
    # -------------------------------------------------------------------------

    async def _run(self, generation: int) -> None:
        """연결 → 수신 → (끊기면) 백오프 후 재연결"""
        delay = self.RECONNECT_MIN_DELAY

        while self._is_current(generation):
            self._state = SocketState.CONNECTING

            try:
                ws = await self._connection_factory()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                if self._is_current(generation):
                    self._state = SocketState.CLOSED
                await self._dispatch(SocketEvent.ERROR, e)
            else:
                delay = self.RECONNECT_MIN_DELAY
                await self._serve(ws, generation)

            if not self._is_current(generation):
                return

            logger.info("WebSocket 재연결 대기", extra={"delay": delay})
            await asyncio.sleep(delay)
            delay = min(delay * 2, self.RECONNECT_MAX_DELAY)

    async def _serve(self, ws: ClientConnection, generation: int) -> None:
        """연결 하나의 수명 동안 메시지 수신"""
        self._ws = ws
        try:
            self._state = SocketState.OPEN
            await self._dispatch(SocketEvent.OPEN, None)
            # open 리스너가 close/reconnect 했으면 수신하지 않고 종료
            if not self._is_current(generation):
                return
            await self._flush_queue(ws)

            async for message in ws:
                await self._dispatch(SocketEvent.MESSAGE, message)
                if not self._is_current(generation):
                    break
        except ConnectionClosed as e:
            logger.warning(
                "WebSocket 연결 끊김",
                extra={"code": e.rcvd.code if e.rcvd else None},
            )
        finally:
            if self._ws is ws:
                self._ws = None
            if self._is_current(generation):
                self._state = SocketState.CLOSED
            await ws.close()
            await self._dispatch(SocketEvent.CLOSE, None)
