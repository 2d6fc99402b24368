"""
테스트용 대역 객체
"""

import asyncio
from typing import Any

from websockets.datastructures import Headers
from websockets.exceptions import InvalidStatus
from websockets.http11 import Response


class FakeConnection:
    """websockets ClientConnection 대역

    messages를 순서대로 내보낸 뒤, hold_open이면 close()까지 대기하고
    아니면 서버가 연결을 끊은 것처럼 종료한다.
    """

    def __init__(self, messages: list[Any] | None = None, hold_open: bool = True):
        self._messages = list(messages or [])
        self.hold_open = hold_open
        self.sent: list[Any] = []
        self.closed = False
        self._closed_event = asyncio.Event()

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for message in self._messages:
            yield message
        if self.hold_open:
            await self._closed_event.wait()

    async def send(self, data: Any) -> None:
        self.sent.append(data)

    async def close(self) -> None:
        self.closed = True
        self._closed_event.set()


def make_invalid_status(status_code: int) -> InvalidStatus:
    """핸드셰이크 거절 예외 생성"""
    return InvalidStatus(Response(status_code, "Rejected", Headers(), b""))
