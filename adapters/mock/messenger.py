"""
Mock 메시지 전송

테스트용 Mock 채팅 메시지 전송기.
IMessageSender Protocol 준수.
"""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class MessageRecord:
    """전송 기록"""

    steam_id: str
    message: str
    timestamp: datetime


class MockMessageSender:
    """Mock 메시지 전송기

    IMessageSender Protocol 구현.
    전송된 모든 메시지를 기록하여 테스트에서 검증 가능.

    사용 예시:
    ```python
    sender = MockMessageSender()

    await sender.send_message("76561198000000000", "hello")

    assert sender.message_count == 1
    assert sender.last_message.message == "hello"
    ```
    """

    def __init__(self) -> None:
        self.messages: list[MessageRecord] = []

    async def send_message(self, steam_id: str, message: str) -> None:
        """메시지 전송 (기록만 함)"""
        self.messages.append(
            MessageRecord(
                steam_id=steam_id,
                message=message,
                timestamp=datetime.now(timezone.utc),
            )
        )

    # -------------------------------------------------------------------------
    # 테스트 헬퍼 메서드
    # -------------------------------------------------------------------------

    def clear(self) -> None:
        """전송 기록 초기화"""
        self.messages.clear()

    def get_by_recipient(self, steam_id: str) -> list[MessageRecord]:
        """특정 수신자에게 보낸 메시지 조회"""
        return [m for m in self.messages if m.steam_id == steam_id]

    @property
    def last_message(self) -> MessageRecord | None:
        """마지막 메시지 조회"""
        return self.messages[-1] if self.messages else None

    @property
    def message_count(self) -> int:
        """전체 메시지 수"""
        return len(self.messages)
