"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ITokenProvider(Protocol):
    """가격 피드 인증 토큰 제공자 인터페이스"""

    @property
    def token(self) -> str | None:
        """현재 bearer 토큰 (없으면 None)"""
        ...

    async def setup_token(self) -> None:
        """새 토큰 발급

        Raises:
            Exception: 발급 실패 시 (구현체별 예외)
        """
        ...


@runtime_checkable
class IMessageSender(Protocol):
    """거래 상대방 채팅 메시지 전송 인터페이스"""

    async def send_message(self, steam_id: str, message: str) -> None:
        """메시지 전송 (재시도 없음)

        Args:
            steam_id: 수신자 steamID
            message: 메시지 본문
        """
        ...


@runtime_checkable
class ITradeOffer(Protocol):
    """거래 제안 인터페이스

    외부 거래 제안 라이브러리 객체 중 이 패키지가 사용하는 부분만 정의.
    """

    @property
    def partner(self) -> str:
        """거래 상대방 steamID"""
        ...

    def data(self, key: str) -> Any:
        """제안에 첨부된 데이터 조회 (없으면 None)"""
        ...
