"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class ShowLog(str, Enum):
    """밴 조회 결과 로그 출력 모드"""

    ALL = "all"  # 모든 결과 출력
    BANNED = "banned"  # 밴 결과만 출력


class SocketState(str, Enum):
    """가격 피드 WebSocket 연결 상태"""

    UNINITIALIZED = "UNINITIALIZED"
    CONNECTING = "CONNECTING"
    OPEN = "OPEN"
    AUTHENTICATING = "AUTHENTICATING"  # 토큰 갱신 중
    CLOSED = "CLOSED"


class SocketEvent(str, Enum):
    """WebSocket 이벤트 이름"""

    OPEN = "open"
    ERROR = "error"
    CLOSE = "close"
    MESSAGE = "message"
