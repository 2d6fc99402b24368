"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

VERSION: str = "0.1.0"


class ReputationEndpoints:
    """평판(밴) 조회 API 엔드포인트 (고정값)"""

    # 통합 평판 서비스 (1차 조회)
    AUTOBOT_URL: str = "https://rep.autobot.tf/json"

    # 사이트별 개별 조회 (fallback)
    BPTF_USER_INFO_URL: str = "https://api.backpack.tf/api/users/info/v1"
    STEAMREP_URL: str = "https://steamrep.com/api/beta4/reputation"
    MPTF_USER_BAN_URL: str = "https://marketplace.tf/api/Bans/GetUserBan/v2"
    UNTRUSTED_LIST_URL: str = (
        "https://raw.githubusercontent.com/TF2Autobot/untrusted-steam-ids/master/untrusted.min.json"
    )


class PricesTfEndpoints:
    """prices.tf 엔드포인트 (고정값)"""

    API_URL: str = "https://api2.prices.tf"
    WS_URL: str = "wss://ws.prices.tf"


class SiteNames:
    """밴 조회 결과(contents)에 표시되는 사이트 이름"""

    AUTOBOT: str = "TF2Autobot"
    MPTF: str = "Marketplace.tf"
    BPTF: str = "Backpack.tf"
    STEAMREP: str = "Steamrep.com"


class Defaults:
    """기본값 상수"""

    USER_AGENT: str = f"TF2Autobot@{VERSION}"

    HTTP_TIMEOUT_SEC: float = 30.0
    UNTRUSTED_LIST_TIMEOUT_SEC: float = 60.0

    TRADED_AWAY_MESSAGE: str = (
        "/pre ❌ Ohh nooooes! Your offer is no longer available. "
        "Reason: Items not available (traded away in a different trade)."
    )


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    BOT_LOGS_DIR: Path = LOGS_DIR / "bot"

    # 설정 파일
    OPTIONS_FILE: Path = CONFIG_DIR / "options.yaml"
