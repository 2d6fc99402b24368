"""
설정 로더

options.yaml 로드 및 봇 옵션 생성
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from core.constants import Paths


@dataclass(frozen=True)
class ReputationCheck:
    """평판 조회 설정"""

    check_mptf_banned: bool = False


@dataclass(frozen=True)
class MiscSettings:
    """기타 설정"""

    reputation_check: ReputationCheck = field(default_factory=ReputationCheck)


@dataclass(frozen=True)
class CustomMessage:
    """사용자 정의 메시지

    빈 문자열이면 기본 메시지 사용
    """

    traded_away: str = ""


@dataclass(frozen=True)
class Options:
    """봇 옵션 (options.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    bptf_api_key: str = ""
    mptf_api_key: str = ""
    bptf_user_id: str = ""
    misc_settings: MiscSettings = field(default_factory=MiscSettings)
    custom_message: CustomMessage = field(default_factory=CustomMessage)

    @property
    def reputation_check(self) -> ReputationCheck:
        """평판 조회 설정 바로가기"""
        return self.misc_settings.reputation_check


class OptionsLoadError(Exception):
    """Options 로드 실패 예외"""

    pass


def _get_section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """하위 섹션 조회 (없으면 빈 dict)"""
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise OptionsLoadError(f"options.yaml의 '{key}'는 매핑이어야 합니다")
    return section


def _get_str(data: dict[str, Any], key: str) -> str:
    """문자열 값 조회 (None은 빈 문자열)"""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise OptionsLoadError(f"options.yaml의 '{key}'는 문자열이어야 합니다")
    return value


def parse_options(data: dict[str, Any]) -> Options:
    """dict를 Options로 변환

    Args:
        data: yaml.safe_load 결과

    Returns:
        Options 인스턴스

    Raises:
        OptionsLoadError: 타입이 잘못된 경우
    """
    misc = _get_section(data, "misc_settings")
    reputation = _get_section(misc, "reputation_check")

    check_mptf = reputation.get("check_mptf_banned", False)
    if not isinstance(check_mptf, bool):
        raise OptionsLoadError("'check_mptf_banned'는 true/false여야 합니다")

    custom = _get_section(data, "custom_message")

    return Options(
        bptf_api_key=_get_str(data, "bptf_api_key"),
        mptf_api_key=_get_str(data, "mptf_api_key"),
        bptf_user_id=_get_str(data, "bptf_user_id"),
        misc_settings=MiscSettings(
            reputation_check=ReputationCheck(check_mptf_banned=check_mptf),
        ),
        custom_message=CustomMessage(
            traded_away=_get_str(custom, "traded_away"),
        ),
    )


def load_options(path: Path | None = None) -> Options:
    """options.yaml 파일 로드

    Args:
        path: options.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Options 인스턴스

    Raises:
        OptionsLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.OPTIONS_FILE

    if not path.exists():
        raise OptionsLoadError(f"options.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise OptionsLoadError(f"options.yaml 파싱 실패: {e}") from e

    if data is None:
        raise OptionsLoadError("options.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise OptionsLoadError("options.yaml의 최상위는 매핑이어야 합니다")

    return parse_options(data)


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    options.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _options: Options | None = None

    def __new__(cls, options_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, options_path: Path | None = None) -> None:
        if self._options is None:
            type(self)._options = load_options(options_path)

    @property
    def options(self) -> Options:
        """로드된 옵션"""
        assert self._options is not None
        return self._options

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._options = None


def get_settings(options_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        options_path: options.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(options_path)
