"""
어댑터 공통 데이터 모델

외부 평판 API 응답을 표준화한 도메인 모델.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SiteResult:
    """사이트별 밴 조회 결과

    조회 불가는 SiteResult 대신 None으로 표현.
    is_banned=False는 "조회 성공, 이상 없음"을 의미.

    Attributes:
        is_banned: 밴 여부
        content: 밴 사유 등 부가 정보
    """

    is_banned: bool
    content: str = ""

    def describe(self) -> str:
        """사람이 읽을 수 있는 요약 ("banned - 사유" 또는 "clean")"""
        if not self.is_banned:
            return "clean"
        if self.content:
            return f"banned - {self.content}"
        return "banned"


@dataclass(frozen=True)
class SiteOutcome:
    """통합 평판 응답의 사이트별 항목

    서비스가 해당 사이트 조회에 실패하면 "Error" 문자열을 반환하므로
    ok(결과 있음) / error 두 경우로 구분한다.
    """

    result: SiteResult | None = None

    @classmethod
    def ok(cls, result: SiteResult) -> "SiteOutcome":
        return cls(result=result)

    @classmethod
    def error(cls) -> "SiteOutcome":
        return cls(result=None)

    @property
    def is_error(self) -> bool:
        return self.result is None

    @property
    def is_banned(self) -> bool:
        """결과가 있고 밴인 경우에만 True"""
        return self.result is not None and self.result.is_banned


@dataclass
class IsBanned:
    """최종 밴 판정

    Attributes:
        is_banned: 최종 밴 여부
        contents: 사이트 이름 → 사람이 읽을 수 있는 설명
    """

    is_banned: bool
    contents: dict[str, str] = field(default_factory=dict)


@dataclass
class BanCache:
    """소스별 마지막 조회 결과

    None은 아직 조회된 적 없음을 의미.
    개별 조회 성공 시에만 갱신되고, 모든 조회가 실패했을 때만 참조된다
    (bptf_steamrep은 SteamRep 조회 실패 시 대체값으로도 사용).
    """

    bptf: bool | None = None
    bptf_steamrep: bool | None = None
    steamrep: bool | None = None
    community: bool | None = None
    mptf: bool | None = None

    def has_ban_history(self, include_mptf: bool) -> bool:
        """캐시된 값 중 하나라도 밴이면 True"""
        flags = [self.bptf, self.bptf_steamrep, self.steamrep, self.community]
        if include_mptf:
            flags.append(self.mptf)
        return any(flags)
