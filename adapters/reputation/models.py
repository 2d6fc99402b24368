"""
평판 API 응답 파싱

각 사이트의 JSON 응답을 표준 모델로 변환.
형식이 잘못된 응답은 KeyError/TypeError/ValueError를 발생시키고,
REST 클라이언트가 ReputationApiError로 감싼다.
"""

from dataclasses import dataclass
from typing import Any

from adapters.models import SiteOutcome, SiteResult


# 통합 평판 서비스가 사이트 조회 실패 시 반환하는 값
SITE_ERROR_SENTINEL = "Error"


@dataclass(frozen=True)
class AutobotReputation:
    """통합 평판 서비스 응답

    Attributes:
        is_banned: 마켓플레이스 포함 밴 여부
        is_banned_exclude_mptf: 마켓플레이스 제외 밴 여부
        contents: 사이트 이름 → 조회 결과
        with_error: 일부 사이트 조회 실패 여부
    """

    is_banned: bool
    is_banned_exclude_mptf: bool
    contents: dict[str, SiteOutcome]
    with_error: bool = False

    def banned_contents(self) -> dict[str, str]:
        """에러가 아니고 밴인 사이트만 (사이트 → 사유)"""
        return {
            site: outcome.result.content
            for site, outcome in self.contents.items()
            if outcome.result is not None and outcome.result.is_banned
        }


@dataclass(frozen=True)
class BptfUserBans:
    """backpack.tf 사용자 밴 정보"""

    is_banned: bool
    reason: str
    is_steamrep_scammer: bool


@dataclass(frozen=True)
class MptfBanEntry:
    """marketplace.tf 밴 조회 결과 항목"""

    steam_id: str
    banned: bool
    ban_type: str


@dataclass(frozen=True)
class UntrustedEntry:
    """신뢰 불가 목록 항목"""

    reason: str
    source: str
    time: int | None = None

    def describe(self) -> str:
        return f"Reason: {self.reason} - Source: {self.source}"


def parse_site_outcome(value: Any) -> SiteOutcome:
    """통합 응답의 사이트 항목 변환

    "Error" 문자열이면 error, dict면 ok.
    isBanned는 null일 수 있으므로 False로 취급.
    """
    if value == SITE_ERROR_SENTINEL or value is None:
        return SiteOutcome.error()
    if not isinstance(value, dict):
        raise TypeError(f"알 수 없는 사이트 결과 형식: {value!r}")
    return SiteOutcome.ok(
        SiteResult(
            is_banned=bool(value.get("isBanned")),
            content=value.get("content") or "",
        )
    )


def parse_autobot_reputation(data: dict[str, Any]) -> AutobotReputation:
    """통합 평판 서비스 응답 변환"""
    raw_contents = data.get("contents") or {}
    if not isinstance(raw_contents, dict):
        raise TypeError("contents는 매핑이어야 합니다")

    return AutobotReputation(
        is_banned=bool(data["isBanned"]),
        is_banned_exclude_mptf=bool(data["isBannedExcludeMptf"]),
        contents={
            site: parse_site_outcome(value)
            for site, value in raw_contents.items()
        },
        with_error=bool(data.get("with_error", False)),
    )


def parse_bptf_user_bans(data: dict[str, Any], steam_id: str) -> BptfUserBans:
    """backpack.tf users/info 응답 변환

    "all" 또는 "all features" 밴이 있으면 밴으로 판정.
    """
    user = data["users"][steam_id]
    bans = user.get("bans") or {}

    all_ban = bans.get("all")
    all_features_ban = bans.get("all features")

    is_banned = all_ban is not None or all_features_ban is not None

    reason = ""
    if all_ban is not None:
        reason = all_ban.get("reason") or ""
    elif all_features_ban is not None:
        reason = all_features_ban.get("reason") or ""

    return BptfUserBans(
        is_banned=is_banned,
        reason=reason,
        is_steamrep_scammer=bans.get("steamrep_scammer") == 1,
    )


def parse_steamrep_reputation(data: dict[str, Any]) -> SiteResult:
    """SteamRep 평판 응답 변환

    요약(summary)에 "scammer"가 포함되면 밴 (대소문자 무시).
    """
    reputation = data["steamrep"].get("reputation") or {}
    summary = reputation.get("summary") or ""
    return SiteResult(
        is_banned="scammer" in summary.lower(),
        content=reputation.get("full") or "",
    )


def parse_mptf_results(data: Any) -> list[MptfBanEntry] | None:
    """marketplace.tf GetUserBan 응답 변환

    results가 리스트가 아니면 None.
    """
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list):
        return None

    entries = []
    for item in results:
        ban = item.get("ban") or {}
        entries.append(
            MptfBanEntry(
                steam_id=str(item.get("steamid", "")),
                banned=bool(item.get("banned") or False),
                ban_type=ban.get("type") or "",
            )
        )
    return entries


def parse_untrusted_entry(data: dict[str, Any], steam_id: str) -> UntrustedEntry | None:
    """신뢰 불가 목록에서 steamID 항목 조회 (없으면 None)

    항목이 있으면 형식과 관계없이 목록에 있는 것으로 본다.
    """
    entry = data["steamids"].get(steam_id)
    if entry is None:
        return None
    if not isinstance(entry, dict):
        return UntrustedEntry(reason="", source="")
    return UntrustedEntry(
        reason=str(entry.get("reason", "")),
        source=str(entry.get("source", "")),
        time=entry.get("time"),
    )
