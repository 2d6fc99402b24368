"""
평판 응답 파싱 테스트
"""

import pytest

from adapters.models import SiteResult
from adapters.reputation.models import (
    parse_autobot_reputation,
    parse_bptf_user_bans,
    parse_mptf_results,
    parse_site_outcome,
    parse_steamrep_reputation,
    parse_untrusted_entry,
)


class TestParseSiteOutcome:
    """사이트 항목 변환 테스트"""

    def test_error_sentinel(self) -> None:
        """"Error" 문자열은 error"""
        outcome = parse_site_outcome("Error")
        assert outcome.is_error
        assert outcome.is_banned is False

    def test_banned_result(self) -> None:
        outcome = parse_site_outcome({"isBanned": True, "content": "Scamming"})
        assert not outcome.is_error
        assert outcome.result == SiteResult(is_banned=True, content="Scamming")

    def test_null_is_banned_treated_as_clean(self) -> None:
        """isBanned가 null이면 밴 아님"""
        outcome = parse_site_outcome({"isBanned": None})
        assert outcome.result == SiteResult(is_banned=False)

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(TypeError):
            parse_site_outcome(123)


class TestParseAutobotReputation:
    """통합 평판 응답 변환 테스트"""

    def test_parse(self, autobot_response: dict) -> None:
        rep = parse_autobot_reputation(autobot_response)

        assert rep.is_banned is True
        assert rep.is_banned_exclude_mptf is True
        assert rep.with_error is True
        assert rep.contents["Marketplace.tf"].is_error
        assert rep.contents["Backpack.tf"].is_banned

    def test_banned_contents_excludes_errors_and_clean(self, autobot_response: dict) -> None:
        """에러/이상 없음 사이트는 제외"""
        rep = parse_autobot_reputation(autobot_response)
        assert rep.banned_contents() == {"Backpack.tf": "Scamming"}

    def test_missing_field_raises(self) -> None:
        with pytest.raises(KeyError):
            parse_autobot_reputation({"contents": {}})


class TestParseBptfUserBans:
    """backpack.tf 응답 변환 테스트"""

    def test_all_ban(self, bptf_response: dict, steam_id: str) -> None:
        bans = parse_bptf_user_bans(bptf_response, steam_id)
        assert bans.is_banned is True
        assert bans.reason == "Scamming"
        assert bans.is_steamrep_scammer is True

    def test_all_features_ban(self, steam_id: str) -> None:
        data = {"users": {steam_id: {"bans": {"all features": {"reason": "Trade ban"}}}}}
        bans = parse_bptf_user_bans(data, steam_id)
        assert bans.is_banned is True
        assert bans.reason == "Trade ban"
        assert bans.is_steamrep_scammer is False

    def test_no_bans(self, bptf_clean_response: dict, steam_id: str) -> None:
        bans = parse_bptf_user_bans(bptf_clean_response, steam_id)
        assert bans.is_banned is False
        assert bans.reason == ""

    def test_missing_user_raises(self, bptf_clean_response: dict) -> None:
        with pytest.raises(KeyError):
            parse_bptf_user_bans(bptf_clean_response, "other")


class TestParseSteamrep:
    """SteamRep 응답 변환 테스트"""

    def test_scammer(self, steamrep_response: dict) -> None:
        result = parse_steamrep_reputation(steamrep_response)
        assert result == SiteResult(is_banned=True, content="SR SCAMMER")

    def test_case_insensitive(self) -> None:
        data = {"steamrep": {"reputation": {"summary": "Known Scammer"}}}
        assert parse_steamrep_reputation(data).is_banned is True

    def test_clean(self, steamrep_clean_response: dict) -> None:
        assert parse_steamrep_reputation(steamrep_clean_response).is_banned is False

    def test_missing_reputation_is_clean(self) -> None:
        assert parse_steamrep_reputation({"steamrep": {}}).is_banned is False


class TestParseMptfResults:
    """marketplace.tf 응답 변환 테스트"""

    def test_parse(self, mptf_response: dict, steam_id: str) -> None:
        entries = parse_mptf_results(mptf_response)
        assert entries is not None
        assert len(entries) == 1
        assert entries[0].steam_id == steam_id
        assert entries[0].banned is True
        assert entries[0].ban_type == "Scammer"

    def test_results_not_list(self) -> None:
        assert parse_mptf_results({"results": "oops"}) is None
        assert parse_mptf_results({}) is None
        assert parse_mptf_results(None) is None

    def test_missing_banned_defaults_false(self) -> None:
        entries = parse_mptf_results({"results": [{"steamid": "1"}]})
        assert entries is not None
        assert entries[0].banned is False
        assert entries[0].ban_type == ""


class TestParseUntrustedEntry:
    """신뢰 불가 목록 조회 테스트"""

    def test_listed(self, untrusted_response: dict, steam_id: str) -> None:
        entry = parse_untrusted_entry(untrusted_response, steam_id)
        assert entry is not None
        assert entry.describe() == "Reason: Chargeback - Source: community report"

    def test_not_listed(self, untrusted_response: dict) -> None:
        assert parse_untrusted_entry(untrusted_response, "other") is None

    def test_listed_without_details(self, steam_id: str) -> None:
        """항목 형식이 매핑이 아니어도 목록에 있으면 밴"""
        entry = parse_untrusted_entry({"steamids": {steam_id: True}}, steam_id)

        assert entry is not None
        assert entry.reason == ""
        assert entry.source == ""
