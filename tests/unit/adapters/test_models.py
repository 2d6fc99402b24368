"""
어댑터 공통 모델 테스트
"""

from adapters.models import BanCache, IsBanned, SiteOutcome, SiteResult


class TestSiteResult:
    """SiteResult 테스트"""

    def test_describe_clean(self) -> None:
        assert SiteResult(is_banned=False, content="ignored").describe() == "clean"

    def test_describe_banned_with_reason(self) -> None:
        assert SiteResult(is_banned=True, content="Scamming").describe() == "banned - Scamming"

    def test_describe_banned_without_reason(self) -> None:
        assert SiteResult(is_banned=True).describe() == "banned"


class TestSiteOutcome:
    """SiteOutcome 테스트"""

    def test_error(self) -> None:
        outcome = SiteOutcome.error()
        assert outcome.is_error
        assert not outcome.is_banned

    def test_ok_banned(self) -> None:
        outcome = SiteOutcome.ok(SiteResult(is_banned=True))
        assert not outcome.is_error
        assert outcome.is_banned

    def test_ok_clean(self) -> None:
        assert not SiteOutcome.ok(SiteResult(is_banned=False)).is_banned


class TestIsBanned:
    """IsBanned 테스트"""

    def test_default_contents_not_shared(self) -> None:
        first = IsBanned(is_banned=False)
        second = IsBanned(is_banned=False)
        first.contents["x"] = "y"

        assert second.contents == {}


class TestBanCache:
    """BanCache 테스트"""

    def test_empty_cache(self) -> None:
        assert BanCache().has_ban_history(include_mptf=True) is False

    def test_false_values(self) -> None:
        cache = BanCache(bptf=False, steamrep=False, community=False)
        assert cache.has_ban_history(include_mptf=True) is False

    def test_community_flag(self) -> None:
        assert BanCache(community=True).has_ban_history(include_mptf=False) is True

    def test_bptf_steamrep_flag(self) -> None:
        assert BanCache(bptf_steamrep=True).has_ban_history(include_mptf=False) is True

    def test_mptf_only_counts_when_enabled(self) -> None:
        cache = BanCache(mptf=True)

        assert cache.has_ban_history(include_mptf=False) is False
        assert cache.has_ban_history(include_mptf=True) is True
