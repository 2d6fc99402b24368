"""
밴 조회 (평판 집계)

1. 통합 평판 서비스(rep.autobot.tf)를 먼저 조회
2. 실패하면 사이트별 조회 4건을 동시에 실행하여 결과를 병합
3. 모두 실패하면 이전 조회 캐시로 판단
   - 밴 이력이 있으면 BanCheckError (호출자는 "알 수 없음"으로 처리)
   - 밴 이력이 없으면 밴 아님
"""

import asyncio
import logging

from adapters.models import BanCache, IsBanned, SiteResult
from adapters.reputation.rest_client import (
    ReputationApiError,
    ReputationRestClient,
    ReputationTimeoutError,
)
from core.config.loader import Options, ReputationCheck
from core.constants import SiteNames
from core.types import ShowLog

logger = logging.getLogger(__name__)


DEFAULT_RULE_KEY = "default-rule"
DEFAULT_RULE_MESSAGE = "all offline and online ban checks failed. internet issues?"


class ConfigurationError(Exception):
    """필수 설정 누락 (marketplace.tf API 키 등)"""
    pass


class BanCheckError(Exception):
    """모든 조회 실패 + 캐시에 밴 이력 있음

    Attributes:
        result: 거부 기본값 판정 (is_banned=True, default-rule)
    """

    def __init__(self, message: str, result: IsBanned):
        self.result = result
        super().__init__(message)


class BanChecker:
    """steamID 한 건에 대한 밴 조회기

    인스턴스마다 BanCache를 가지며, 같은 인스턴스로 재조회하면
    이전 개별 조회 결과가 전체 실패 시 판단 근거가 된다.

    Args:
        options: 봇 옵션 (API 키, 평판 조회 설정)
        steam_id: 조회 대상 steamID
        user_id: backpack.tf user-id 쿠키 값
        show_log: 로그 출력 모드 (None이면 로그 없음)
        client: REST 클라이언트 (None이면 생성)

    사용 예시:
    ```python
    checker = BanChecker(options, steam_id="76561198000000000")
    result = await checker.is_banned()
    if result.is_banned:
        ...
    ```
    """

    def __init__(
        self,
        options: Options,
        steam_id: str,
        user_id: str | None = None,
        show_log: ShowLog | None = ShowLog.ALL,
        client: ReputationRestClient | None = None,
    ):
        self.options = options
        self.steam_id = steam_id
        self.user_id = user_id
        self.show_log = show_log
        self.client = client or ReputationRestClient()
        self.cache = BanCache()
        self._own_client = client is None

    async def close(self) -> None:
        """직접 생성한 REST 클라이언트 종료"""
        if self._own_client:
            await self.client.close()

    @property
    def rep_opt(self) -> ReputationCheck:
        return self.options.reputation_check

    async def is_banned(self) -> IsBanned:
        """최종 밴 판정

        Raises:
            BanCheckError: 모든 조회 실패 + 캐시에 밴 이력 있음
        """
        try:
            reputation = await self.client.get_autobot_reputation(
                self.steam_id,
                check_mptf=self.rep_opt.check_mptf_banned,
            )
        except ReputationApiError as e:
            if self.show_log:
                logger.warning(
                    "통합 평판 조회 실패, 사이트별 조회로 전환",
                    extra={"steam_id": self.steam_id, "error": str(e)},
                )
            return await self._check_each_site()

        if reputation.with_error and self.show_log:
            logger.debug(
                "통합 평판 응답에 일부 사이트 조회 실패 포함",
                extra={"steam_id": self.steam_id},
            )

        result = IsBanned(
            is_banned=(
                reputation.is_banned
                if self.rep_opt.check_mptf_banned
                else reputation.is_banned_exclude_mptf
            ),
            contents=reputation.banned_contents(),
        )
        self._log_result(result)
        return result

    async def _check_each_site(self) -> IsBanned:
        """사이트별 조회 4건을 동시에 실행하고 병합"""
        untrusted, mptf, steamrep, bptf = await asyncio.gather(
            self.check_untrusted(),
            self._check_mptf_absorbed(),
            self.check_steamrep(),
            self.check_bptf(),
        )

        valid = [r for r in (untrusted, mptf, steamrep, bptf) if r is not None]

        if not valid:
            if self.cache.has_ban_history(include_mptf=self.rep_opt.check_mptf_banned):
                raise BanCheckError(
                    f"{self.steam_id}: 모든 밴 조회 실패 (캐시에 밴 이력 있음)",
                    result=IsBanned(
                        is_banned=True,
                        contents={DEFAULT_RULE_KEY: DEFAULT_RULE_MESSAGE},
                    ),
                )
            result = IsBanned(is_banned=False)
            self._log_result(result)
            return result

        contents: dict[str, str] = {}
        if bptf is not None:
            contents[SiteNames.BPTF] = bptf.describe()
        if self.rep_opt.check_mptf_banned and mptf is not None:
            contents[SiteNames.MPTF] = mptf.describe()
        if untrusted is not None:
            contents[SiteNames.AUTOBOT] = untrusted.describe()
        if steamrep is not None:
            contents[SiteNames.STEAMREP] = steamrep.describe()

        result = IsBanned(
            is_banned=any(r.is_banned for r in valid),
            contents=contents,
        )
        self._log_result(result)
        return result

    def _log_result(self, result: IsBanned) -> None:
        """show_log 설정과 결과에 따라 로그 출력"""
        if not self.show_log:
            return
        if result.is_banned:
            logger.warning(f"Bans result for {self.steam_id}: {result.contents}")
        elif self.show_log == ShowLog.ALL:
            logger.debug(f"Bans result for {self.steam_id}: {result.contents}")

    # -------------------------------------------------------------------------
    # 사이트별 조회 (실패 시 None)
    # -------------------------------------------------------------------------

    async def check_bptf(self) -> SiteResult | None:
        """backpack.tf 밴 조회 (API 키 없으면 건너뜀)"""
        if not self.options.bptf_api_key:
            return None

        try:
            bans = await self.client.get_bptf_user_bans(
                self.steam_id,
                api_key=self.options.bptf_api_key,
                user_id=self.user_id,
            )
        except ReputationApiError as e:
            if self.show_log:
                logger.warning("Failed to get data from backpack.tf")
                logger.debug(str(e))
            return None

        self.cache.bptf = bans.is_banned
        self.cache.bptf_steamrep = bans.is_steamrep_scammer
        return SiteResult(is_banned=bans.is_banned, content=bans.reason)

    async def check_steamrep(self) -> SiteResult | None:
        """SteamRep 조회 (실패 시 backpack.tf의 steamrep_scammer 캐시 사용)"""
        try:
            result = await self.client.get_steamrep_reputation(self.steam_id)
        except ReputationApiError as e:
            if self.show_log:
                logger.warning("Failed to get data from SteamRep")
                logger.debug(str(e))
            if self.cache.bptf_steamrep is not None:
                return SiteResult(is_banned=self.cache.bptf_steamrep)
            return None

        self.cache.steamrep = result.is_banned
        return result

    async def check_mptf(self) -> SiteResult | None:
        """marketplace.tf 밴 조회

        Raises:
            ConfigurationError: 조회가 켜져 있는데 API 키가 비어 있음
        """
        if not self.rep_opt.check_mptf_banned:
            return None

        if self.options.mptf_api_key == "":
            raise ConfigurationError("Marketplace.tf API key was not set.")

        try:
            entries = await self.client.get_mptf_user_ban(
                self.steam_id,
                api_key=self.options.mptf_api_key,
            )
        except ReputationApiError as e:
            if self.show_log:
                logger.warning(f"Failed to get data from Marketplace.tf: {e}")
            return None

        if entries is None:
            logger.debug("Marketplace.tf returned invalid data")
            return None

        for entry in entries:
            if entry.steam_id == self.steam_id:
                self.cache.mptf = entry.banned
                return SiteResult(is_banned=entry.banned, content=entry.ban_type)

        return SiteResult(is_banned=False)

    async def _check_mptf_absorbed(self) -> SiteResult | None:
        """check_mptf의 설정 에러를 로그로 남기고 None 처리"""
        try:
            return await self.check_mptf()
        except ConfigurationError as e:
            logger.error(str(e))
            return None

    async def check_untrusted(self, retry: bool = True) -> SiteResult | None:
        """신뢰 불가 목록 조회 (타임아웃 시 1회만 재시도)"""
        try:
            entry = await self.client.get_untrusted_entry(self.steam_id)
        except ReputationTimeoutError as e:
            if retry:
                logger.debug("신뢰 불가 목록 조회 타임아웃, 재시도")
                return await self.check_untrusted(retry=False)
            self._log_untrusted_failure(e)
            return None
        except ReputationApiError as e:
            self._log_untrusted_failure(e)
            return None

        if entry is None:
            return SiteResult(is_banned=False)

        self.cache.community = True
        return SiteResult(is_banned=True, content=entry.describe())

    def _log_untrusted_failure(self, error: Exception) -> None:
        if self.show_log:
            logger.warning("Failed to get data from Github")
            logger.debug(str(error))


async def check_bptf_banned(
    steam_id: str,
    bptf_api_key: str,
    user_id: str | None = None,
    show_log: bool = True,
    client: ReputationRestClient | None = None,
) -> SiteResult:
    """backpack.tf 단독 밴 조회

    BanChecker와 달리 실패를 흡수하지 않는다.

    Raises:
        ReputationApiError: 조회 실패
    """
    own_client = client is None
    rest_client = client or ReputationRestClient()
    try:
        bans = await rest_client.get_bptf_user_bans(
            steam_id,
            api_key=bptf_api_key,
            user_id=user_id,
        )
    except ReputationApiError:
        if show_log:
            logger.warning("Failed to get data from backpack.tf")
        raise
    finally:
        if own_client:
            await rest_client.close()

    return SiteResult(is_banned=bans.is_banned, content=bans.reason)
