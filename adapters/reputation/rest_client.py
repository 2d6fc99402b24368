"""
평판(밴) 조회 REST 클라이언트

통합 평판 서비스와 사이트별(backpack.tf, SteamRep, marketplace.tf,
신뢰 불가 목록) API를 httpx로 호출하고 표준 모델로 변환.
"""

import logging
from typing import Any

import httpx

from adapters.reputation.models import (
    AutobotReputation,
    BptfUserBans,
    MptfBanEntry,
    UntrustedEntry,
    parse_autobot_reputation,
    parse_bptf_user_bans,
    parse_mptf_results,
    parse_steamrep_reputation,
    parse_untrusted_entry,
)
from adapters.models import SiteResult
from core.constants import Defaults, ReputationEndpoints

logger = logging.getLogger(__name__)


class ReputationApiError(Exception):
    """평판 API 에러

    네트워크 실패, HTTP 에러 응답, 잘못된 응답 형식 시 발생.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ReputationTimeoutError(ReputationApiError):
    """요청 타임아웃"""
    pass


class ReputationRestClient:
    """평판 조회 REST 클라이언트

    Args:
        timeout: 기본 요청 타임아웃 (초)
        user_agent: User-Agent 헤더 값
    """

    def __init__(
        self,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
        user_agent: str = Defaults.USER_AGENT,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """API 요청 실행

        Returns:
            JSON 응답

        Raises:
            ReputationTimeoutError: 타임아웃
            ReputationApiError: 네트워크 에러, HTTP 에러 응답, JSON 파싱 실패
        """
        client = await self._get_client()
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise ReputationTimeoutError(f"요청 타임아웃: {url}") from e
        except httpx.HTTPError as e:
            raise ReputationApiError(f"요청 실패: {url} ({e})") from e

        if response.status_code >= 400:
            raise ReputationApiError(
                f"HTTP {response.status_code}: {url}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ReputationApiError(f"JSON 파싱 실패: {url}") from e

    # -------------------------------------------------------------------------
    # 통합 평판 서비스
    # -------------------------------------------------------------------------

    async def get_autobot_reputation(
        self,
        steam_id: str,
        check_mptf: bool,
    ) -> AutobotReputation:
        """통합 평판 조회

        Args:
            steam_id: 조회 대상 steamID
            check_mptf: marketplace.tf 결과 포함 여부
        """
        data = await self._request(
            "GET",
            f"{ReputationEndpoints.AUTOBOT_URL}/{steam_id}",
            params={"checkMptf": check_mptf},
        )
        try:
            return parse_autobot_reputation(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ReputationApiError(f"통합 평판 응답 형식 오류: {e}") from e

    # -------------------------------------------------------------------------
    # 사이트별 조회
    # -------------------------------------------------------------------------

    async def get_bptf_user_bans(
        self,
        steam_id: str,
        api_key: str,
        user_id: str | None = None,
    ) -> BptfUserBans:
        """backpack.tf 사용자 밴 정보 조회"""
        data = await self._request(
            "GET",
            ReputationEndpoints.BPTF_USER_INFO_URL,
            params={"key": api_key, "steamids": steam_id},
            headers={
                "User-Agent": self.user_agent,
                "Cookie": f"user-id={user_id or ''}",
            },
        )
        try:
            return parse_bptf_user_bans(data, steam_id)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ReputationApiError(f"backpack.tf 응답 형식 오류: {e}") from e

    async def get_steamrep_reputation(self, steam_id: str) -> SiteResult:
        """SteamRep 평판 조회"""
        data = await self._request(
            "GET",
            f"{ReputationEndpoints.STEAMREP_URL}/{steam_id}",
            params={"json": 1},
        )
        try:
            return parse_steamrep_reputation(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ReputationApiError(f"SteamRep 응답 형식 오류: {e}") from e

    async def get_mptf_user_ban(
        self,
        steam_id: str,
        api_key: str,
    ) -> list[MptfBanEntry] | None:
        """marketplace.tf 밴 조회

        Returns:
            결과 목록 (응답의 results가 리스트가 아니면 None)
        """
        data = await self._request(
            "POST",
            ReputationEndpoints.MPTF_USER_BAN_URL,
            params={"key": api_key, "steamid": steam_id},
            headers={"User-Agent": self.user_agent},
        )
        try:
            return parse_mptf_results(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ReputationApiError(f"marketplace.tf 응답 형식 오류: {e}") from e

    async def get_untrusted_entry(
        self,
        steam_id: str,
        timeout: float = Defaults.UNTRUSTED_LIST_TIMEOUT_SEC,
    ) -> UntrustedEntry | None:
        """신뢰 불가 목록 조회

        Returns:
            목록에 있으면 항목, 없으면 None
        """
        data = await self._request(
            "GET",
            ReputationEndpoints.UNTRUSTED_LIST_URL,
            timeout=timeout,
        )
        try:
            return parse_untrusted_entry(data, steam_id)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ReputationApiError(f"신뢰 불가 목록 형식 오류: {e}") from e

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "ReputationRestClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
