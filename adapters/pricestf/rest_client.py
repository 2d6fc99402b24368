"""
prices.tf REST API 클라이언트

가격 피드 WebSocket 인증용 bearer 토큰 발급.
ITokenProvider Protocol 준수.
"""

import logging
from typing import Any

import httpx

from core.constants import Defaults, PricesTfEndpoints

logger = logging.getLogger(__name__)


class PricesTfApiError(Exception):
    """prices.tf API 에러"""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class PricesTfApi:
    """prices.tf API 클라이언트

    Args:
        base_url: REST API 베이스 URL
        timeout: 요청 타임아웃 (초)

    사용 예시:
    ```python
    api = PricesTfApi()
    await api.setup_token()
    headers = {"Authorization": f"Bearer {api.token}"}
    ```
    """

    def __init__(
        self,
        base_url: str = PricesTfEndpoints.API_URL,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token: str | None = None
        self._client: httpx.AsyncClient | None = None

    @property
    def token(self) -> str | None:
        """현재 access 토큰"""
        return self._token

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 반환 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def setup_token(self) -> None:
        """access 토큰 발급 후 저장

        Raises:
            PricesTfApiError: 발급 실패
        """
        url = f"{self.base_url}/auth/access"
        try:
            client = await self._get_client()
            response = await client.post(url)
        except httpx.HTTPError as e:
            raise PricesTfApiError(f"토큰 요청 실패: {e}") from e

        if response.status_code != 200:
            raise PricesTfApiError(
                f"토큰 요청 실패: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data: Any = response.json()
            token = data["accessToken"]
        except (ValueError, KeyError, TypeError) as e:
            raise PricesTfApiError("토큰 응답 형식 오류") from e

        self._token = token
        logger.debug("prices.tf 토큰 발급 완료")

    async def __aenter__(self) -> "PricesTfApi":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
