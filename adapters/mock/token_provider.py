"""
Mock 토큰 제공자

ITokenProvider Protocol 준수.
"""


class MockTokenProvider:
    """Mock 토큰 제공자

    setup_token() 호출마다 새 토큰("token-1", "token-2", ...)을 발급.

    Args:
        should_fail: True면 setup_token()이 RuntimeError 발생
    """

    def __init__(self, token: str | None = "token-0", should_fail: bool = False):
        self._token = token
        self.should_fail = should_fail
        self.setup_count = 0

    @property
    def token(self) -> str | None:
        return self._token

    async def setup_token(self) -> None:
        self.setup_count += 1
        if self.should_fail:
            raise RuntimeError("Mock token error")
        self._token = f"token-{self.setup_count}"
