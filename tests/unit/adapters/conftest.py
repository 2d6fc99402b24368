"""
어댑터 테스트 픽스처

평판 API 응답 샘플 및 Mock 객체 제공.
"""

import pytest

from adapters.mock.messenger import MockMessageSender
from adapters.mock.token_provider import MockTokenProvider


STEAM_ID = "76561198000000001"


# -------------------------------------------------------------------------
# Mock 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def steam_id() -> str:
    """조회 대상 steamID"""
    return STEAM_ID


@pytest.fixture
def mock_sender() -> MockMessageSender:
    """Mock 메시지 전송기"""
    return MockMessageSender()


@pytest.fixture
def mock_token_provider() -> MockTokenProvider:
    """Mock 토큰 제공자"""
    return MockTokenProvider()


# -------------------------------------------------------------------------
# 평판 API 응답 샘플
# -------------------------------------------------------------------------

@pytest.fixture
def autobot_response() -> dict:
    """rep.autobot.tf 응답 샘플 (backpack.tf만 밴, marketplace.tf 에러)"""
    return {
        "isBanned": True,
        "isBannedExcludeMptf": True,
        "contents": {
            "TF2Autobot": {"isBanned": False},
            "Marketplace.tf": "Error",
            "Backpack.tf": {"isBanned": True, "content": "Scamming"},
            "Steamrep.com": {"isBanned": None},
        },
        "obtained_time": 1700000000000,
        "last_update": 1700000000000,
        "with_error": True,
    }


@pytest.fixture
def bptf_response() -> dict:
    """backpack.tf users/info 응답 샘플 (밴)"""
    return {
        "users": {
            STEAM_ID: {
                "name": "someone",
                "bans": {
                    "all": {"end": -1, "reason": "Scamming"},
                    "steamrep_scammer": 1,
                },
            }
        }
    }


@pytest.fixture
def bptf_clean_response() -> dict:
    """backpack.tf users/info 응답 샘플 (이상 없음)"""
    return {"users": {STEAM_ID: {"name": "someone"}}}


@pytest.fixture
def steamrep_response() -> dict:
    """SteamRep 응답 샘플 (스캐머)"""
    return {
        "steamrep": {
            "flags": {"status": "exists"},
            "steamID64": STEAM_ID,
            "reputation": {
                "full": "SR SCAMMER",
                "summary": "SCAMMER",
            },
        }
    }


@pytest.fixture
def steamrep_clean_response() -> dict:
    """SteamRep 응답 샘플 (이상 없음)"""
    return {
        "steamrep": {
            "flags": {"status": "exists"},
            "reputation": {"full": "", "summary": "none"},
        }
    }


@pytest.fixture
def mptf_response() -> dict:
    """marketplace.tf GetUserBan 응답 샘플 (밴)"""
    return {
        "success": True,
        "results": [
            {
                "steamid": STEAM_ID,
                "id": 1,
                "name": "someone",
                "banned": True,
                "ban": {"time": 1600000000, "type": "Scammer"},
                "seller": False,
            }
        ],
    }


@pytest.fixture
def untrusted_response() -> dict:
    """신뢰 불가 목록 샘플"""
    return {
        "last_update": 1700000000,
        "steamids": {
            STEAM_ID: {
                "reason": "Chargeback",
                "source": "community report",
                "time": 1690000000,
            }
        },
    }
