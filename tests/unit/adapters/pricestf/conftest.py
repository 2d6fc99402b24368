"""
prices.tf 테스트 픽스처
"""

import pytest
from websockets.exceptions import InvalidStatus

from tests.utils.fakes import make_invalid_status


@pytest.fixture
def unauthorized_error() -> InvalidStatus:
    """401 핸드셰이크 거절"""
    return make_invalid_status(401)


@pytest.fixture
def forbidden_error() -> InvalidStatus:
    """403 핸드셰이크 거절"""
    return make_invalid_status(403)
