"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import pytest

from core.config.loader import Options, ReputationCheck, MiscSettings, CustomMessage


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_options_file(temp_dir: Path) -> Path:
    """테스트용 options.yaml 파일 생성"""
    options_content = """# 테스트용 options.yaml
bptf_api_key: "bptf_key_12345"
mptf_api_key: "mptf_key_67890"
bptf_user_id: "bptf_user_abc"

misc_settings:
  reputation_check:
    check_mptf_banned: true

custom_message:
  traded_away: "Sorry, those items are gone."
"""
    options_path = temp_dir / "options.yaml"
    options_path.write_text(options_content, encoding="utf-8")
    return options_path


@pytest.fixture
def temp_options_file_minimal(temp_dir: Path) -> Path:
    """필수 항목만 있는 options.yaml 파일 생성"""
    options_path = temp_dir / "options_minimal.yaml"
    options_path.write_text('bptf_api_key: "key"\n', encoding="utf-8")
    return options_path


@pytest.fixture
def options() -> Options:
    """모든 조회가 켜진 Options"""
    return Options(
        bptf_api_key="bptf_key",
        mptf_api_key="mptf_key",
        bptf_user_id="bptf_user",
        misc_settings=MiscSettings(
            reputation_check=ReputationCheck(check_mptf_banned=True),
        ),
        custom_message=CustomMessage(),
    )


@pytest.fixture
def options_without_mptf() -> Options:
    """marketplace.tf 조회가 꺼진 Options"""
    return Options(
        bptf_api_key="bptf_key",
        mptf_api_key="",
        misc_settings=MiscSettings(
            reputation_check=ReputationCheck(check_mptf_banned=False),
        ),
    )
