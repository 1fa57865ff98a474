from pathlib import Path

import pytest

from bfh_theme.config import (
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_SIGNATURES,
    LOGO_MAX_BYTES_ENV,
    LOGO_ROOT_ENV,
    LogoConfig,
)
from bfh_theme.exceptions import ConfigurationError


def test_defaults_have_no_sandbox() -> None:
    config = LogoConfig.from_env({})
    assert config.sandbox_root is None
    assert config.max_file_size == DEFAULT_MAX_FILE_SIZE
    assert [sig.format for sig in config.signatures] == ["png", "jpeg"]


def test_env_overrides(tmp_path: Path) -> None:
    config = LogoConfig.from_env({LOGO_ROOT_ENV: str(tmp_path), LOGO_MAX_BYTES_ENV: "2048"})
    assert config.sandbox_root == tmp_path
    assert config.max_file_size == 2048


def test_blank_root_means_no_sandbox() -> None:
    assert LogoConfig.from_env({LOGO_ROOT_ENV: "   "}).sandbox_root is None


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(LOGO_ROOT_ENV, str(tmp_path))
    assert LogoConfig.from_env().sandbox_root == tmp_path


@pytest.mark.parametrize("raw", ["ten", "1.5"])
def test_non_integer_max_bytes_raises(raw: str) -> None:
    with pytest.raises(ConfigurationError):
        LogoConfig.from_env({LOGO_MAX_BYTES_ENV: raw})


def test_non_positive_max_bytes_raises() -> None:
    with pytest.raises(ConfigurationError):
        LogoConfig(max_file_size=0)


def test_empty_signature_set_raises() -> None:
    with pytest.raises(ConfigurationError):
        LogoConfig(signatures=())


def test_string_sandbox_root_is_coerced(tmp_path: Path) -> None:
    config = LogoConfig(sandbox_root=str(tmp_path))
    assert config.sandbox_root == tmp_path
    assert config.signatures == DEFAULT_SIGNATURES
