"""Runtime configuration for logo loading.

Values come from keyword arguments or, via ``LogoConfig.from_env()``, from
environment variables:

    BFH_THEME_LOGO_ROOT        restrict logo files to this directory tree
    BFH_THEME_LOGO_MAX_BYTES   reject logo files larger than this
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, NamedTuple

from .exceptions import ConfigurationError

LOGO_ROOT_ENV = "BFH_THEME_LOGO_ROOT"
LOGO_MAX_BYTES_ENV = "BFH_THEME_LOGO_MAX_BYTES"

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024

# Bytes read from the start of a file for signature matching
HEADER_SIZE = 12

# Bytes at the end of a file searched for a trailer such as the JPEG end marker
TRAILER_SEARCH_SIZE = 64


class ImageSignature(NamedTuple):
    """Magic bytes identifying one image format.

    ``trailer`` is optional; when set it must appear within the last
    ``TRAILER_SEARCH_SIZE`` bytes of the file.
    """

    format: str
    header: bytes
    trailer: bytes = b""


DEFAULT_SIGNATURES: tuple[ImageSignature, ...] = (
    ImageSignature("png", b"\x89PNG\r\n\x1a\n"),
    ImageSignature("jpeg", b"\xff\xd8", b"\xff\xd9"),
)


@dataclass(frozen=True, slots=True)
class LogoConfig:
    sandbox_root: Path | None = None
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    signatures: tuple[ImageSignature, ...] = field(default=DEFAULT_SIGNATURES)

    def __post_init__(self) -> None:
        if self.max_file_size <= 0:
            raise ConfigurationError("max_file_size must be a positive number of bytes")
        if not self.signatures:
            raise ConfigurationError("at least one image signature is required")
        if self.sandbox_root is not None and not isinstance(self.sandbox_root, Path):
            object.__setattr__(self, "sandbox_root", Path(self.sandbox_root))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LogoConfig":
        env = os.environ if environ is None else environ

        raw_root = env.get(LOGO_ROOT_ENV, "").strip()
        sandbox_root = Path(raw_root).expanduser() if raw_root else None

        raw_max = env.get(LOGO_MAX_BYTES_ENV, "").strip()
        if raw_max:
            try:
                max_file_size = int(raw_max)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{LOGO_MAX_BYTES_ENV} must be an integer, got {raw_max!r}"
                ) from exc
        else:
            max_file_size = DEFAULT_MAX_FILE_SIZE

        return cls(sandbox_root=sandbox_root, max_file_size=max_file_size)
