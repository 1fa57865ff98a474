"""
Logo path validation.

A candidate path is checked in order of cost: path shape first, then file
metadata, and only then file content.

1. Normalize (``~``, ``..``, symlinks) twice; both results must agree.
2. With a sandbox root configured, the path must stay inside it.
3. The target must be a readable, non-empty regular file within the size bound.
4. Its header (and end marker near the file end, for JPEG) must match a
   known image signature.

The result is not cached.  A file swapped after validation is not detected;
callers needing stronger guarantees must control the directory themselves.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import HEADER_SIZE, TRAILER_SEARCH_SIZE, ImageSignature, LogoConfig
from .exceptions import PathSecurityError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidatedPath:
    path: Path
    format: str
    size: int


def _normalize(path: Path, original: str) -> Path:
    try:
        return path.resolve()
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loop on older Pythons
        raise PathSecurityError(f"Invalid file path: {original}") from exc


def _reject(message: str) -> PathSecurityError:
    logger.warning("Rejected logo path: %s", message)
    return PathSecurityError(message)


def _check_sandbox(normalized: Path, sandbox_root: Path) -> None:
    root = sandbox_root.expanduser()
    try:
        root = root.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise PathSecurityError(f"Invalid logo sandbox root: {sandbox_root}") from exc

    if normalized != root and root not in normalized.parents:
        raise _reject("Logo file must reside within the allowed root directory")


def _check_file(normalized: Path, max_file_size: int) -> int:
    if not normalized.exists():
        raise _reject(f"Logo file not found: {normalized.name}")
    if not normalized.is_file():
        raise _reject(f"Logo path is not a regular file: {normalized.name}")
    if not os.access(normalized, os.R_OK):
        raise _reject("Logo file is empty or unreadable")

    try:
        size = normalized.stat().st_size
    except OSError as exc:
        raise _reject("Logo file is empty or unreadable") from exc
    if size == 0:
        raise _reject("Logo file is empty or unreadable")
    if size > max_file_size:
        raise _reject(f"Logo file is {size} bytes, exceeding the {max_file_size} byte limit")
    return size


def detect_image_type(path: Path, size: int, signatures: tuple[ImageSignature, ...]) -> str:
    """Return the format whose signature matches the file, by content only."""
    try:
        with path.open("rb") as fh:
            header = fh.read(min(HEADER_SIZE, size))
            fh.seek(max(len(header), size - TRAILER_SEARCH_SIZE))
            tail = fh.read()
    except OSError as exc:
        raise _reject("Logo file is empty or unreadable") from exc

    for signature in signatures:
        if not header.startswith(signature.header):
            continue
        # padding or metadata may follow the end marker
        if not signature.trailer or signature.trailer in tail:
            return signature.format

    supported = ", ".join(sig.format.upper() for sig in signatures)
    logger.warning("Rejected logo %s: header %s matches no signature", path.name, header.hex())
    raise UnsupportedFileTypeError(
        f"Logo file must be a valid {supported} image (header bytes: {header.hex() or 'none'})",
        header=header,
    )


def validate_logo_path(candidate: str | os.PathLike, config: LogoConfig | None = None) -> ValidatedPath:
    config = config or LogoConfig()

    if not isinstance(candidate, (str, os.PathLike)) or not os.fspath(candidate):
        raise PathSecurityError("logo_path must be a non-empty path")

    original = os.fspath(candidate)
    expanded = Path(original).expanduser()

    normalized = _normalize(expanded, original)
    verification = _normalize(normalized, original)
    if normalized != verification:
        raise _reject(f"Invalid file path: {original}")

    if config.sandbox_root is not None:
        _check_sandbox(normalized, config.sandbox_root)

    size = _check_file(normalized, config.max_file_size)
    fmt = detect_image_type(normalized, size, config.signatures)

    logger.debug("Validated logo %s (%s, %d bytes)", normalized, fmt, size)
    return ValidatedPath(path=normalized, format=fmt, size=size)
