"""Helpers for Docker-secret style ``KEY_FILE`` indirection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

_FILE_SUFFIX = "_FILE"


def resolve_secret_files(values: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """
    Return a copy of ``values`` with ``KEY_FILE`` entries expanded.

    For every ``KEY_FILE`` whose ``KEY`` is unset or empty, the referenced
    file is read and its stripped content is exposed as ``KEY``. Unreadable
    files are logged and skipped. ``None`` values become empty strings.
    """

    resolved: Dict[str, str] = {key: value or "" for key, value in values.items()}

    for key, file_path in list(resolved.items()):
        if not key.endswith(_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(_FILE_SUFFIX)]
        if resolved.get(target_key):
            continue
        try:
            resolved[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )

    return resolved
