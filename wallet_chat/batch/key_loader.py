"""Loading the private-key list."""

from __future__ import annotations

from pathlib import Path
from typing import List

from wallet_chat.domain.exceptions import KeyListLoadError


def parse_private_keys(text: str) -> List[str]:
    """One key per line; surrounding whitespace trimmed, blank lines dropped."""

    return [line.strip() for line in text.splitlines() if line.strip()]


def load_private_keys(path: str | Path) -> List[str]:
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise KeyListLoadError(code="KEY_FILE_READ_ERROR", message=f"cannot read key file {p}: {e}")
    return parse_private_keys(text)
