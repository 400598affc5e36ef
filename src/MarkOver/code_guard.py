from __future__ import annotations

import re
import secrets
from typing import Dict

# Private-use code points never produced by Markdown or the block markers.
TOKEN_START = "\ue000"
TOKEN_END = "\ue001"

# A run of one or two backticks closed by a run of the same length; longer runs are fences.
INLINE_CODE_RE = re.compile(r"(?<!`)(`{1,2})(?!`)[\s\S]*?(?<!`)\1(?!`)")
FENCED_CODE_RE = re.compile(r"```[\s\S]*?```")
TOKEN_RE = re.compile(re.escape(TOKEN_START) + r"[0-9a-f]+:\d+" + re.escape(TOKEN_END))


def protect(text: str) -> tuple[str, Dict[str, str]]:
    """Swap code spans for placeholder tokens.

    Inline spans go first, then fenced spans. The returned table maps each
    token to the original span text, in insertion order.
    """
    table: Dict[str, str] = {}
    nonce = _make_nonce(text)

    def _substitute(match: re.Match) -> str:
        token = f"{TOKEN_START}{nonce}:{len(table)}{TOKEN_END}"
        table[token] = match.group(0)
        return token

    guarded = INLINE_CODE_RE.sub(_substitute, text)
    guarded = FENCED_CODE_RE.sub(_substitute, guarded)
    return guarded, table


def restore(guarded: str, table: Dict[str, str]) -> str:
    if not table:
        return guarded

    def _lookup(match: re.Match) -> str:
        return table.get(match.group(0), match.group(0))

    result = guarded
    # A fenced span may itself carry inline tokens; each pass unwraps one level.
    for _ in range(len(table)):
        restored = TOKEN_RE.sub(_lookup, result)
        if restored == result:
            break
        result = restored
    return result


def _make_nonce(text: str) -> str:
    while True:
        nonce = secrets.token_hex(4)
        if f"{TOKEN_START}{nonce}:" not in text:
            return nonce
