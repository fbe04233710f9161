"""Backslash escaping of text that is about to be embedded in YAML."""

from __future__ import annotations

import re

_BACKSLASH_RUN = re.compile(rb"\\+")
_META_CHARACTERS = re.compile(r"[.+*?()|\[\]{}^$]")


def escape_backslashes(content: bytes) -> bytes:
    """Make every run of backslashes even in length.

    A run of odd length gets one extra backslash; runs of even length are
    left as they are.
    """

    def _even(match: re.Match[bytes]) -> bytes:
        count = len(match.group())
        return b"\\" * (count + count % 2)

    return _BACKSLASH_RUN.sub(_even, content)


class YmlEscapeHandlers:
    """Escapes content so that backslashes survive a YAML round trip."""

    def escape(self, content: str) -> bytes | None:
        """Return the escaped content as UTF-8 bytes.

        Returns None when the content holds neither a backslash nor a
        regular-expression meta character, meaning no escaping is needed.
        """
        if "\\" not in content and not _META_CHARACTERS.search(content):
            return None
        return escape_backslashes(content.encode("utf-8"))