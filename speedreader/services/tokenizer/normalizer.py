"""
Text normalization into paragraph-marked plain text.

Key behavior:
- Normalizes line endings and strips spaces/tabs around newlines
- Two or more consecutive newlines become an isolated paragraph marker
- Single newlines and runs of spaces collapse to one space
"""
import re
from typing import Optional

from speedreader.config import get_settings

from .constants import PARAGRAPH_MARKER

_SPACE_AROUND_NEWLINE = re.compile(r"[ \t]*\n[ \t]*")
_PARAGRAPH_SPLIT = re.compile(r"\n{2,}")
_MULTIPLE_SPACES = re.compile(r"[^\S\n]{2,}")


def normalize_article_text(raw_text: str, max_chars: Optional[int] = None) -> str:
    """
    Normalize extracted article text for tokenization.

    Args:
        raw_text: Text as extracted from the source document.
        max_chars: Maximum accepted input size. Defaults to
                   ``Settings.max_article_chars``.

    Returns:
        Single-line text with paragraph breaks encoded as `` ¶ ``.

    Raises:
        ValueError: If the input exceeds ``max_chars``.

    Examples:
        >>> normalize_article_text("Hello   world\\n\\nfoo")
        'Hello world ¶ foo'
    """
    if not raw_text:
        return ""

    limit = max_chars if max_chars is not None else get_settings().max_article_chars
    if len(raw_text) > limit:
        raise ValueError(
            f"Input text exceeds maximum size of {limit:,} characters "
            f"(got {len(raw_text):,} characters)"
        )

    text = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    text = _PARAGRAPH_SPLIT.sub(f" {PARAGRAPH_MARKER} ", text)
    text = text.replace("\n", " ")
    text = _MULTIPLE_SPACES.sub(" ", text)
    return text.strip()
