"""Text <-> Morse transcoding.

Both directions degrade gracefully: anything that has no mapping is skipped
from the output and reported once in `TranscriptionResult.unmatched`.
"""

import json
import logging
import unicodedata

from morsewave.table import WORD_TOKEN, char_of, code_of
from morsewave.types import TranscriptionResult

logger = logging.getLogger(__name__)


def _note_unmatched(unmatched: list[str], token: str) -> None:
    if token not in unmatched:
        unmatched.append(token)


def text_to_code(text: str) -> TranscriptionResult:
    """Translate Latin text to a Morse code string.

    The text is decomposed (NFD) first so accented letters fall back to the
    code of their base letter; the combining marks themselves end up in
    `unmatched`.
    """
    codes: list[str] = []
    unmatched: list[str] = []

    for char in unicodedata.normalize("NFD", text):
        code = code_of(char.upper())
        if code is None:
            _note_unmatched(unmatched, char)
            continue
        codes.append(code)

    # Line breaks carry their own timing, drop the separators around them
    code = " ".join(codes).replace(" \n ", "\n")

    if unmatched:
        logger.debug(f"Unmatched Latin characters: {unmatched}")
    return TranscriptionResult(output=code, unmatched=tuple(unmatched))


def code_to_text(code: str) -> TranscriptionResult:
    """Translate a space-separated Morse code string to text.

    `_` is accepted as a dash and `/` decodes to a space.
    """
    chars: list[str] = []
    unmatched: list[str] = []

    for token in code.replace("_", "-").split(" "):
        if not token:
            continue
        if token == WORD_TOKEN:
            chars.append(" ")
            continue
        char = char_of(token)
        if char is None:
            _note_unmatched(unmatched, token)
            continue
        chars.append(char)

    if unmatched:
        logger.debug(f"Unmatched Morse tokens: {unmatched}")
    return TranscriptionResult(output="".join(chars), unmatched=tuple(unmatched))


def format_unmatched(unmatched: tuple[str, ...] | list[str], alphabet: str) -> str:
    """Build the user-facing message for unmatched tokens.

    Returns an empty string when there is nothing to report, otherwise e.g.
    'Latin Character(s) Not Found: "#", "@"'.
    """
    if not unmatched:
        return ""
    quoted = ", ".join(json.dumps(token, ensure_ascii=False) for token in unmatched)
    return f"{alphabet} Character(s) Not Found: {quoted}"
