"""Latin <-> Morse symbol tables and per-token durations.

The tables are built once at import time and exposed read-only. The inverse
table is derived from the forward one; a code string claimed by two
characters is rejected at construction instead of silently keeping the later
entry.
"""

from types import MappingProxyType
from typing import Mapping

WORD_TOKEN = "/"
LINE_TOKEN = "\n"

_LATIN_TO_MORSE = {
    "A": ".-",     "B": "-...",   "C": "-.-.",   "D": "-..",    "E": ".",
    "F": "..-.",   "G": "--.",    "H": "....",   "I": "..",     "J": ".---",
    "K": "-.-",    "L": ".-..",   "M": "--",     "N": "-.",     "O": "---",
    "P": ".--.",   "Q": "--.-",   "R": ".-.",    "S": "...",    "T": "-",
    "U": "..-",    "V": "...-",   "W": ".--",    "X": "-..-",   "Y": "-.--",
    "Z": "--..",
    "1": ".----",  "2": "..---",  "3": "...--",  "4": "....-",  "5": ".....",
    "6": "-....",  "7": "--...",  "8": "---..",  "9": "----.",  "0": "-----",
    ",": "--..--", ".": ".-.-.-", "?": "..--..", "/": "-..-.",  "-": "-....-",
    "(": "-.--.",  ")": "-.--.-",
    " ": WORD_TOKEN,
    "\n": LINE_TOKEN,
}

# Abstract time units per signal token. The one-unit gap after every symbol
# is not listed here; the renderer adds it.
_DURATION_UNITS = {
    ".": 1,
    "-": 3,
    " ": 3,
    WORD_TOKEN: 1,
    LINE_TOKEN: 10,
}


def invert_table(table: Mapping[str, str]) -> dict[str, str]:
    """Invert a char -> code table.

    Raises:
        ValueError: if two characters map to the same code string.
    """
    inverse: dict[str, str] = {}
    for char, code in table.items():
        if code in inverse:
            raise ValueError(
                f"Code {code!r} is assigned to both {inverse[code]!r} and {char!r}"
            )
        inverse[code] = char
    return inverse


LATIN_TO_MORSE: Mapping[str, str] = MappingProxyType(_LATIN_TO_MORSE)
MORSE_TO_LATIN: Mapping[str, str] = MappingProxyType(invert_table(_LATIN_TO_MORSE))
DURATION_UNITS: Mapping[str, int] = MappingProxyType(_DURATION_UNITS)


def code_of(char: str) -> str | None:
    """Return the code string for an (uppercase) character, or None."""
    return LATIN_TO_MORSE.get(char)


def char_of(code: str) -> str | None:
    """Return the character for a code string, or None."""
    return MORSE_TO_LATIN.get(code)


def duration_units(token: str) -> int:
    """Duration of a signal token in time units; 0 for anything unknown."""
    return DURATION_UNITS.get(token, 0)
