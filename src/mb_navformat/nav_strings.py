"""Capitalization of navaid, airport and airspace names."""

import re

# Abbreviations kept upper case inside capitalized names
NAV_ABBREVIATIONS = frozenset(
    {
        "AB", "AFB", "AFS", "ANG", "ARB", "ARTCC", "ASOS", "ATC", "ATIS", "ATZ", "AWOS", "CTA", "CTR", "DME", "FIR",
        "GPS", "GS", "IAP", "IFR", "IGS", "ILS", "LDA", "LLC", "LOC", "MCAS", "MIL", "MLS", "MOA", "NAS", "NAF",
        "NAVAID", "NDB", "NOTAM", "RAF", "RCO", "RNAV", "RNP", "SDF", "TACAN", "TMA", "TRSA", "TVOR", "UIR", "USAF",
        "VFR", "VHF", "VOR", "VORDME", "VORTAC", "ZNY",
    }
)  # fmt: skip

_WORD_RE = re.compile(r"[^\W_]+")


def _cap_word(m: re.Match[str]) -> str:
    word = m.group(0)
    upper = word.upper()
    if upper in NAV_ABBREVIATIONS or any(ch.isdigit() for ch in word):
        return upper
    return word.capitalize()


def cap_nav_string(text: str) -> str:
    """Capitalize each word of a navigation name, e.g. 'FRANKFURT VOR-DME' -> 'Frankfurt VOR-DME'.

    Known abbreviations and words containing digits (runways, frequencies) stay upper case.
    Separators and whitespace are kept as they are.
    """
    return _WORD_RE.sub(_cap_word, text)
