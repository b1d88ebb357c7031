from typing import List, Optional


def char_at(text: str, index: int) -> Optional[str]:
    """Character at `index`, or None when the index is outside the text."""
    if 0 <= index < len(text):
        return text[index]
    return None


def to_chars(text: str) -> List[str]:
    return list(text)


def from_char(c: str) -> str:
    """Render a single character as a one-character string (for messages)."""
    return str(c)
