from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextSegment:
    text: str
    is_match: bool = False


def highlight_segments(text: str, term: str) -> list[TextSegment]:
    """
    Split `text` around case-insensitive occurrences of `term`.

    Occurrences are found left to right and never overlap: after a match the
    scan resumes at the end of that match. Concatenating the segment texts
    always gives back `text` unchanged.
    """
    if not term:
        return [TextSegment(text)] if text else []

    lower = text.lower()
    needle = term.lower()
    segments: list[TextSegment] = []
    pos = 0
    while True:
        idx = lower.find(needle, pos)
        if idx == -1:
            break
        if idx > pos:
            segments.append(TextSegment(text[pos:idx]))
        segments.append(TextSegment(text[idx : idx + len(needle)], is_match=True))
        pos = idx + len(needle)

    if pos < len(text):
        segments.append(TextSegment(text[pos:]))
    return segments


def name_matches(name: str, term: str) -> bool:
    if not term:
        return True
    return term.lower() in (name or "").lower()
