"""Display helpers for the free-form emotion notes field."""

import re

EMOTIONAL_RESPONSE_LABEL = "EmotionalResponse:"
RESPONSE_LABEL = "Response:"

_EMOTIONAL_RESPONSE_VARIANT = re.compile(r"emotional\s+response:", re.IGNORECASE)
_RESPONSE_MARKER = re.compile(r"\|\s*response:", re.IGNORECASE)


def compose_emotion_notes(event: str, response: str) -> str:
    """Build notes in the conventional two-part shape."""
    return f"{EMOTIONAL_RESPONSE_LABEL} {event} | {RESPONSE_LABEL} {response}"


def _strip_label(text: str, label: str) -> str:
    if text.lower().startswith(label.lower()):
        text = text[len(label):]
    return text.strip()


def split_emotion_notes(notes: str | None) -> tuple[str, str]:
    """Best-effort split of notes into (emotional_response, response).

    Splits on the first ``|Response:`` marker, else on the first pipe. With
    neither, the whole text is the emotional response and response is empty.
    """
    notes = _EMOTIONAL_RESPONSE_VARIANT.sub(EMOTIONAL_RESPONSE_LABEL, (notes or "").strip())

    match = _RESPONSE_MARKER.search(notes)
    if match:
        emotional, response = notes[: match.start()], notes[match.end():]
    elif "|" in notes:
        emotional, response = notes.split("|", 1)
    else:
        emotional, response = notes, ""

    return (
        _strip_label(emotional.strip(), EMOTIONAL_RESPONSE_LABEL),
        _strip_label(response.strip(), RESPONSE_LABEL),
    )


def format_emotion_notes(notes: str | None) -> str:
    """Single display line, always showing both parts."""
    emotional, response = split_emotion_notes(notes)
    return f"{EMOTIONAL_RESPONSE_LABEL} {emotional} | {RESPONSE_LABEL} {response}"
