"""WebVTT conversion of Amazon Transcribe output documents."""

from typing import Any

import webvtt

from subtitle_service.domain import TranscriptDocument, TranscriptItem

from .interfaces import SubtitleConverter

SENTENCE_END = frozenset(".?!")


class TranscribeVttConverter(SubtitleConverter):
    """Groups recognized words into cues and renders them as WebVTT."""

    content_type = "text/vtt"

    def __init__(self, max_words_per_cue: int = 10):
        if max_words_per_cue < 1:
            raise ValueError("max_words_per_cue must be positive")
        self._max_words = max_words_per_cue

    def convert(self, document: dict[str, Any]) -> str:
        """
        Converts a transcript document into WebVTT text.

        Raises:
            pydantic.ValidationError: If the document is not Transcribe output.
            ValueError: If a word carries no timing.
        """
        transcript = TranscriptDocument.model_validate(document)

        vtt = webvtt.WebVTT()
        for start, end, text in self._cues(transcript.results.items):
            vtt.captions.append(
                webvtt.Caption(_timestamp(start), _timestamp(end), text)
            )
        return vtt.content

    def _cues(self, items: list[TranscriptItem]):
        words: list[str] = []
        start = end = 0.0

        for item in items:
            if item.type == "punctuation":
                if not words:
                    continue
                words[-1] += item.content
                if item.content in SENTENCE_END:
                    yield start, end, " ".join(words)
                    words = []
                continue

            if item.start_time is None or item.end_time is None:
                raise ValueError(f"word '{item.content}' has no timing")
            # Flush lazily so trailing punctuation stays on the full cue.
            if len(words) >= self._max_words:
                yield start, end, " ".join(words)
                words = []
            if not words:
                start = item.start_time
            words.append(item.content)
            end = item.end_time

        if words:
            yield start, end, " ".join(words)


def _timestamp(seconds: float) -> str:
    millis = int(round(seconds * 1000))
    hours, millis = divmod(millis, 3_600_000)
    minutes, millis = divmod(millis, 60_000)
    secs, millis = divmod(millis, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"
