import logging
from typing import Any

from pydantic import ValidationError

from .generation import ArtifactSpec, GenerationResult, generate_artifact
from .llm import DEFAULT_MODEL, SamplingConfig
from .models import ArtifactKind, ChapterTitle, ChapterTitles, Transcript, YouTubeTimestamp
from .prompts import MAX_TIMESTAMP_CHAPTERS, build_timestamps_prompt

logger = logging.getLogger(__name__)


class MissingTimingError(ValueError):
    def __init__(self):
        super().__init__("No chapters available from the transcript. Cannot generate YouTube timestamps.")


CHAPTER_TITLES_SPEC = ArtifactSpec(
    kind=ArtifactKind.YOUTUBE_TIMESTAMPS,
    model_cls=ChapterTitles,
    build_prompt=build_timestamps_prompt,
    sampling=SamplingConfig(temperature=0.15, max_output_tokens=1500),
    repair_sampling=SamplingConfig(temperature=0.0, max_output_tokens=800),
    fallback=lambda: ChapterTitles(titles=[]),
)


def format_timestamp(seconds: int) -> str:
    hours, remainder = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def to_description_block(timestamps: list[YouTubeTimestamp]) -> str:
    return "\n".join(f"{item.timestamp} {item.description}" for item in timestamps)


def generate_youtube_timestamps(
    transcript: Transcript,
    *,
    client: Any,
    model: str = DEFAULT_MODEL,
) -> GenerationResult[list[YouTubeTimestamp]]:
    """Build YouTube chapter markers from transcript chapter timing.

    Timing always comes from the transcript chapters; the model only supplies
    short titles. A chapter without a usable model title keeps its original
    headline. Raises MissingTimingError before any call when there are no
    chapters, since there is nothing to anchor a timestamp to.
    """
    if not transcript.chapters:
        raise MissingTimingError()

    chapters = transcript.chapters[:MAX_TIMESTAMP_CHAPTERS]
    logger.info("Using %d of %d chapters for timestamps", len(chapters), len(transcript.chapters))

    capped = transcript.model_copy(update={"chapters": chapters})
    titles_result = generate_artifact(CHAPTER_TITLES_SPEC, capped, client=client, model=model)

    titles_by_index: dict[int, str] = {}
    for raw_item in titles_result.value.titles:
        try:
            item = ChapterTitle.model_validate(raw_item)
        except ValidationError:
            logger.warning("Skipping malformed chapter title %r", raw_item)
            continue
        title = item.title.strip()
        if title and 0 <= item.index < len(chapters) and item.index not in titles_by_index:
            titles_by_index[item.index] = title

    timestamps = []
    for idx, chapter in enumerate(chapters):
        description = titles_by_index.get(idx)
        if description is None:
            logger.warning("No model title for chapter %d, using headline %r", idx, chapter.headline)
            description = chapter.headline
        seconds = 0 if idx == 0 else chapter.start // 1000
        timestamps.append(YouTubeTimestamp(timestamp=format_timestamp(seconds), description=description))

    logger.info("Generated %d YouTube timestamps", len(timestamps))
    return GenerationResult(
        value=timestamps,
        was_fallback=len(titles_by_index) < len(chapters),
        attempts=titles_result.attempts,
        raw=titles_result.raw,
        failure=titles_result.failure,
    )
