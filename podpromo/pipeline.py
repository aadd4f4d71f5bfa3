import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Protocol, TypeVar

from .generation import GenerationResult
from .llm import DEFAULT_MODEL
from .models import ArtifactKind, ContentPackage, PhaseStatus, Transcript
from .social import generate_social_posts
from .summary import generate_summary
from .timestamps import generate_youtube_timestamps
from .titles import generate_titles

logger = logging.getLogger(__name__)

R = TypeVar("R")

GENERATORS: Dict[ArtifactKind, Callable[..., GenerationResult]] = {
    ArtifactKind.SUMMARY: generate_summary,
    ArtifactKind.SOCIAL_POSTS: generate_social_posts,
    ArtifactKind.TITLES: generate_titles,
    ArtifactKind.YOUTUBE_TIMESTAMPS: generate_youtube_timestamps,
}

STEP_IDS = {
    ArtifactKind.SUMMARY: "generate-summary",
    ArtifactKind.SOCIAL_POSTS: "generate-social-posts",
    ArtifactKind.TITLES: "generate-titles",
    ArtifactKind.YOUTUBE_TIMESTAMPS: "generate-youtube-timestamps",
}


class StepRunner(Protocol):
    def run(self, step_id: str, fn: Callable[[], R]) -> R: ...


class InMemoryStepRunner:
    def __init__(self) -> None:
        self._results: Dict[str, Any] = {}

    def run(self, step_id: str, fn: Callable[[], R]) -> R:
        if step_id in self._results:
            logger.debug("Step %s already completed, reusing result", step_id)
            return self._results[step_id]
        result = fn()
        self._results[step_id] = result
        return result

    def completed(self) -> list[str]:
        return list(self._results)


@dataclass
class ContentJob:
    transcript: Transcript
    kinds: tuple[ArtifactKind, ...] = tuple(ArtifactKind)
    phases: Dict[ArtifactKind, PhaseStatus] = field(default_factory=dict)
    results: Dict[ArtifactKind, GenerationResult] = field(default_factory=dict)
    errors: Dict[ArtifactKind, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for kind in self.kinds:
            self.phases.setdefault(kind, "pending")

    def to_package(self) -> ContentPackage:
        values = {kind: result.value for kind, result in self.results.items()}
        return ContentPackage(
            summary=values.get(ArtifactKind.SUMMARY),
            social_posts=values.get(ArtifactKind.SOCIAL_POSTS),
            titles=values.get(ArtifactKind.TITLES),
            youtube_timestamps=values.get(ArtifactKind.YOUTUBE_TIMESTAMPS),
            fallbacks=[kind for kind, result in self.results.items() if result.was_fallback],
        )

    def raw_outputs(self) -> Dict[str, str]:
        return {kind.value: result.raw for kind, result in self.results.items() if result.raw is not None}


def run_job(
    job: ContentJob,
    *,
    client: Any,
    model: str = DEFAULT_MODEL,
    runner: StepRunner | None = None,
) -> ContentPackage:
    runner = runner or InMemoryStepRunner()

    for kind in job.kinds:
        generator = GENERATORS[kind]
        job.phases[kind] = "running"
        try:
            result = runner.run(
                STEP_IDS[kind],
                lambda generator=generator: generator(job.transcript, client=client, model=model),
            )
        except Exception as exc:
            job.phases[kind] = "failed"
            job.errors[kind] = str(exc)
            logger.error("%s failed: %s", STEP_IDS[kind], exc)
            raise
        job.results[kind] = result
        job.phases[kind] = "completed"

    return job.to_package()


def generate_content(
    transcript: Transcript,
    *,
    client: Any,
    model: str = DEFAULT_MODEL,
    runner: StepRunner | None = None,
    kinds: Iterable[ArtifactKind] | None = None,
) -> ContentPackage:
    job = ContentJob(transcript=transcript, kinds=tuple(kinds) if kinds is not None else tuple(ArtifactKind))
    return run_job(job, client=client, model=model, runner=runner)
