from typing import Any

from .fallbacks import fallback_for
from .generation import ArtifactSpec, GenerationResult, generate_artifact
from .llm import DEFAULT_MODEL, SamplingConfig
from .models import ArtifactKind, Summary, Transcript
from .prompts import build_summary_prompt

SUMMARY_SPEC = ArtifactSpec(
    kind=ArtifactKind.SUMMARY,
    model_cls=Summary,
    build_prompt=build_summary_prompt,
    sampling=SamplingConfig(temperature=0.2, max_output_tokens=800),
    repair_sampling=SamplingConfig(temperature=0.0, max_output_tokens=600),
    fallback=lambda: fallback_for(ArtifactKind.SUMMARY),
)


def generate_summary(
    transcript: Transcript,
    *,
    client: Any,
    model: str = DEFAULT_MODEL,
) -> GenerationResult[Summary]:
    return generate_artifact(SUMMARY_SPEC, transcript, client=client, model=model)
