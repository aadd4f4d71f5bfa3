from typing import Any

from .fallbacks import fallback_for
from .generation import ArtifactSpec, GenerationResult, generate_artifact
from .llm import DEFAULT_MODEL, SamplingConfig
from .models import ArtifactKind, Titles, Transcript
from .prompts import build_titles_prompt

TITLES_SPEC = ArtifactSpec(
    kind=ArtifactKind.TITLES,
    model_cls=Titles,
    build_prompt=build_titles_prompt,
    sampling=SamplingConfig(temperature=0.2, max_output_tokens=400),
    repair_sampling=SamplingConfig(temperature=0.0, max_output_tokens=300),
    fallback=lambda: fallback_for(ArtifactKind.TITLES),
)


def generate_titles(
    transcript: Transcript,
    *,
    client: Any,
    model: str = DEFAULT_MODEL,
) -> GenerationResult[Titles]:
    return generate_artifact(TITLES_SPEC, transcript, client=client, model=model)
