from typing import Any

from .fallbacks import fallback_for
from .generation import ArtifactSpec, GenerationResult, generate_artifact
from .llm import DEFAULT_MODEL, SamplingConfig
from .models import ArtifactKind, SocialPosts, Transcript
from .prompts import build_social_posts_prompt

SOCIAL_POSTS_SPEC = ArtifactSpec(
    kind=ArtifactKind.SOCIAL_POSTS,
    model_cls=SocialPosts,
    build_prompt=build_social_posts_prompt,
    sampling=SamplingConfig(temperature=0.2, max_output_tokens=800),
    repair_sampling=SamplingConfig(temperature=0.0, max_output_tokens=600),
    fallback=lambda: fallback_for(ArtifactKind.SOCIAL_POSTS),
)


def generate_social_posts(
    transcript: Transcript,
    *,
    client: Any,
    model: str = DEFAULT_MODEL,
) -> GenerationResult[SocialPosts]:
    """Platform posts; the twitter post is capped at 280 characters on validation."""
    return generate_artifact(SOCIAL_POSTS_SPEC, transcript, client=client, model=model)
