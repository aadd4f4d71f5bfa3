from pydantic import BaseModel

from .models import ArtifactKind, SocialPosts, Summary, Titles

_SOCIAL_FALLBACK = "⚠️ Social post generation failed. Check logs for details."

_FALLBACKS: dict[ArtifactKind, BaseModel] = {
    ArtifactKind.SUMMARY: Summary(
        full="⚠️ Summary generation failed. Please check logs or try again.",
        bullets=["⚠️ Summary generation failed - see full transcript"],
        insights=["⚠️ Error occurred during AI generation"],
        tldr="⚠️ Summary generation failed",
    ),
    ArtifactKind.SOCIAL_POSTS: SocialPosts(
        twitter=_SOCIAL_FALLBACK,
        linkedin=_SOCIAL_FALLBACK,
        instagram=_SOCIAL_FALLBACK,
        tiktok=_SOCIAL_FALLBACK,
        youtube=_SOCIAL_FALLBACK,
        facebook=_SOCIAL_FALLBACK,
    ),
    ArtifactKind.TITLES: Titles(
        youtube_short=[
            "⚠️ Title generation failed (1)",
            "⚠️ Title generation failed (2)",
            "⚠️ Title generation failed (3)",
        ],
        youtube_long=[
            "⚠️ Title generation failed - check logs (1)",
            "⚠️ Title generation failed - check logs (2)",
            "⚠️ Title generation failed - check logs (3)",
        ],
        podcast_titles=[
            "⚠️ Episode title unavailable (1)",
            "⚠️ Episode title unavailable (2)",
            "⚠️ Episode title unavailable (3)",
        ],
        seo_keywords=[f"⚠️ keyword unavailable ({i})" for i in range(1, 6)],
    ),
}


def fallback_for(kind: ArtifactKind) -> BaseModel:
    if kind not in _FALLBACKS:
        raise ValueError(f"no static fallback for artifact kind '{kind.value}'")
    return _FALLBACKS[kind].model_copy(deep=True)
