import json
from types import SimpleNamespace

import httpx
import pytest
import anthropic

from podpromo.models import Chapter, Transcript


class FakeMessages:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if not self._responses:
            raise AssertionError("unexpected completion call")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, (dict, list)):
            response = json.dumps(response)
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=response)])


class FakeClient:
    def __init__(self, responses=()):
        self.messages = FakeMessages(responses)

    @property
    def calls(self):
        return self.messages.calls


def connection_error() -> anthropic.APIConnectionError:
    return anthropic.APIConnectionError(request=httpx.Request("POST", "https://api.anthropic.com/v1/messages"))


def make_chapters(count: int) -> list[Chapter]:
    return [
        Chapter(
            start=idx * 60_000,
            headline=f"Headline {idx}",
            summary=f"Summary of chapter {idx}",
            gist=f"Gist {idx}",
        )
        for idx in range(count)
    ]


SUMMARY_PAYLOAD = {
    "full": "Two founders discuss how they bootstrapped a podcast network.",
    "bullets": ["Why they started", "How they grew", "What they would change"],
    "insights": ["Ship weekly", "Talk to listeners"],
    "tldr": "Bootstrapping a podcast network, the honest version.",
}

SOCIAL_POSTS_PAYLOAD = {
    "twitter": "How do you bootstrap a podcast network? New episode out now.",
    "linkedin": "We sat down with two founders to talk about growth.",
    "instagram": "New episode! Link in bio.",
    "tiktok": "bootstrapping a podcast network?? no way",
    "youtube": "In this episode we cover growth, sponsorships and burnout.",
    "facebook": "What would you ask a podcast founder? Tell us below.",
}

TITLES_PAYLOAD = {
    "youtubeShort": ["Bootstrapping a Podcast", "Growing Without Funding", "Founders Get Honest"],
    "youtubeLong": [
        "Bootstrapping a Podcast Network: What Worked | Founder Interview",
        "Growing a Show Without Funding: Lessons Learned | Full Episode",
        "Podcast Founders Get Honest: Growth and Burnout | Deep Dive",
    ],
    "podcastTitles": ["The Bootstrap Years", "Weekly or Bust", "Listeners First"],
    "seoKeywords": ["podcast", "bootstrapping", "startup", "audio", "creator economy"],
}


@pytest.fixture
def transcript() -> Transcript:
    return Transcript(
        text="Welcome to the show. Today we talk about bootstrapping a podcast network. " * 80,
        chapters=make_chapters(7),
    )
