from .models import ArtifactKind, Chapter, Transcript

MAX_TOPIC_CHAPTERS = 5
MAX_TIMESTAMP_CHAPTERS = 100
MAX_REPAIR_ECHO_CHARS = 1500

SUMMARY_TEXT_CHARS = 3000
TITLES_TEXT_CHARS = 2000
SOCIAL_TEXT_CHARS = 500

SUMMARY_SHAPE = """{
  \"full\": string,
  \"bullets\": string[],
  \"insights\": string[],
  \"tldr\": string
}"""

SOCIAL_POSTS_SHAPE = """{
  \"twitter\": string (<=280 chars),
  \"linkedin\": string,
  \"instagram\": string,
  \"tiktok\": string,
  \"youtube\": string,
  \"facebook\": string
}"""

TITLES_SHAPE = """{
  \"youtubeShort\": string[] (exactly 3, 40-60 chars each),
  \"youtubeLong\": string[] (exactly 3, 70-100 chars each),
  \"podcastTitles\": string[] (exactly 3),
  \"seoKeywords\": string[] (5-10 items)
}"""

CHAPTER_TITLES_SHAPE = """{
  \"titles\": [{\"index\": number, \"title\": string}]
}"""

SHAPES = {
    ArtifactKind.SUMMARY: SUMMARY_SHAPE,
    ArtifactKind.SOCIAL_POSTS: SOCIAL_POSTS_SHAPE,
    ArtifactKind.TITLES: TITLES_SHAPE,
    ArtifactKind.YOUTUBE_TIMESTAMPS: CHAPTER_TITLES_SHAPE,
}

SYSTEM_PROMPTS = {
    ArtifactKind.SUMMARY: """
You are an expert podcast content analyst and marketing strategist.
Your summaries are engaging, insightful, and highlight the most valuable takeaways for listeners.
ALWAYS return STRICT JSON only. No explanation, no extra text.
""",
    ArtifactKind.SOCIAL_POSTS: """
You are a viral social media marketing expert who understands each platform's audience, tone, and best practices.
You create platform-optimized content that drives engagement.
ALWAYS return STRICT JSON only with the exact keys: twitter, linkedin, instagram, tiktok, youtube, facebook.
""",
    ArtifactKind.TITLES: """
You are an expert in SEO, content marketing, and viral content creation.
You write titles that are clickable while keeping credibility and search rankings.
ALWAYS return STRICT JSON only. No explanation, no extra text.
""",
    ArtifactKind.YOUTUBE_TIMESTAMPS: """
You are a YouTube content expert who creates SHORT, DESCRIPTIVE TITLES for video chapters.
You create TITLES (like 'Introduction to AI'), NOT transcript text or full sentences.
Always respond with valid JSON only.
""",
}

HARD_RULES = """Hard rules (MUST follow):
- Output MUST be valid JSON only (no code fences, no markdown, no commentary).
- Output MUST be a single JSON object starting with '{' and ending with '}'.
- All keys are required."""

SUMMARY_TEMPLATE = """
Return STRICT JSON ONLY matching this shape:
{shape}

{hard_rules}

Analyze this podcast transcript and create a summary package.

TRANSCRIPT (first {text_chars} chars):
{text}...
{chapters}
Create a summary with:

1. full: overview of 200-300 words. What is the episode about, who is speaking,
   what are the main themes, why should someone listen?
2. bullets: 5-7 key points in the order they are discussed.
3. insights: 3-5 actionable takeaways for listeners.
4. tldr: one compelling sentence that makes someone want to listen.

Be specific and engaging. Focus on what makes this episode worth listening to.
"""

SOCIAL_POSTS_TEMPLATE = """
Return STRICT JSON ONLY matching this shape:
{shape}

{hard_rules}

PODCAST SUMMARY:
{summary}

KEY TOPICS DISCUSSED:
{topics}

Generate 6 unique posts, one per platform:

1. twitter: MAXIMUM 280 characters including spaces and emojis. Hook first, punchy, quotable.
2. linkedin: 1-2 paragraphs, professional thought-leadership tone, end with a question or CTA.
3. instagram: storytelling caption, 2-4 emojis, call-to-action.
4. tiktok: short, energetic, Gen Z friendly caption.
5. youtube: SEO-friendly description of 2-3 paragraphs with episode highlights.
6. facebook: 2-3 conversational paragraphs ending with a discussion prompt.
"""

TITLES_TEMPLATE = """
Return STRICT JSON ONLY matching this shape:
{shape}

{hard_rules}

Create optimized titles for this podcast episode.

TRANSCRIPT PREVIEW:
{text}...
{chapters}
Title guidelines:
- youtubeShort: hook-focused and curiosity-driven, clickable but not clickbait.
- youtubeLong: include SEO keywords naturally, format "Main Topic: Subtitle | Value Prop".
- podcastTitles: creative and memorable, good for RSS feeds and directories.
- seoKeywords: high-traffic search terms relevant to the content, broad and niche.
"""

TIMESTAMPS_TEMPLATE = """
Create SHORT CHAPTER TITLES for a video.

Rules:
- DO NOT copy the transcript text.
- DO NOT write full sentences.
- Create 3-6 word TITLES only, like chapter headings.
- Return one title per chapter, keyed by the chapter index.

I have {count} chapters with timestamps.

CHAPTERS:
{chapters}

Good titles: "Introduction to N8N Automation", "Setting Up Your Account", "Telegram Bot Creation".
Bad titles: "Today we are diving into n8n one of the most underrated" (transcript excerpt).

Return ONLY valid JSON in this exact shape:
{shape}
"""

REPAIR_TEMPLATE = """
Previous response was not valid JSON for the required shape ({error_kind}).
Reply with STRICT JSON only matching this shape:
{shape}
No explanation, no code fences.

Previous response (for reference):
{previous}
"""


def _topic_lines(chapters: list[Chapter], with_summary: bool = False) -> str:
    lines = []
    for idx, chapter in enumerate(chapters[:MAX_TOPIC_CHAPTERS], 1):
        if with_summary and chapter.summary:
            lines.append(f"{idx}. {chapter.headline} - {chapter.summary}")
        else:
            lines.append(f"{idx}. {chapter.headline}")
    return "\n".join(lines)


def _chapter_block(heading: str, chapters: list[Chapter], with_summary: bool = False) -> str:
    if not chapters:
        return ""
    return f"\n{heading}:\n{_topic_lines(chapters, with_summary=with_summary)}\n"


def build_summary_prompt(transcript: Transcript) -> str:
    return SUMMARY_TEMPLATE.format(
        shape=SUMMARY_SHAPE,
        hard_rules=HARD_RULES,
        text_chars=SUMMARY_TEXT_CHARS,
        text=transcript.text[:SUMMARY_TEXT_CHARS],
        chapters=_chapter_block("AUTO-DETECTED CHAPTERS", transcript.chapters, with_summary=True),
    )


def build_social_posts_prompt(transcript: Transcript) -> str:
    chapters = transcript.chapters
    summary = (
        (chapters[0].summary if chapters else "")
        or transcript.text[:SOCIAL_TEXT_CHARS]
        or "No summary available."
    )
    return SOCIAL_POSTS_TEMPLATE.format(
        shape=SOCIAL_POSTS_SHAPE,
        hard_rules=HARD_RULES,
        summary=summary,
        topics=_topic_lines(chapters) or "See transcript",
    )


def build_titles_prompt(transcript: Transcript) -> str:
    return TITLES_TEMPLATE.format(
        shape=TITLES_SHAPE,
        hard_rules=HARD_RULES,
        text=transcript.text[:TITLES_TEXT_CHARS],
        chapters=_chapter_block("MAIN TOPICS COVERED", transcript.chapters),
    )


def build_timestamps_prompt(transcript: Transcript) -> str:
    chapters = transcript.chapters[:MAX_TIMESTAMP_CHAPTERS]
    entries = [
        f"Chapter {idx}: [{chapter.start // 1000}s]\nContext: {chapter.headline}\nSummary: {chapter.summary}"
        for idx, chapter in enumerate(chapters)
    ]
    return TIMESTAMPS_TEMPLATE.format(
        count=len(chapters),
        chapters="\n\n".join(entries),
        shape=CHAPTER_TITLES_SHAPE,
    )


PROMPT_BUILDERS = {
    ArtifactKind.SUMMARY: build_summary_prompt,
    ArtifactKind.SOCIAL_POSTS: build_social_posts_prompt,
    ArtifactKind.TITLES: build_titles_prompt,
    ArtifactKind.YOUTUBE_TIMESTAMPS: build_timestamps_prompt,
}


def build_prompt(transcript: Transcript, kind: ArtifactKind) -> str:
    return PROMPT_BUILDERS[kind](transcript)


def build_repair_prompt(kind: ArtifactKind, raw: str, error_kind: str) -> str:
    return REPAIR_TEMPLATE.format(
        error_kind=error_kind,
        shape=SHAPES[kind],
        previous=raw[:MAX_REPAIR_ECHO_CHARS] or "(empty)",
    )
