import pytest

from podpromo.models import Chapter, Transcript, YouTubeTimestamp
from podpromo.timestamps import (
    MissingTimingError,
    format_timestamp,
    generate_youtube_timestamps,
    to_description_block,
)

from conftest import FakeClient, connection_error, make_chapters


@pytest.mark.parametrize(
    "seconds,expected",
    [(0, "0:00"), (7, "0:07"), (65, "1:05"), (3599, "59:59"), (3600, "1:00:00"), (3725, "1:02:05")],
)
def test_format_timestamp(seconds, expected):
    assert format_timestamp(seconds) == expected


def test_empty_chapters_fail_before_any_call():
    client = FakeClient()

    with pytest.raises(MissingTimingError):
        generate_youtube_timestamps(Transcript(text="no chapters here"), client=client)

    assert client.calls == []


def test_titles_replace_headlines_and_keep_timing():
    chapters = [
        Chapter(start=250, headline="Intro", summary="hello"),
        Chapter(start=65_000, headline="Second", summary="more"),
        Chapter(start=3_725_400, headline="Third", summary="even more"),
    ]
    client = FakeClient(
        [
            {
                "titles": [
                    {"index": 0, "title": "Welcome to the Show"},
                    {"index": 1, "title": "Growing the Audience"},
                    {"index": 2, "title": "Lessons From Burnout"},
                ]
            }
        ]
    )

    result = generate_youtube_timestamps(Transcript(chapters=chapters), client=client)

    assert result.value == [
        YouTubeTimestamp(timestamp="0:00", description="Welcome to the Show"),
        YouTubeTimestamp(timestamp="1:05", description="Growing the Audience"),
        YouTubeTimestamp(timestamp="1:02:05", description="Lessons From Burnout"),
    ]
    assert result.was_fallback is False
    assert len(client.calls) == 1


def test_first_timestamp_is_always_zero():
    chapters = [Chapter(start=4_000, headline="Cold open"), Chapter(start=90_000, headline="Topic")]
    client = FakeClient([{"titles": []}])

    result = generate_youtube_timestamps(Transcript(chapters=chapters), client=client)

    assert [item.timestamp for item in result.value] == ["0:00", "1:30"]


def test_missing_slots_fall_back_to_headline():
    client = FakeClient(
        [
            {
                "titles": [
                    {"index": 0, "title": "Welcome"},
                    {"index": 2, "title": "  "},
                    {"index": 9, "title": "Out of range"},
                ]
            }
        ]
    )

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(3)), client=client)

    assert [item.description for item in result.value] == ["Welcome", "Headline 1", "Headline 2"]
    assert result.was_fallback is True
    assert len(client.calls) == 1


def test_null_title_falls_back_for_that_slot_only():
    reply = {
        "titles": [
            {"index": 0, "title": "Good 0"},
            {"index": 1, "title": "Good 1"},
            {"index": 2, "title": "Good 2"},
            {"index": 3, "title": None},
            {"index": 4, "title": "Good 4"},
        ]
    }
    client = FakeClient([reply, reply])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(5)), client=client)

    assert [item.description for item in result.value] == ["Good 0", "Good 1", "Good 2", "Headline 3", "Good 4"]
    assert len(client.calls) == 1
    assert result.was_fallback is True


def test_malformed_items_are_skipped_individually():
    reply = {
        "titles": [
            {"index": 0, "title": 42},
            "just a string",
            {"title": "No index"},
            {"index": 1, "title": "Kept Title", "timestamp": "0:30"},
            {"index": 2, "title": "Also Kept", "confidence": 0.9},
        ]
    }
    client = FakeClient([reply])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(3)), client=client)

    assert [item.description for item in result.value] == ["Headline 0", "Kept Title", "Also Kept"]
    assert len(client.calls) == 1


def test_extra_keys_on_reply_and_items_are_ignored():
    reply = {
        "titles": [{"index": i, "title": f"Title {i}", "timestamp": f"{i}:00"} for i in range(3)],
        "notes": "generated",
    }
    client = FakeClient([reply])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(3)), client=client)

    assert [item.description for item in result.value] == ["Title 0", "Title 1", "Title 2"]
    assert result.was_fallback is False


def test_reply_without_titles_list_is_repaired():
    client = FakeClient([{"chapters": []}, {"titles": [{"index": 0, "title": "Repaired"}]}])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(1)), client=client)

    assert len(client.calls) == 2
    assert [item.description for item in result.value] == ["Repaired"]


def test_150_chapters_are_capped_to_100():
    client = FakeClient([{"titles": [{"index": i, "title": f"Title {i}"} for i in range(150)]}])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(150)), client=client)

    prompt = client.calls[0]["messages"][0]["content"]
    assert "Headline 99" in prompt
    assert "Headline 100" not in prompt
    assert len(result.value) == 100
    assert result.value[-1] == YouTubeTimestamp(timestamp="1:39:00", description="Title 99")


def test_malformed_reply_is_repaired_once():
    client = FakeClient(["titles: intro, setup", {"titles": [{"index": 0, "title": "Fixed Title"}]}])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(2)), client=client)

    assert len(client.calls) == 2
    assert client.calls[1]["temperature"] == 0.0
    assert [item.description for item in result.value] == ["Fixed Title", "Headline 1"]


def test_failed_repair_uses_all_headlines():
    client = FakeClient(["not json", '{"titles": "nope"}'])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(3)), client=client)

    assert [item.description for item in result.value] == ["Headline 0", "Headline 1", "Headline 2"]
    assert result.was_fallback is True
    assert result.attempts == 2


def test_transport_failure_uses_all_headlines():
    client = FakeClient([connection_error()])

    result = generate_youtube_timestamps(Transcript(chapters=make_chapters(2)), client=client)

    assert [item.description for item in result.value] == ["Headline 0", "Headline 1"]
    assert result.failure == "transport"


def test_description_block():
    block = to_description_block(
        [
            YouTubeTimestamp(timestamp="0:00", description="Intro"),
            YouTubeTimestamp(timestamp="12:30", description="Deep dive"),
        ]
    )
    assert block == "0:00 Intro\n12:30 Deep dive"
