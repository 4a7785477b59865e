import pytest

from barblocks.mpris import PlaybackStatus, PlayerMetadata


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Playing", PlaybackStatus.PLAYING),
        ("Paused", PlaybackStatus.PAUSED),
        ("Stopped", PlaybackStatus.STOPPED),
    ],
)
def test_playback_status_known_names(name, expected):
    assert PlaybackStatus.from_name(name) is expected


@pytest.mark.parametrize("name", ["playing", "", "Buffering"])
def test_playback_status_unknown_names(name):
    assert PlaybackStatus.from_name(name) is None


def test_metadata_all_fields():
    meta = PlayerMetadata(
        {
            "xesam:title": "Song",
            "xesam:artist": ["Band", "Other"],
            "xesam:url": "file:///music/song.ogg",
        }
    )
    assert meta.title() == "Song"
    assert meta.artist() == "Band"
    assert meta.url() == "file:///music/song.ogg"


def test_metadata_missing_fields():
    meta = PlayerMetadata({})
    assert meta.title() is None
    assert meta.artist() is None
    assert meta.url() is None


def test_metadata_empty_strings_are_absent():
    meta = PlayerMetadata({"xesam:title": "", "xesam:artist": [""], "xesam:url": ""})
    assert meta.title() is None
    assert meta.artist() is None
    assert meta.url() is None


def test_metadata_wrong_types_are_absent():
    meta = PlayerMetadata({"xesam:title": 5, "xesam:artist": "Band", "xesam:url": None})
    assert meta.title() is None
    assert meta.artist() is None
    assert meta.url() is None


def test_metadata_empty_artist_list():
    assert PlayerMetadata({"xesam:artist": []}).artist() is None