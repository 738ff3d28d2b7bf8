from __future__ import annotations
import logging
import pytest

import looplay.playlist as pl
from looplay.errors import AllocationError, InvalidTitleError
from looplay.models import PlaylistEntry, RemoveOutcome
from looplay.playlist import Playlist


def make_playlist(*titles: str) -> Playlist:
    playlist = Playlist()
    for title in titles:
        playlist.add(title)
    return playlist


def assert_circular(playlist: Playlist) -> None:
    n = len(playlist)
    walked = list(playlist.cycle(n + 1))
    assert walked[:n] == playlist.titles()
    assert walked[n] == walked[0]


def test_adds_keep_insertion_order_and_circle():
    playlist = make_playlist("A", "B", "C", "D")
    assert playlist.titles() == ["A", "B", "C", "D"]
    assert len(playlist.display()) == 4
    assert playlist.head == "A"
    assert playlist.tail == "D"
    assert_circular(playlist)


def test_first_song_is_current_and_links_to_itself():
    playlist = make_playlist("Solo")
    assert playlist.current == "Solo"
    assert list(playlist.cycle(3)) == ["Solo", "Solo", "Solo"]


def test_add_truncates_long_title():
    playlist = Playlist(max_title_length=5)
    playlist.add("abcdefgh")
    assert playlist.titles() == ["abcde"]


def test_default_title_bound():
    playlist = Playlist()
    playlist.add("x" * 250)
    assert playlist.current == "x" * pl.MAX_TITLE_LENGTH


@pytest.mark.parametrize("title", ["", "   ", "\t"])
def test_add_rejects_blank_title(title):
    playlist = make_playlist("A")
    with pytest.raises(InvalidTitleError):
        playlist.add(title)
    assert playlist.titles() == ["A"]


def test_add_emits_confirmation_record(caplog):
    caplog.set_level(logging.INFO, logger="looplay.playlist")
    make_playlist("Blue in Green")
    assert 'Added: "Blue in Green"' in caplog.messages


def test_add_allocation_failure_leaves_playlist_unchanged(monkeypatch):
    playlist = make_playlist("A", "B")

    def no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(pl, "_Node", no_memory)
    with pytest.raises(AllocationError):
        playlist.add("C")
    assert playlist.titles() == ["A", "B"]
    assert len(playlist) == 2
    assert_circular(playlist)


def test_remove_only_song_empties_playlist():
    playlist = make_playlist("A")
    assert playlist.remove("A") is RemoveOutcome.REMOVED
    assert playlist.is_empty
    assert playlist.play_current() is None
    assert list(playlist.display()) == []
    assert playlist.head is None and playlist.tail is None


def test_remove_head_relinks_tail():
    playlist = make_playlist("A", "B", "C")
    assert playlist.remove("A") is RemoveOutcome.REMOVED
    assert playlist.head == "B"
    assert list(playlist.cycle(3)) == ["B", "C", "B"]
    assert_circular(playlist)


def test_remove_head_under_cursor_moves_cursor_to_new_head():
    playlist = make_playlist("A", "B", "C")
    playlist.remove("A")
    assert playlist.current == "B"


def test_remove_tail_updates_tail():
    playlist = make_playlist("A", "B", "C")
    playlist.remove("C")
    assert playlist.tail == "B"
    playlist.add("D")
    assert playlist.titles() == ["A", "B", "D"]
    assert_circular(playlist)


def test_remove_tail_under_cursor_wraps_to_head():
    playlist = make_playlist("A", "B", "C")
    playlist.play_previous()
    assert playlist.current == "C"
    playlist.remove("C")
    assert playlist.current == "A"


def test_remove_interior_keeps_unrelated_cursor():
    playlist = make_playlist("A", "B", "C")
    playlist.remove("B")
    assert playlist.current == "A"
    assert playlist.titles() == ["A", "C"]


def test_remove_not_found_leaves_state():
    playlist = make_playlist("A", "C")
    assert playlist.remove("X") is RemoveOutcome.NOT_FOUND
    assert playlist.titles() == ["A", "C"]
    assert playlist.current == "A"


def test_remove_on_empty_playlist():
    assert Playlist().remove("A") is RemoveOutcome.EMPTY


def test_remove_takes_first_duplicate_from_head():
    playlist = make_playlist("A", "B", "A")
    playlist.play_next()
    playlist.play_next()
    assert playlist.current == "A"
    playlist.remove("A")
    assert playlist.titles() == ["B", "A"]
    # The cursor sat on the second copy, which survives
    assert playlist.current == "A"
    assert playlist.head == "B"


def test_remove_matches_truncated_title():
    playlist = Playlist(max_title_length=4)
    playlist.add("Longer title")
    assert playlist.remove("Longer title") is RemoveOutcome.REMOVED


def test_freed_slots_are_reused():
    playlist = make_playlist("A", "B", "C")
    playlist.remove("B")
    playlist.add("D")
    assert len(playlist._slots) == 3
    assert playlist.titles() == ["A", "C", "D"]
    assert_circular(playlist)


def test_scenario_next_then_remove_current():
    playlist = make_playlist("A", "B", "C")
    assert list(playlist.display()) == [
        PlaylistEntry("A", True),
        PlaylistEntry("B", False),
        PlaylistEntry("C", False),
    ]
    assert playlist.play_next() == "B"
    playlist.remove("B")
    assert playlist.current == "C"
    assert list(playlist.display()) == [
        PlaylistEntry("A", False),
        PlaylistEntry("C", True),
    ]
    assert list(playlist.cycle(3)) == ["A", "C", "A"]


def test_play_next_wraps_to_head():
    playlist = make_playlist("A", "B")
    assert playlist.play_next() == "B"
    assert playlist.play_next() == "A"


def test_play_previous_wraps_to_tail():
    playlist = make_playlist("A", "B", "C")
    assert playlist.play_previous() == "C"
    assert playlist.play_previous() == "B"


def test_next_then_previous_restores_cursor():
    playlist = make_playlist("A", "B", "C", "D")
    for _ in range(len(playlist)):
        start = playlist.current
        playlist.play_next()
        assert playlist.play_previous() == start
        playlist.play_next()


def test_single_song_navigation_is_noop():
    playlist = make_playlist("Only")
    assert playlist.play_next() == "Only"
    assert playlist.play_previous() == "Only"
    assert playlist.current == "Only"


def test_navigation_on_empty_playlist():
    playlist = Playlist()
    assert playlist.play_current() is None
    assert playlist.play_next() is None
    assert playlist.play_previous() is None
    assert playlist.current is None


def test_display_is_restartable():
    playlist = make_playlist("A", "B")
    view = playlist.display()
    assert [e.title for e in view] == ["A", "B"]
    assert [e.title for e in view] == ["A", "B"]


def test_teardown_on_empty_is_noop():
    playlist = Playlist()
    playlist.teardown()
    assert playlist.is_empty
    assert list(playlist.display()) == []


def test_teardown_releases_everything():
    playlist = make_playlist("A", "B", "C")
    playlist.play_next()
    playlist.teardown()
    assert len(playlist) == 0
    assert list(playlist.display()) == []
    assert playlist.current is None
    assert playlist._slots == []
    playlist.add("E")
    assert playlist.current == "E"
    assert_circular(playlist)


def test_cycle_rejects_negative_steps():
    with pytest.raises(ValueError):
        list(make_playlist("A").cycle(-1))


def test_rejects_non_positive_title_bound():
    with pytest.raises(ValueError):
        Playlist(max_title_length=0)
