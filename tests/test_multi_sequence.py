import pytest

from midiseq.beats import Beats, BeatUnit
from midiseq.midi_queue import MidiQueue
from midiseq.multi_sequence import MultiSequence
from midiseq.recorder import RecordingMidiService
from midiseq.rng import RngService
from midiseq.sequence import Event, NoteEvent


def make(num_tracks=4):
    service = RecordingMidiService()
    queue = MidiQueue(service)
    beats = Beats(24)
    multi = MultiSequence(beats, queue, 2, 8, BeatUnit.B_16, num_tracks, RngService(3))
    return service, queue, beats, multi


def test_length_matches_track_count():
    _, _, _, multi = make(num_tracks=4)
    assert len(multi) == 4


def test_tracks_are_independent():
    _, _, _, multi = make()
    multi[0].add_event(0, Event(on=True))
    assert multi[0].events[0].on is True
    assert multi[1].events[0].on is False


def test_tracks_use_given_settings():
    _, _, _, multi = make()
    assert all(track.num_steps == 8 for track in multi.tracks)
    assert all(track.step_size is BeatUnit.B_16 for track in multi.tracks)
    assert all(track.channel == 2 for track in multi.tracks)


def test_tick_plays_every_track():
    service, queue, _, multi = make()
    multi[0].add_event(0, Event(on=True, channel=2, sub_event=NoteEvent(36, 100, 5)))
    multi[2].add_event(0, Event(on=True, channel=2, sub_event=NoteEvent(38, 100, 5)))
    multi.tick(0)
    queue.handle_events(0)
    assert sorted(service.messages) == ["noteOn 2 36 100", "noteOn 2 38 100"]
    assert all(track.cur_step == 1 for track in multi.tracks)


def test_index_out_of_range_raises():
    _, _, _, multi = make(num_tracks=2)
    assert multi[1] is multi.tracks[1]
    with pytest.raises(IndexError):
        _ = multi[2]