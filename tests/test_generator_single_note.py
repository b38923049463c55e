from midiseq.beats import Beats, BeatUnit
from midiseq.generator_single_note import GeneratorSingleNote
from midiseq.guitar import GuitarString, guitar_to_midi
from midiseq.midi_queue import MidiEventType, MidiQueue
from midiseq.recorder import RecordingMidiService
from midiseq.rng import RngService


def make(seed=1):
    service = RecordingMidiService()
    queue = MidiQueue(service)
    beats = Beats(48)
    gen = GeneratorSingleNote(beats, queue, RngService(seed), 1)
    return service, queue, beats, gen


def test_range_from_guitar_positions():
    _, _, _, gen = make()
    assert gen.low_note == guitar_to_midi(GuitarString.G, 0)
    assert gen.high_note == guitar_to_midi(GuitarString.HIGH_E, 4)


def test_blacklisted_intervals():
    _, _, _, gen = make()
    assert gen.is_blacklisted(60, 60) is True
    assert gen.is_blacklisted(60, 61) is True
    assert gen.is_blacklisted(60, 58) is True
    assert gen.is_blacklisted(60, 72) is True
    assert gen.is_blacklisted(60, 48) is True
    assert gen.is_blacklisted(60, 63) is False
    assert gen.is_blacklisted(60, 67) is False


def test_successive_notes_avoid_blacklist():
    _, _, _, gen = make(seed=11)
    previous = gen.cur_note
    for _ in range(100):
        gen.generate_next_note()
        assert gen.low_note <= gen.cur_note <= gen.high_note
        assert not gen.is_blacklisted(previous, gen.cur_note)
        previous = gen.cur_note


def test_tick_on_beat_plays_note():
    service, queue, beats, gen = make()
    gen.tick("", 0)
    offs = [e for e in queue.events() if e.type is MidiEventType.NOTE_OFF]
    assert [e.tick for e in offs] == [beats.ticks_per_beat(BeatUnit.B_8)]
    queue.handle_events(0)
    assert service.messages == [f"noteOn 1 {gen.cur_note} 100"]


def test_tick_off_beat_plays_nothing():
    _, queue, _, gen = make()
    gen.tick("", 5)
    assert len(queue) == 0


def test_note_held_for_num_repeats_beats():
    _, _, beats, gen = make(seed=3)
    quarter = beats.ticks_per_beat(BeatUnit.B_4)
    gen.tick("", 0)
    note = gen.cur_note
    for beat in range(1, gen.num_repeats):
        gen.tick("", beat * quarter)
        assert gen.cur_note == note
    gen.tick("", gen.num_repeats * quarter)
    assert not gen.is_blacklisted(note, gen.cur_note)
    assert gen.cur_note != note