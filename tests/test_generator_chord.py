from midiseq.beats import Beats, BeatUnit
from midiseq.chords import ChordInversion, ChordType, create_chord_by_lowest_note
from midiseq.generator_chord import (
    CHORDS_VOICE_LEADING,
    GeneratorChord,
    GeneratorChordMode,
    MajMinMode,
)
from midiseq.guitar import GuitarString, guitar_to_midi
from midiseq.midi_queue import MidiEventType, MidiQueue
from midiseq.recorder import RecordingMidiService
from midiseq.rng import RngService


def make(seed=1):
    service = RecordingMidiService()
    queue = MidiQueue(service)
    beats = Beats(60)
    gen = GeneratorChord(beats, queue, RngService(seed), 1)
    return service, queue, beats, gen


def is_major_chord(chord):
    return chord in [
        create_chord_by_lowest_note(chord[0], ChordType.MAJOR, inv)
        for inv in (ChordInversion.ROOT, ChordInversion.FIRST_INV)
    ]


def test_limits_come_from_guitar_positions():
    _, _, _, gen = make()
    assert gen.low_limit == guitar_to_midi(GuitarString.G, 3)
    assert gen.high_limit == guitar_to_midi(GuitarString.G, 9)


def test_random_chords_are_major_and_in_range():
    _, _, _, gen = make()
    for _ in range(50):
        gen.generate_next_chord()
        assert gen.low_limit <= gen.cur_chord[0] <= gen.high_limit
        assert gen.cur_chord[0] == gen.cur_lowest_note
        assert is_major_chord(gen.cur_chord)


def test_random_chords_never_repeat_lowest_note():
    _, _, _, gen = make(seed=5)
    previous = gen.cur_lowest_note
    for _ in range(100):
        gen.generate_next_chord()
        assert gen.cur_lowest_note != previous
        previous = gen.cur_lowest_note


def test_tick_on_beat_plays_whole_chord():
    service, queue, beats, gen = make()
    gen.tick("", 0)
    chord = gen.cur_chord
    assert len(queue) == 2 * len(chord)
    off_ticks = {e.tick for e in queue.events() if e.type is MidiEventType.NOTE_OFF}
    assert off_ticks == {beats.ticks_per_beat(BeatUnit.B_8)}
    queue.handle_events(0)
    assert sorted(service.messages) == sorted(f"noteOn 1 {n} 100" for n in chord)


def test_tick_off_beat_plays_nothing():
    _, queue, _, gen = make()
    gen.tick("", 1)
    assert len(queue) == 0
    assert gen.chord_counter == 0


def test_high_note_only_toggle():
    service, queue, _, gen = make()
    gen.tick("h", 0)
    assert gen.high_note_only is True
    queue.handle_events(0)
    assert service.messages == [f"noteOn 1 {gen.cur_chord[-1]} 100"]


def test_auto_switch_toggle_keeps_chord():
    _, _, beats, gen = make()
    chord = list(gen.cur_chord)
    quarter = beats.ticks_per_beat(BeatUnit.B_4)
    gen.tick("a", 0)
    assert gen.auto_switch is False
    for beat in range(1, 10):
        gen.tick("", beat * quarter)
    assert gen.cur_chord == chord


def test_auto_switch_changes_chord_after_repeats():
    _, _, beats, gen = make(seed=9)
    quarter = beats.ticks_per_beat(BeatUnit.B_4)
    gen.tick("", 0)
    chord = list(gen.cur_chord)
    for beat in range(1, gen.num_repeats):
        gen.tick("", beat * quarter)
        assert gen.cur_chord == chord
    gen.tick("", gen.num_repeats * quarter)
    assert gen.cur_chord[0] != chord[0]


def test_next_message_generates_new_chord():
    _, _, _, gen = make()
    lowest = gen.cur_lowest_note
    gen.tick("n", 1)
    assert gen.cur_lowest_note != lowest


def test_voice_leading_moves_one_step():
    _, _, _, gen = make(seed=4)
    gen.mode = GeneratorChordMode.VOICE_LEADING
    for _ in range(60):
        previous = gen.voice_leading_index
        gen.generate_next_chord()
        index = gen.voice_leading_index
        assert abs(index - previous) == 1
        assert 0 <= index < len(CHORDS_VOICE_LEADING)
        entry = CHORDS_VOICE_LEADING[index]
        assert gen.cur_chord == create_chord_by_lowest_note(
            entry.lowest_note + gen.voice_leading_low_limit,
            entry.chord_type,
            entry.inversion,
        )


def test_in_key_chords_stay_in_scale():
    _, _, _, gen = make(seed=2)
    gen.mode = GeneratorChordMode.IN_KEY
    scale = gen.random_chord_service.scale
    pitch_classes = {(scale.root + step) % 12 for step in scale.intervals}
    for _ in range(30):
        gen.generate_next_chord()
        assert len(gen.cur_chord) == 3
        assert all(note % 12 in pitch_classes for note in gen.cur_chord)


def test_chord_type_follows_maj_min_mode():
    _, _, _, gen = make()
    gen.maj_min_mode = MajMinMode.MINOR
    assert gen.random_chord_type() is ChordType.MINOR
    gen.maj_min_mode = MajMinMode.MAJOR_MINOR
    seen = {gen.random_chord_type() for _ in range(100)}
    assert seen == {ChordType.MAJOR, ChordType.MINOR}


def test_inversion_is_root_or_first():
    _, _, _, gen = make()
    seen = {gen.random_chord_inversion() for _ in range(100)}
    assert seen == {ChordInversion.ROOT, ChordInversion.FIRST_INV}