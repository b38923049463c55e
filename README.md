# midiseq

A small, tick-driven MIDI sequencer library built for practising by ear.
Time advances in ticks; generators work in musical units (256th notes up to
whole notes) through `Beats`, and schedule note-on/note-off pairs on a
`MidiQueue`, which hands them to a MIDI output object when their tick comes
due.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

- `midiseq.beats` – `BeatUnit` and `Beats`: ticks per beat, `is_beat`,
  `tick_to_beat`.
- `midiseq.chords` – `ChordType`, `ChordInversion`, `create_chord_by_root`
  and `create_chord_by_lowest_note`.
- `midiseq.scale` – `Scale(root, mode)` over the seven diatonic modes;
  `note(degree)` and `chord_type(degree)`.
- `midiseq.guitar` – `GuitarString` and `guitar_to_midi(string, fret)`.
- `midiseq.rng` – `RngService`, a seedable source of random integers.
- `midiseq.midi_queue` – `MidiEvent`, `MidiQueue` (raises `QueueFullError`
  when full, 10000 events by default).
- `midiseq.messages` – raw bytes for note-on, note-off and control-change
  messages, and `message_word` to pack them into one integer.
- `midiseq.recorder` – `RecordingMidiService`, an output that stores every
  message it receives as text.
- `midiseq.sequence` / `midiseq.multi_sequence` – step sequencers playing
  `NoteEvent`s and `RollEvent`s, with per-step probability, offset and
  one-shot flags.
- Generators: `GeneratorChord`, `GeneratorChordSingleNote`,
  `GeneratorInterval`, `GeneratorSingleNote`, and `RandomChordService` for
  random in-key triads.
- `midiseq.modules` – ready-made modules pairing a tempo with a generator
  (`ModuleChord`, `ModuleInterval`, `ModuleSingleNote`,
  `ModuleChordSingleNote`, `ModuleChordSeq`, `ModuleStressTest`).
- `midiseq.app` – `MidiApp`, which advances one tick per `tick(message)` call.

## Driving the application

`MidiApp` takes any object with `note_on(channel, note, velocity)`,
`note_off(channel, note)` and `cc(channel, controller, value)` methods.
Call `tick` once per tick with the pending command, or `""`:

| message | effect                                            |
|---------|---------------------------------------------------|
| `" "`   | start / stop playback                             |
| `"m"`   | switch to the next mode                           |
| `"n"`   | next chord (and new line, in chord + single note) |
| `"a"`   | toggle automatic chord changes                    |
| `"h"`   | toggle playing only the highest chord note        |
| `"s"`   | new single-note line (chord + single note)        |
| `"u"`   | mute / unmute the single-note line                |

```python
from midiseq.app import MidiApp
from midiseq.recorder import RecordingMidiService
from midiseq.rng import RngService

output = RecordingMidiService()
app = MidiApp(output, RngService(seed=1))
app.tick(" ")            # start playing
for _ in range(2000):
    app.tick("")
print(output.messages[:3])
```

## A single sequence

```python
from midiseq.beats import Beats, BeatUnit
from midiseq.midi_queue import MidiQueue
from midiseq.recorder import RecordingMidiService
from midiseq.sequence import Sequence, Event, NoteEvent

beats = Beats(24)
service = RecordingMidiService()
queue = MidiQueue(service)
seq = Sequence(beats, queue, 1, 16, BeatUnit.B_16)

seq.add_event(0, Event(on=True, channel=1,
                       sub_event=NoteEvent(note=60, velocity=100,
                                           duration=beats.ticks_per_beat(BeatUnit.B_16))))

for step in range(2):
    tick = beats.ticks_per_beat(BeatUnit.B_16) * step
    seq.tick(tick)
    queue.handle_events(tick)

print(service.messages)   # ['noteOn 1 60 100', 'noteOff 1 60']
```

## Audio and drawing helpers

- `midiseq.audio_service.AudioService` fills stereo 32-bit sample buffers
  (`SampleBuffer`) and writes them to any object following the `AudioSink`
  protocol, stopping on a `"quit"` command from a `queue.Queue`. Its
  `sample()` currently returns silence. `midiseq.ugens` has the `Env` and
  `AHREnv` envelopes; `midiseq.audio_util` has `scale_signal` and
  `ms_to_samples`.
- `midiseq.graphics.GraphicsService` collects rectangles and text and draws
  them in `z` order through any `Renderer`; `midiseq.scene.Scene` is a demo
  scene with a square moved by clicks and arrow keys.

## What it does not do

- There is no command to run: the package is a library, and something else
  must call `MidiApp.tick` at a steady rate and feed it commands.
- It does not open MIDI ports. Output goes to whatever object you pass in;
  `RecordingMidiService` only records text.
- It does not talk to a sound card or open a window; `AudioSink` and
  `Renderer` are protocols for you to implement.