"""A MIDI output that records what it is sent as text."""


class RecordingMidiService:
    """Keeps every message it receives in ``messages``."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def note_on(self, channel: int, note: int, velocity: int) -> None:
        self.messages.append(f"noteOn {channel} {note} {velocity}")

    def note_off(self, channel: int, note: int) -> None:
        self.messages.append(f"noteOff {channel} {note}")

    def cc(self, channel: int, controller: int, value: int) -> None:
        self.messages.append(f"cc {channel} {controller} {value}")