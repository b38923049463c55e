"""Encoding of short MIDI channel messages."""

_NOTE_OFF = 0x80
_NOTE_ON = 0x90
_CONTROL_CHANGE = 0xB0


def _status(kind: int, channel: int) -> int:
    if not 1 <= channel <= 16:
        raise ValueError(f"MIDI channel must be in 1..16, got {channel}")
    return kind | (channel - 1)


def _data(name: str, value: int) -> int:
    if not 0 <= value <= 127:
        raise ValueError(f"MIDI {name} must be in 0..127, got {value}")
    return value


def note_on_message(channel: int, note: int, velocity: int) -> bytes:
    """Note-on bytes; ``channel`` is 1-based."""
    return bytes(
        (_status(_NOTE_ON, channel), _data("note", note), _data("velocity", velocity))
    )


def note_off_message(channel: int, note: int) -> bytes:
    """Note-off bytes with zero release velocity; ``channel`` is 1-based."""
    return bytes((_status(_NOTE_OFF, channel), _data("note", note), 0))


def cc_message(channel: int, controller: int, value: int) -> bytes:
    """Control-change bytes; ``channel`` is 1-based."""
    return bytes(
        (
            _status(_CONTROL_CHANGE, channel),
            _data("controller", controller),
            _data("value", value),
        )
    )


def message_word(data: bytes) -> int:
    """Pack up to four message bytes into one word, first byte lowest."""
    if len(data) > 4:
        raise ValueError("a short MIDI message holds at most 4 bytes")
    return int.from_bytes(bytes(data), "little")