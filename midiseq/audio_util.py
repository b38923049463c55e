"""Audio constants and sample conversion helpers."""

SAMPLES_PER_SEC = 48000
SAMPLES_PER_MS = 48

SCALE = (1 << 23) - 1


def to_hex(value: int) -> str:
    """Hex text of ``value``; negatives shown as 32-bit two's complement."""
    if value < 0:
        value &= 0xFFFFFFFF
    return f"0x{value:x}"


def scale_signal(sig: float) -> int:
    """Map a signal in [-1, 1] to a 24-bit sample left-aligned in 32 bits."""
    scaled = ((sig * 0.5) + 0.5) * SCALE
    return (int(scaled) << 8) & 0xFFFFFFFF


def ms_to_samples(ms: float) -> int:
    """Number of samples in ``ms`` milliseconds."""
    return int(ms * SAMPLES_PER_MS)