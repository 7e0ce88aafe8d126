"""Random identifiers for stored documents."""

import secrets


def generate_uuid_v4() -> str:
    """Return a random version-4 UUID string in canonical 8-4-4-4-12 form."""
    a, b, c, d = (secrets.randbits(32) for _ in range(4))
    return (
        f"{a:08x}-"
        f"{(b >> 16) & 0xFFFF:04x}-"
        f"{(b & 0x0FFF) | 0x4000:04x}-"
        f"{((c >> 16) & 0x3FFF) | 0x8000:04x}-"
        f"{c & 0xFFFF:04x}{d:08x}"
    )