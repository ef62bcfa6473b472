from dataclasses import dataclass

from pgnfacts.EncodingLayout import EncodingLayout


@dataclass(frozen=True)
class EncodedPosition:
    """Fixed-width bit vector for one board position."""

    bits: int
    layout: EncodingLayout

    def bit(self, index: int) -> bool:
        """Return whether bit ``index`` is set."""
        if not 0 <= index < self.layout.width:
            raise IndexError(f"bit {index} outside width {self.layout.width}")
        return bool((self.bits >> index) & 1)

    def to_bytes(self) -> bytes:
        """Serialize to ``layout.byte_length`` bytes in the layout byte order."""
        return self.bits.to_bytes(self.layout.byte_length, self.layout.byte_order)  # type: ignore[arg-type]
