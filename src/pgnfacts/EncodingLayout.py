"""Bit layout of an encoded board position."""

from __future__ import annotations

from dataclasses import dataclass

import chess

PLACEMENT_BITS = 64 * 2 * 6
CASTLING_BITS = 4
TURN_BITS = 1
MIN_WIDTH = PLACEMENT_BITS + CASTLING_BITS + TURN_BITS
# Castling and side-to-move flags then fill bits 771..775, ending byte 96.
BYTE_BOUNDARY_PADDING = -MIN_WIDTH % 8
BYTE_ORDERS = ("little", "big")

COLOR_ORDER = (chess.WHITE, chess.BLACK)
PIECE_ORDER = (
    chess.PAWN,
    chess.ROOK,
    chess.KNIGHT,
    chess.BISHOP,
    chess.QUEEN,
    chess.KING,
)


@dataclass(frozen=True)
class EncodingLayout:
    """Fixed-width layout shared by every row of a deployment.

    Attributes:
        width: Total number of bits. Bits after the side-to-move flag are
            trailing zeros.
        byte_order: ``little`` packs bit ``i`` into byte ``i // 8`` at bit
            ``i % 8``; ``big`` emits the big-endian bytes of the bit integer.
        padding_before_castling: Zero bits between the piece placement block
            and the castling block. When unset, the castling and side-to-move
            flags are shifted to end on a byte boundary if the width allows it.
    """

    width: int = 800
    byte_order: str = "little"
    padding_before_castling: int | None = None

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH:
            raise ValueError(f"encoding width must be at least {MIN_WIDTH}, got {self.width}")
        if self.byte_order not in BYTE_ORDERS:
            raise ValueError(f"byte order must be one of {BYTE_ORDERS}, got {self.byte_order!r}")
        if self.padding_before_castling is None:
            object.__setattr__(
                self,
                "padding_before_castling",
                min(BYTE_BOUNDARY_PADDING, self.width - MIN_WIDTH),
            )
        elif not 0 <= self.padding_before_castling <= self.width - MIN_WIDTH:
            raise ValueError(
                f"padding before castling must be between 0 and {self.width - MIN_WIDTH} "
                f"for width {self.width}, got {self.padding_before_castling}"
            )

    @property
    def padding(self) -> int:
        return self.padding_before_castling  # type: ignore[return-value]

    @property
    def trailing_bits(self) -> int:
        return self.width - MIN_WIDTH - self.padding

    @property
    def castling_offset(self) -> int:
        return PLACEMENT_BITS + self.padding

    @property
    def turn_offset(self) -> int:
        return self.castling_offset + CASTLING_BITS

    @property
    def byte_length(self) -> int:
        return (self.width + 7) // 8

    @staticmethod
    def placement_offset(color: chess.Color, piece_type: chess.PieceType) -> int:
        """Return the first bit of the occupancy mask for a color/piece pair."""
        return 64 * (COLOR_ORDER.index(color) * len(PIECE_ORDER) + PIECE_ORDER.index(piece_type))


COMPACT_LAYOUT = EncodingLayout(width=MIN_WIDTH)
BYTE_ALIGNED_LAYOUT = EncodingLayout(width=800, padding_before_castling=BYTE_BOUNDARY_PADDING)
