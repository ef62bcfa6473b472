"""Encode a board into a fixed-width bit vector."""

from __future__ import annotations

import chess

from pgnfacts.EncodedPosition import EncodedPosition
from pgnfacts.EncodingLayout import (
    BYTE_ALIGNED_LAYOUT,
    COLOR_ORDER,
    PIECE_ORDER,
    EncodingLayout,
)


def _castling_flags(board: chess.Board) -> tuple[bool, bool, bool, bool]:
    return (
        board.has_kingside_castling_rights(chess.WHITE),
        board.has_queenside_castling_rights(chess.WHITE),
        board.has_kingside_castling_rights(chess.BLACK),
        board.has_queenside_castling_rights(chess.BLACK),
    )


def encode_position(
    board: chess.Board,
    layout: EncodingLayout = BYTE_ALIGNED_LAYOUT,
) -> EncodedPosition:
    """Return the encoded position for ``board``.

    Occupancy masks are laid out color-major, piece-minor at a 64-bit stride,
    followed by the layout padding, the four castling flags and the
    side-to-move flag. Any remaining bits stay zero.
    """
    bits = 0
    offset = 0
    for color in COLOR_ORDER:
        for piece_type in PIECE_ORDER:
            bits |= board.pieces_mask(piece_type, color) << offset
            offset += 64
    offset += layout.padding
    for available in _castling_flags(board):
        if available:
            bits |= 1 << offset
        offset += 1
    if board.turn == chess.WHITE:
        bits |= 1 << offset
    return EncodedPosition(bits=bits, layout=layout)
