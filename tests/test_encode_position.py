from __future__ import annotations

import unittest

import chess

from pgnfacts.encode_position import encode_position
from pgnfacts.EncodingLayout import (
    BYTE_ALIGNED_LAYOUT,
    COMPACT_LAYOUT,
    PLACEMENT_BITS,
    EncodingLayout,
)


def _board_after(*sans: str) -> chess.Board:
    board = chess.Board()
    for san in sans:
        board.push_san(san)
    return board


class EncodePositionTests(unittest.TestCase):
    def test_initial_position_placement_bits(self) -> None:
        encoded = encode_position(chess.Board(), BYTE_ALIGNED_LAYOUT)

        white_pawns = EncodingLayout.placement_offset(chess.WHITE, chess.PAWN)
        self.assertEqual(white_pawns, 0)
        self.assertFalse(encoded.bit(chess.A1))
        for square in chess.SquareSet(chess.BB_RANK_2):
            self.assertTrue(encoded.bit(white_pawns + square))

        white_king = EncodingLayout.placement_offset(chess.WHITE, chess.KING)
        self.assertEqual(white_king, 320)
        self.assertTrue(encoded.bit(white_king + chess.E1))
        self.assertFalse(encoded.bit(white_king + chess.D1))

        black_rooks = EncodingLayout.placement_offset(chess.BLACK, chess.ROOK)
        self.assertEqual(black_rooks, 64 * 7)
        self.assertTrue(encoded.bit(black_rooks + chess.A8))
        self.assertTrue(encoded.bit(black_rooks + chess.H8))

        black_king = EncodingLayout.placement_offset(chess.BLACK, chess.KING)
        self.assertEqual(black_king, 704)
        self.assertTrue(encoded.bit(black_king + chess.E8))

    def test_every_occupied_square_sets_exactly_one_bit(self) -> None:
        board = _board_after("e4", "d5", "exd5", "Qxd5", "Nc3")
        encoded = encode_position(board, BYTE_ALIGNED_LAYOUT)

        placement = encoded.bits & ((1 << PLACEMENT_BITS) - 1)
        self.assertEqual(bin(placement).count("1"), len(board.piece_map()))
        for square, piece in board.piece_map().items():
            offset = EncodingLayout.placement_offset(piece.color, piece.piece_type)
            self.assertTrue(encoded.bit(offset + square))

    def test_castling_and_turn_bits_follow_padding(self) -> None:
        layout = BYTE_ALIGNED_LAYOUT
        self.assertEqual(layout.padding, 3)
        self.assertEqual(layout.castling_offset, 771)
        self.assertEqual(layout.turn_offset, 775)
        self.assertEqual(layout.trailing_bits, 24)

        encoded = encode_position(chess.Board(), layout)

        for offset in range(layout.castling_offset, layout.castling_offset + 4):
            self.assertTrue(encoded.bit(offset))
        self.assertTrue(encoded.bit(layout.turn_offset))
        for offset in range(PLACEMENT_BITS, layout.castling_offset):
            self.assertFalse(encoded.bit(offset))
        self.assertEqual(encoded.bits >> (layout.turn_offset + 1), 0)

    def test_byte_aligned_flags_fill_byte_96(self) -> None:
        data = encode_position(chess.Board(), BYTE_ALIGNED_LAYOUT).to_bytes()

        self.assertEqual(data[96], 0xF8)
        self.assertEqual(data[97:], bytes(3))

    def test_explicit_padding_moves_flags_to_the_end(self) -> None:
        layout = EncodingLayout(width=800, padding_before_castling=27)

        encoded = encode_position(chess.Board(), layout)

        self.assertEqual(layout.castling_offset, 795)
        self.assertEqual(encoded.bits >> 795, 0b11111)
        self.assertEqual(encoded.to_bytes()[96], 0)

    def test_default_padding_matches_byte_aligned_preset(self) -> None:
        self.assertEqual(EncodingLayout(width=800), BYTE_ALIGNED_LAYOUT)
        self.assertEqual(EncodingLayout(width=774).padding, 1)

    def test_compact_layout_has_no_padding(self) -> None:
        layout = COMPACT_LAYOUT
        self.assertEqual(layout.width, 773)
        self.assertEqual(layout.castling_offset, 768)
        self.assertEqual(layout.turn_offset, 772)
        self.assertEqual(layout.byte_length, 97)

        encoded = encode_position(chess.Board(), layout)

        self.assertEqual(encoded.bits >> 768, 0b11111)
        self.assertEqual(len(encoded.to_bytes()), 97)

    def test_lost_castling_rights_and_side_to_move(self) -> None:
        layout = COMPACT_LAYOUT
        board = _board_after("e4", "e5", "Ke2")

        encoded = encode_position(board, layout)

        castling = [encoded.bit(layout.castling_offset + index) for index in range(4)]
        self.assertEqual(castling, [False, False, True, True])
        self.assertFalse(encoded.bit(layout.turn_offset))

    def test_queenside_rook_move_clears_only_that_right(self) -> None:
        layout = COMPACT_LAYOUT
        board = _board_after("a4", "h5", "Ra3", "Rh6")

        encoded = encode_position(board, layout)

        castling = [encoded.bit(layout.castling_offset + index) for index in range(4)]
        self.assertEqual(castling, [True, False, False, True])
        self.assertTrue(encoded.bit(layout.turn_offset))

    def test_encoding_is_deterministic(self) -> None:
        board = _board_after("d4", "Nf6", "c4")

        first = encode_position(board, BYTE_ALIGNED_LAYOUT)
        second = encode_position(board.copy(), BYTE_ALIGNED_LAYOUT)

        self.assertEqual(first, second)
        self.assertEqual(first.to_bytes(), second.to_bytes())

    def test_structurally_equal_boards_encode_identically(self) -> None:
        shuffled = _board_after("Nf3", "Nf6", "Ng1", "Ng8")

        self.assertNotEqual(shuffled.fen(), chess.Board().fen())
        self.assertEqual(
            encode_position(shuffled, COMPACT_LAYOUT),
            encode_position(chess.Board(), COMPACT_LAYOUT),
        )

    def test_byte_orders(self) -> None:
        little = encode_position(chess.Board(), EncodingLayout(width=800, byte_order="little"))
        big = encode_position(chess.Board(), EncodingLayout(width=800, byte_order="big"))

        little_bytes = little.to_bytes()
        big_bytes = big.to_bytes()
        self.assertEqual(len(little_bytes), 100)
        self.assertEqual(little_bytes[0], 0x00)
        self.assertEqual(little_bytes[1], 0xFF)
        self.assertEqual(little_bytes[96], 0xF8)
        self.assertEqual(little_bytes[-1], 0x00)
        self.assertEqual(big_bytes, little_bytes[::-1])

    def test_layout_rejects_narrow_width(self) -> None:
        with self.assertRaises(ValueError):
            EncodingLayout(width=772)
        with self.assertRaises(ValueError):
            EncodingLayout(width=800, byte_order="middle")
        with self.assertRaises(ValueError):
            EncodingLayout(width=800, padding_before_castling=28)
        with self.assertRaises(ValueError):
            EncodingLayout(width=800, padding_before_castling=-1)

    def test_bit_outside_width_raises(self) -> None:
        encoded = encode_position(chess.Board(), COMPACT_LAYOUT)

        with self.assertRaises(IndexError):
            encoded.bit(773)


if __name__ == "__main__":
    unittest.main()
