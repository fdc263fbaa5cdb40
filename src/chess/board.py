"""
The Game board: the configuration of pieces on the 8x8 grid.

A Board is a value. Every change returns a new Board, so hypothetical moves can be tried out
(and thrown away) without ever touching the board the game is actually played on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import Optional, Self

from src.chess.fen import STARTING_POSITION, is_valid_position
from src.chess.pieces import Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import InvalidFENError


@dataclass(frozen=True)
class Board:
    # only occupied squares are stored
    position: dict[Square, Piece] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # never share the mapping with whoever handed it in
        object.__setattr__(self, "position", dict(self.position))

    def __hash__(self) -> int:
        return hash(frozenset(self.position.items()))

    @classmethod
    def starting_position(cls) -> Self:
        """Black back rank on row 0, black pawns on row 1, white pawns on row 6, white back rank on row 7"""
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on row 0 (the 8th rank), starting with the rook on a8
        * black pawns cover row 1 entirely
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 holds the white pawns (capital letters)
        * row 7 holds the white pieces, again read from the a-file to the h-file.
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(
                f"Cannot interpret supplied string as a board position: {fen_str!r}"
            )

        position: dict[Square, Piece] = {}
        for row, fen_one_row in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
        return cls(position)

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def render(self) -> str:
        """Text diagram, rank 8 on top, ex. for logging. Empty squares are drawn as dots."""
        lines = []
        for row in range(BOARD_DIMENSIONS[0]):
            cells = []
            for col in range(BOARD_DIMENSIONS[1]):
                piece = self.piece(Square(row, col))
                cells.append(piece.symbol if piece is not None else "\u00b7")
            lines.append(f"{BOARD_DIMENSIONS[0] - row} {' '.join(cells)}")
        lines.append("  " + " ".join(ascii_lowercase[: BOARD_DIMENSIONS[1]]))
        return "\n".join(lines)

    def piece(self, square: Square) -> Optional[Piece]:
        """The piece on the square. None for an empty square (or a square that is not on the board)."""
        return self.position.get(square)

    def is_empty(self, square: Square) -> bool:
        return square not in self.position

    def locate(self, piece: Piece) -> Optional[Square]:
        """First square (in scanning order) holding this piece"""
        return next(
            (square for square in all_squares() if self.position.get(square) == piece),
            None,
        )

    def locate_color(self, color: Color) -> list[Square]:
        """Squares holding a piece of this color, in scanning order"""
        return [
            square
            for square in all_squares()
            if square in self.position and self.position[square].color == color
        ]

    # --- COPY-ON-WRITE UPDATES ---
    def with_piece(self, square: Square, piece: Piece) -> Board:
        position = dict(self.position)
        position[square] = piece
        return Board(position)

    def without_piece(self, square: Square) -> Board:
        position = dict(self.position)
        position.pop(square, None)
        return Board(position)

    def move_piece(self, from_square: Square, to_square: Square) -> Board:
        """Relocate whatever stands on from_square, overwriting the destination. No rules applied."""
        position = dict(self.position)
        piece_that_moved = position.pop(from_square, None)
        if piece_that_moved is None:
            position.pop(to_square, None)
        else:
            position[to_square] = piece_that_moved
        return Board(position)
