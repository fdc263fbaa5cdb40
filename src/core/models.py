"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
FenPieces = str


@dataclass
class GameModel:
    """
    Transport-safe representation of a chess game used between API, Service, DB, and Game layers.

    * board_fen: piece placement part of a FEN string
    * move_history: one entry per move: <piece FEN letter><from><to>, ex. "Pe2e4"
    * captured: per capturing color, the FEN letters of the pieces taken (in order), ex. {"white": "pn", "black": ""}
    * selected_square: square the human player currently has selected (if any), in algebraic notation
    """

    board_fen: str
    active_color: PieceColor
    status: str
    winner: Optional[PieceColor]
    human_color: PieceColor
    move_history: list[str] = field(default_factory=list)
    captured: dict[PieceColor, FenPieces] = field(default_factory=dict)
    selected_square: Optional[str] = None
