"""
Game state for TicTacToe.
Derives the board, current player and game status from a move log.
"""

from enum import Enum
from typing import Optional, List, Tuple, Iterable, Any, Union
from dataclasses import dataclass

from .win_checker import evaluate, is_full


class Player(Enum):
    """The two players (marks) in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(Enum):
    """Where the game is at."""
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# None means an empty cell
EMPTY_BOARD: Tuple[Optional[Player], ...] = (None,) * NUM_CELLS


def next_player(player: Player) -> Player:
    """Toggle between X and O."""
    return player.opposite()


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    index: int              # Cell index (0-8), row * 3 + col
    player: Player          # Who made the move

    @classmethod
    def from_dict(cls, data: Any) -> Optional["Move"]:
        """
        Build a move from a log entry such as {"index": 4, "player": "X"}.

        Args:
            data: A Move, or a mapping as returned by the move service.

        Returns:
            The Move, or None if the entry is malformed.
        """
        if isinstance(data, Move):
            data = {"index": data.index, "player": data.player}
        if not isinstance(data, dict):
            return None

        index = data.get("index")
        player = data.get("player")

        # bool is an int subclass, True must not mean cell 1
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if not 0 <= index < NUM_CELLS:
            return None

        if isinstance(player, str):
            try:
                player = Player(player)
            except ValueError:
                return None
        if not isinstance(player, Player):
            return None

        return cls(index=index, player=player)

    def to_dict(self) -> dict:
        """JSON-ready form of the move."""
        return {"index": self.index, "player": self.player.value}

    @property
    def row(self) -> int:
        return self.index // BOARD_SIZE

    @property
    def col(self) -> int:
        return self.index % BOARD_SIZE


@dataclass(frozen=True)
class GameState:
    """
    The complete state of the TicTacToe game.

    Never mutated: every change to the move log produces a new GameState
    through derive().

    Tracks:
    - The board (9 cells, row-major, None for empty)
    - Whose turn it is
    - Game status (playing, won, draw)
    - The winning line when the game is won
    """

    board: Tuple[Optional[Player], ...] = EMPTY_BOARD
    current_player: Player = Player.X
    status: GameStatus = GameStatus.PLAYING
    winning_line: Tuple[int, ...] = ()

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None."""
        if self.status != GameStatus.WON:
            return None
        return self.board[self.winning_line[0]]

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices.
        """
        return [i for i, cell in enumerate(self.board) if cell is None]

    def to_dict(self) -> dict:
        """JSON-ready snapshot of the state."""
        return {
            "board": [cell.value if cell else None for cell in self.board],
            "current_player": self.current_player.value,
            "status": self.status.value,
            "winning_line": list(self.winning_line),
        }

    def render(self) -> str:
        """Render the board as text (cells numbered 1-9 when empty)."""
        lines = ["+---+---+---+"]
        for row in range(BOARD_SIZE):
            marks = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                piece = self.board[index]
                marks.append(piece.value if piece else str(index + 1))
            lines.append("| " + " | ".join(marks) + " |")
            lines.append("+---+---+---+")
        return "\n".join(lines)


MoveLike = Union[Move, dict]


def derive(moves: Iterable[MoveLike]) -> GameState:
    """
    Rebuild the game state from an ordered move log.

    Entries that are malformed, off the board, or target an occupied cell
    are skipped; later entries are still applied. The declared player of
    each applied move decides who plays next.

    Args:
        moves: The move log, as Move objects or service dicts. Only read.

    Returns:
        A fresh GameState.
    """
    board: List[Optional[Player]] = list(EMPTY_BOARD)
    current = Player.X

    for entry in moves:
        move = Move.from_dict(entry)
        if move is None or board[move.index] is not None:
            continue
        board[move.index] = move.player
        current = next_player(move.player)

    final_board = tuple(board)
    result = evaluate(final_board)

    if result.winner is not None:
        return GameState(
            board=final_board,
            current_player=current,
            status=GameStatus.WON,
            winning_line=result.line,
        )
    if is_full(final_board):
        return GameState(board=final_board, current_player=current, status=GameStatus.DRAW)
    return GameState(board=final_board, current_player=current)


# Quick test
if __name__ == "__main__":
    print("Testing derive...")

    log = [
        {"index": 4, "player": "X"},  # X center
        {"index": 0, "player": "O"},  # O top-left
        {"index": 2, "player": "X"},  # X top-right
        {"index": 6, "player": "O"},  # O bottom-left
        {"index": 6, "player": "X"},  # occupied, skipped
        {"index": 3, "player": "O"},  # O completes the left column
    ]

    state = derive(log)
    print(state.render())
    assert state.status == GameStatus.WON
    assert state.winning_line == (0, 3, 6)

    print("\nGame state test done!")
