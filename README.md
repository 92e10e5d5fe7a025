# simplechess

A small chess game for two players sharing one terminal.

## Installing

```
pip install .
```

## Playing

Start a game with:

```
simplechess
```

White moves first. Before each move the program prints whose turn it is and
the board. White's pieces are shown in upper case (`P N B R Q K`) and Black's
in lower case; empty squares are shown as `.`. Below the board the captured
pieces of each side are listed.

Enter a move as two squares separated by whitespace. A square is written as a
row digit followed by an upper-case column letter, for example:

```
2E 4E
```

The row digit counts the printed lines of the board from the top, starting at
1, and the letter `A` to `H` picks the column from the left. Note that the row
labels printed beside the board run from 8 at the top down to 1, so they do
not match the digit you type. White starts on the top two lines and moves
downwards; Black starts on the bottom two lines and moves upwards.

After each move the program says whether it succeeded, or prints the reason
it was refused (`No piece at the given position`, `Not your piece`,
`Invalid move`, `Invalid special move`). If the move puts the opponent's king
in check it says so. When a pawn reaches the far row you are asked for the
index of one of your own captured pieces to put in its place; the question is
repeated until a valid index is given.

The game runs until the input ends (for example with Ctrl-D).

## Rules covered

- Moves for pawns, knights, bishops, rooks, queens and kings, with paths
  blocked by other pieces and no capturing of your own pieces.
- Pawns may advance two squares from their starting row and capture one
  square diagonally forward.
- Captures, promotion from the captured pieces, and check detection.

## What it does not do

- No checkmate or stalemate detection; the game never declares a winner.
- No castling and no en passant capture of a pawn that has just passed.
- A move that leaves your own king in check is not refused.
- Games cannot be saved or loaded.

## Using it as a library

```python
from simplechess.game import Game
from simplechess.types import Color, Position

game = Game(Color.WHITE)
result = game.play(Position(1, 4), Position(3, 4))
```

`Game.play` raises `simplechess.chessboard.MoveError` for an illegal move and
otherwise returns a `MoveResult` (`NONE`, `CHECK_KING` or
`CAN_UPGRADE_PIECE`), then passes the turn. After `CAN_UPGRADE_PIECE`, call
`Game.upgrade_piece(index, position)` to promote. `Position(x, y)` takes a
zero-based row and column and raises `ValueError` off the board;
`Position.from_str("2E")` parses the typed form.

`simplechess.presenters` turns pieces, boards and games into text with
`render_piece`, `render_board` and `render_game`.
`simplechess.cli.CommandLineUI` runs the interactive loop over any pair of
text streams.

## Running the tests

```
pip install .[test]
pytest
```