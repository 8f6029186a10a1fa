"""Text client -- a terminal map and command loop for playing a game.

The client only reads the game's public state and issues commands
through ``Game.deploy``, ``Game.remove`` and ``Game.advance_turn``.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, TextIO

from antdefense.insects.catalog import UNIT_TYPES
from antdefense.simulation.outcome import Status

if TYPE_CHECKING:
    from antdefense.simulation.game import Game
    from antdefense.world.place import Place

_CELL_WIDTH = 7

_HELP = """\
Commands:
  deploy <Type> <tunnel,step>   place an ant (e.g. deploy Thrower 0,3)
  remove <tunnel,step>          take an ant off the board
  turn  (or an empty line)      end the turn
  map                           redraw the board
  ants                          list ant types and costs
  help                          show this message
  quit                          leave the game"""


def _cell(place: Place) -> str:
    """Render one place as ``ant|bees``, e.g. ``Bo+Th|2``."""
    ant = ""
    if place.ant is not None:
        ant = place.ant.name[:2]
        if place.ant.contained is not None:
            ant += "+" + place.ant.contained.name[:2]
    elif place.is_water:
        ant = "~~"
    bees = str(len(place.bees)) if place.bees else ""
    return f"{ant}|{bees}".center(_CELL_WIDTH)


def render(game: Game) -> str:
    """Return a text picture of the board.

    One row per tunnel, the queen on the left and the bee entrance on
    the right.  Each cell shows the ant (two-letter prefix, ``+`` for a
    carried ant, ``~~`` for empty water) and the number of bees.
    """
    colony = game.colony
    lines = [
        f"Turn {game.turn}  Food {colony.food}  "
        f"Hive {game.hive.remaining}  {game.status().name}",
    ]
    header = "".join(str(step).center(_CELL_WIDTH) for step in range(colony.tunnel_length))
    lines.append("      " + header)
    queen_bees = len(colony.queen_place.bees)
    for tunnel, row in enumerate(colony.places):
        queen = f"Q|{queen_bees}" if tunnel == 0 and queen_bees else "Q"
        cells = "".join(_cell(place) for place in row)
        lines.append(f"{tunnel:>2} {queen:<3}{cells}")
    return "\n".join(lines)


class TextClient:
    """Interactive command loop around a Game.

    Attributes:
        game: The game being played.
        read: Returns the next command line; raises EOFError at end.
        out: Stream the client writes to.
    """

    def __init__(
        self,
        game: Game,
        read: Callable[[str], str] = input,
        out: TextIO | None = None,
    ) -> None:
        self.game = game
        self.read = read
        self.out = out if out is not None else sys.stdout

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def run(self) -> Status:
        """Play until the game ends, the player quits, or input runs out.

        Returns:
            The game status when the loop stopped.
        """
        self._say(render(self.game))
        while self.game.status() is Status.ONGOING:
            try:
                line = self.read("> ")
            except EOFError:
                break
            if not self.handle(line):
                break
        self._say(f"Game over: {self.game.status().name}")
        return self.game.status()

    def handle(self, line: str) -> bool:
        """Execute one command line.

        Returns:
            False if the player asked to quit, True otherwise.
        """
        words = line.split()
        command = words[0].lower() if words else "turn"
        args = words[1:]

        match command:
            case "quit" | "exit":
                return False
            case "turn" | "t":
                self.game.advance_turn()
                self._say(render(self.game))
            case "map":
                self._say(render(self.game))
            case "help" | "?":
                self._say(_HELP)
            case "ants":
                for unit in UNIT_TYPES.values():
                    self._say(f"  {unit.name:<10} cost {unit.food_cost:<2} {unit.description}")
            case "deploy" if len(args) == 2:
                if self.game.deploy(args[0], args[1]):
                    self._say(render(self.game))
                else:
                    self._report_failure()
            case "remove" if len(args) == 1:
                if self.game.remove(args[0]):
                    self._say(render(self.game))
                else:
                    self._report_failure()
            case _:
                self._say(f"Unrecognised command: {line.strip()!r} (try 'help')")
        return True

    def _report_failure(self) -> None:
        reason = self.game.last_rejection
        name = reason.name.lower().replace("_", " ") if reason is not None else "unknown"
        self._say(f"Command failed: {name}")
