"""
registry.py - Bookkeeping for several games running side by side

A front end that shows more than one board creates its games through a
GameRegistry. Each registry hands out its own sequential ids; nothing is
shared between registries.
"""

import threading
from typing import Dict, Iterator, Tuple, Union

from connectfour.debug import debug
from connectfour.game.rules import GameState, Player, Rejected, new_game


class GameRegistry:
    """Owns a set of independent GameState instances keyed by integer id."""

    def __init__(self):
        self._games: Dict[int, GameState] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    def create(self, height: int, width: int,
               player1: Player, player2: Player) -> Tuple[int, Union[GameState, Rejected]]:
        """
        Create and register a game.

        Returns:
            (game_id, game). On Rejected nothing is registered and game_id is -1.
        """
        game = new_game(height, width, player1, player2)
        if isinstance(game, Rejected):
            return -1, game

        with self._lock:
            game_id = self._next_id
            self._next_id += 1
            self._games[game_id] = game

        debug.debug(f"Registered game {game_id}", "registry")
        return game_id, game

    def get(self, game_id: int) -> GameState:
        """Raises KeyError for unknown ids."""
        return self._games[game_id]

    def remove(self, game_id: int) -> GameState:
        with self._lock:
            game = self._games.pop(game_id)
        debug.debug(f"Removed game {game_id}", "registry")
        return game

    def reset_all(self):
        """Reset every registered game."""
        with self._lock:
            games = list(self._games.values())
        for game in games:
            game.reset_game()
        debug.info(f"Reset {len(games)} game(s)", "registry")

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: int) -> bool:
        return game_id in self._games

    def __iter__(self) -> Iterator[Tuple[int, GameState]]:
        with self._lock:
            items = list(self._games.items())
        return iter(items)
