"""
Game Data Models

Contains the serializable snapshot of a hosted game session.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    current_round: int
    max_rounds: int
    remaining_attempts: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # (letter, position value) pairs for JSON serialization
    keyboard: Dict[str, Optional[str]]
    answer: Optional[str] = None  # Only included when game is over
