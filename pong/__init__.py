"""Pong with local two-player, player-vs-AI and AI-vs-AI spectator modes."""
from .session import Controls, GameSession, GameState, Mode

__version__ = "1.0.0"
