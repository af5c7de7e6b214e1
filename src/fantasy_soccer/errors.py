"""Exceptions raised by the fantasy soccer services."""


class FantasySoccerError(Exception):
    """Base exception for fantasy soccer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class PlayerNotFoundError(FantasySoccerError):
    """Raised when a player id is not in the data source."""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Player not found: {player_id}")


class TeamBuilderError(FantasySoccerError):
    """Raised when a roster cannot be saved as a fantasy team."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__(message)
