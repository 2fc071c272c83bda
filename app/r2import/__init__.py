"""r2import - Import shared mod profiles into a game-mod manager profile."""

__version__ = "0.1.0"
