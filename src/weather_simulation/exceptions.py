"""Exception types raised by the weather simulation."""


class WeatherSimulationError(Exception):
    """Base class for all weather simulation errors."""


class ConfigurationError(WeatherSimulationError, ValueError):
    """Raised when a grid or configuration is constructed with invalid values."""


class GridIndexError(WeatherSimulationError, IndexError):
    """Raised when a cell outside the grid is read or written."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Position ({x}, {y}) is out of bounds for a {width}x{height} grid"
        )
