"""Palette Plot errors."""


class PalettePlotError(Exception):
    """Base class for Palette Plot errors."""
    pass


class CatalogValidationError(PalettePlotError):
    """A declared (space, dimension) pair cannot be read on the test color."""

    def __init__(self, space_id: str, dimension: str, reason: str):
        self.space_id = space_id
        self.dimension = dimension
        self.reason = reason
        super().__init__(f"Dimension {dimension} not usable in space {space_id}: {reason}")


class PaletteParseError(PalettePlotError):
    """Bulk palette text is not a JSON array of valid colors."""

    def __init__(self, message: str, value: object = None):
        self.value = value
        super().__init__(message)


class UndefinedCoordinateError(PalettePlotError):
    """A coordinate could not be read off a color."""
    pass
