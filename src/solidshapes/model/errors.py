"""Exceptions raised by the shape model."""


class ShapeError(ValueError):
    """Base class for invalid shape definitions."""


class InvalidDimensionError(ShapeError):
    """A dimension is not a finite number greater than zero."""

    def __init__(self, shape_name: str, dimension: str, value: object):
        self.shape_name = shape_name
        self.dimension = dimension
        self.value = value
        super().__init__(
            f"{shape_name}: '{dimension}' must be a finite number greater than zero, got {value!r}."
        )


class UnknownShapeError(ShapeError):
    """Area requested for a shape kind that has no formula."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"Can't compute area of unknown shape '{kind}'!")
