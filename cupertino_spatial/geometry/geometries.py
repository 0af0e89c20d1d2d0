"""
Geometries Module
=================

Entry points for building shapes.

- Module functions: plain factories (double precision unless asked)
- mbr(): bounding rectangle of a collection of shapes
- GeometryFactory: config-driven factory that reports noteworthy input
  through the structured logger and never rejects anything the shapes
  themselves accept
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from cupertino_spatial.config import GeometryConfig
from cupertino_spatial.geometry.circle import Circle
from cupertino_spatial.geometry.line import Line
from cupertino_spatial.geometry.point import Point
from cupertino_spatial.geometry.precision import all_finite
from cupertino_spatial.geometry.rectangle import Rectangle
from cupertino_spatial.geometry.shape import Shape
from cupertino_spatial.logging import LogEvent, StructuredLogger, create_logger


def point(x: float, y: float, double_precision: bool = True) -> Point:
    return Point.create(x, y, double_precision)


def rectangle(
    x1: float, y1: float, x2: float, y2: float, double_precision: bool = True
) -> Rectangle:
    return Rectangle.create(x1, y1, x2, y2, double_precision)


def circle(x: float, y: float, radius: float, double_precision: bool = True) -> Circle:
    return Circle.create(x, y, radius, double_precision)


def line(
    x1: float, y1: float, x2: float, y2: float, double_precision: bool = True
) -> Line:
    return Line.create(x1, y1, x2, y2, double_precision)


def mbr(shapes: Iterable[Shape]) -> Rectangle:
    """
    Smallest rectangle containing the MBR of every shape.

    Raises:
        ValueError: If shapes is empty
    """
    result = None
    for shape in shapes:
        bounds = shape.mbr()
        result = bounds if result is None else result.add(bounds)
    if result is None:
        raise ValueError("Cannot compute the MBR of an empty collection of shapes")
    return result


class GeometryFactory:
    """
    Builds shapes with the configured precision.

    Reporting (never rejection):
    - DEBUG: every created shape, zero-radius circles, zero-length lines
    - WARNING: negative radius, NaN/infinite coordinates (if enabled)
    - ERROR: rectangles with inverted bounds, then the ValueError is re-raised

    Usage:
        factory = GeometryFactory.from_yaml("config/geometry.yaml")
        query = factory.rectangle(0, 0, 10, 10)
        c = factory.circle(5, 5, 2)
    """

    def __init__(
        self,
        config: Optional[GeometryConfig] = None,
        logger: Optional[StructuredLogger] = None
    ):
        self.config = config or GeometryConfig()
        self.logger = logger or create_logger("factory", level=self.config.logging_level)

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Union[str, Path],
        logger: Optional[StructuredLogger] = None
    ) -> "GeometryFactory":
        """
        Load GeometryConfig from YAML and build a factory around it.

        Errors are logged with LogEvent.CONFIG_ERROR and re-raised.
        """
        config_logger = logger or create_logger("config")
        try:
            config = GeometryConfig.from_yaml(yaml_path)
        except (FileNotFoundError, ValueError) as e:
            config_logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Failed to load geometry config",
                metadata={'path': str(yaml_path)},
                exc_info=e
            )
            raise

        config_logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Geometry config loaded",
            metadata={
                'path': str(yaml_path),
                'double_precision': config.double_precision,
                'log_level': config.log_level,
            }
        )
        if logger is not None:
            logger.set_level(config.logging_level)
        return cls(config=config, logger=logger)

    def _check_finite(self, shape_name: str, **coords: float) -> None:
        if self.config.warn_on_non_finite and not all_finite(*coords.values()):
            self.logger.warning(
                event=LogEvent.SHAPE_NON_FINITE,
                message=f"Non-finite coordinate passed to {shape_name}",
                metadata={k: repr(v) for k, v in coords.items()}
            )

    def _created(self, shape: Shape) -> None:
        self.logger.debug(
            event=LogEvent.SHAPE_CREATED,
            message=f"Created {shape.kind.value}",
            metadata={'shape': repr(shape)}
        )

    def point(self, x: float, y: float) -> Point:
        self._check_finite("point", x=x, y=y)
        p = Point.create(x, y, self.config.double_precision)
        self._created(p)
        return p

    def rectangle(self, x1: float, y1: float, x2: float, y2: float) -> Rectangle:
        self._check_finite("rectangle", x1=x1, y1=y1, x2=x2, y2=y2)
        try:
            r = Rectangle.create(x1, y1, x2, y2, self.config.double_precision)
        except ValueError as e:
            self.logger.error(
                event=LogEvent.INVALID_RECTANGLE,
                message="Rectangle bounds are inverted",
                metadata={'x1': x1, 'y1': y1, 'x2': x2, 'y2': y2},
                exc_info=e
            )
            raise
        self._created(r)
        return r

    def circle(self, x: float, y: float, radius: float) -> Circle:
        self._check_finite("circle", x=x, y=y, radius=radius)
        if radius < 0 and self.config.warn_on_negative_radius:
            self.logger.warning(
                event=LogEvent.SHAPE_NEGATIVE_RADIUS,
                message="Circle created with negative radius",
                metadata={'x': x, 'y': y, 'radius': radius}
            )
        elif radius == 0:
            self.logger.debug(
                event=LogEvent.SHAPE_DEGENERATE,
                message="Zero-radius circle",
                metadata={'x': x, 'y': y}
            )
        c = Circle.create(x, y, radius, self.config.double_precision)
        self._created(c)
        return c

    def line(self, x1: float, y1: float, x2: float, y2: float) -> Line:
        self._check_finite("line", x1=x1, y1=y1, x2=x2, y2=y2)
        segment = Line.create(x1, y1, x2, y2, self.config.double_precision)
        if segment.is_degenerate():
            self.logger.debug(
                event=LogEvent.SHAPE_DEGENERATE,
                message="Zero-length line",
                metadata={'x': x1, 'y': y1}
            )
        self._created(segment)
        return segment
