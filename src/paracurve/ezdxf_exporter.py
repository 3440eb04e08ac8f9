"""
DXF export utilities for paracurve parametric functions.

Each 2D parametric function is sampled at equally spaced parameters over
its whole domain and written to DXF as an LWPOLYLINE using the ezdxf
library.

Copyright (c) 2024 paracurve contributors
All rights reserved (MIT License)
"""

import logging
from pathlib import Path
from typing import Sequence, Union

import ezdxf

from paracurve.core import ParametricFunction2D, as_function2d

logger = logging.getLogger(__name__)


def _new_document(layers):
    # setup=False avoids creating default blocks (like _CLOSEDFILLED) that
    # contain SOLID entities unsupported by some CAD programs (e.g., FreeCAD)
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1 # metric
    doc.header['$INSUNITS'] = 4 # millimeters
    for layer in layers:
        if not doc.layers.has_entry(layer):
            doc.layers.new(layer, dxfattribs={'color': 7}) #white
    return doc


def polyline_points(function: ParametricFunction2D, samples: int = 64):
    """Return ``samples + 1`` ``(x, y)`` tuples along ``function``."""

    return [(p.x, p.y) for p in as_function2d(function).linspace(samples)]


def write_dxf(functions: Union[ParametricFunction2D, Sequence[ParametricFunction2D]],
              output_path: Union[str, Path],
              samples: int = 64,
              layer: str = 'PATHS') -> Path:
    """Export sampled parametric functions to a DXF file.

    Args:
        functions: a 2D parametric function, or a list of them
        output_path: Path to output DXF file (``.dxf`` is appended if missing)
        samples: number of parameter intervals per function
        layer: DXF layer name (default 'PATHS')

    Returns:
        The path of the written file.

    A function whose first and last samples coincide is written as a
    closed polyline, unless ``samples`` is 1 and only the two end
    points would be left.
    """
    if not isinstance(functions, (list, tuple)):
        functions = [functions]

    path = Path(output_path)
    if path.suffix.lower() != '.dxf':
        path = path.with_name(path.name + '.dxf')

    doc = _new_document([layer])
    msp = doc.modelspace()
    for f in functions:
        f = as_function2d(f)
        pts = polyline_points(f, samples)
        # a closed polyline needs at least two distinct vertices
        closed = len(pts) > 2 and f.start_point().isclose(f.end_point())
        if closed:
            pts = pts[:-1]
        msp.add_lwpolyline(pts, close=closed, dxfattribs={'layer': layer})

    doc.saveas(path)
    logger.info('wrote %d sampled functions to %s', len(functions), path)
    return path


__all__ = [
    'polyline_points',
    'write_dxf',
]
