"""Text records written and read by the excitation pipeline.

Spectrum and elevation records share one line format, ``<x> : <y>``, so an
elevation written by one run can be replayed by a later run. The free surface
mesh is written as a Wavefront OBJ file.
"""

import os
import re
from collections.abc import Iterable
from datetime import datetime

import numpy as np
from numpy.typing import NDArray

from .errors import ElevationParseError, WaveConfigurationError
from .types import Spectrum, SurfaceElevation

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_RECORD_LINE = re.compile(rf"^\s*({_NUMBER})\s*:\s*({_NUMBER})\s*$")


def parse_eta_lines(lines: Iterable[str]) -> SurfaceElevation:
    """Parse ``<time> : <elevation>`` lines into an elevation record.

    Args:
        lines: Record lines, with or without trailing newlines.

    Returns:
        Loaded SurfaceElevation.

    Raises:
        ElevationParseError: If any line does not match the record format.
    """
    times = []
    etas = []
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        match = _RECORD_LINE.match(line)
        if match is None:
            raise ElevationParseError(line_number, line)
        times.append(float(match.group(1)))
        etas.append(float(match.group(2)))

    return SurfaceElevation(time=np.array(times), eta=np.array(etas), synthesized=False)


def read_eta_file(path: str | os.PathLike, verbose: int = 1) -> SurfaceElevation:
    """Read an elevation record file.

    Args:
        path: Path of the record.
        verbose: Verbosity level (0=silent, 1=normal).

    Returns:
        Loaded SurfaceElevation.
    """
    if verbose >= 1:
        print(f"Reading eta file {path}.")

    try:
        with open(path) as f:
            surface = parse_eta_lines(f)
    except OSError as e:
        raise WaveConfigurationError(f"Unable to open file at: {path}.") from e

    if verbose >= 1:
        print("Finished reading eta file.")

    return surface


def _write_pairs(
    x: NDArray[np.floating],
    y: NDArray[np.floating],
    path: str | os.PathLike,
) -> None:
    with open(path, "w") as f:
        for xi, yi in zip(x, y):
            f.write(f"{float(xi)!r} : {float(yi)!r}\n")


def write_eta_file(surface: SurfaceElevation, path: str | os.PathLike) -> None:
    """Write an elevation record, one ``<time> : <elevation>`` line per sample."""
    _write_pairs(surface.time, surface.eta, path)


def write_spectrum_file(spectrum: Spectrum, path: str | os.PathLike) -> None:
    """Write a spectral density record, one ``<frequency> : <density>`` line per bin."""
    _write_pairs(spectrum.freqs, spectrum.S, path)


def write_free_surface_obj(
    points: NDArray[np.floating],
    triangles: NDArray[np.integer],
    path: str | os.PathLike,
) -> None:
    """Write a free surface mesh as a Wavefront OBJ file.

    Args:
        points: Vertex coordinates [n_points x 3].
        triangles: 0-based vertex indices [n_triangles x 3]. Written 1-based.
        path: Output file path.
    """
    created = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    with open(path, "w") as f:
        f.write("# Wavefront OBJ file exported by hydrowaves\n")
        f.write(f"# File Created: {created}\n\n")

        f.write(f"# Vertices: {len(points)}\n\n")
        for x, y, z in np.asarray(points, dtype=np.float64).tolist():
            f.write(f"v {x:14.6f} {y:14.6f} {z:14.6f}\n")
        f.write("\n")

        f.write(f"# Faces: {len(triangles)}\n\n")
        for a, b, c in np.asarray(triangles, dtype=np.int64).tolist():
            f.write(f"f {a + 1:9d}{b + 1:9d}{c + 1:9d}\n")
