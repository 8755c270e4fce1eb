"""
Configuration & Global Constants
================================
This module serves as the central registry for numeric tolerances and the
defaults shared by the parser and the compiler.

Why is this file needed?
------------------------
1. Consistency: the same degeneracy threshold is used when normalising axes,
   inverting transforms and building planes.
2. Discoverability: defaults such as the primary axis or the type-name
   suffixes live in one place instead of being repeated as literals.

Exports:
    LOGGER_NAME (str): Name of the package logger.
    GEOMETRY_EPS (float): Vectors shorter than this are treated as zero.
    CONTAINMENT_TOL (float): Slack allowed by point-in-shape tests.
    DEFAULT_AXIS (tuple): Primary axis used when nothing else sets one.
    AXIS_SUFFIXES (dict): Type-name suffix -> world unit vector.
"""
from typing import Dict, Tuple

LOGGER_NAME: str = "forbildshapes"

GEOMETRY_EPS: float = 1e-12
CONTAINMENT_TOL: float = 1e-9

DEFAULT_AXIS: Tuple[float, float, float] = (0.0, 0.0, 1.0)

AXIS_SUFFIXES: Dict[str, Tuple[float, float, float]] = {
    "_x": (1.0, 0.0, 0.0),
    "_y": (0.0, 1.0, 0.0),
    "_z": (0.0, 0.0, 1.0),
}

# Lower-cased type-name prefix that marks the elliptic member of the family.
ELLIPTIC_PREFIX: str = "ellipt"
