"""Numeric constants shared by the geometry and drawing helpers."""
import numpy as np

# Full-circle test tolerance: single-precision machine epsilon (~1.19e-7),
# wide enough to absorb angles that went through a trig round trip.
OPENING_TOLERANCE = float(np.finfo(np.float32).eps)

ARC_SEGMENTS = 36       # straight segments per sector arc
LABEL_PRECISION = 4     # decimals kept by to_string before trailing zeros are stripped
