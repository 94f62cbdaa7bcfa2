# fovgen/optics.py
"""
Field-of-view arithmetic for a camera behind a telescope.

The footprint files use the classic small-angle approximation

    field [arcsec] = photosite size [um] * photosite count * 206 / focal length [mm]

where 206 stands for 206265 arcsec per radian scaled by the um -> mm factor 1000.
The product is evaluated in single precision and halved with integer division
to reproduce the values of the footprints already published with the first
release of the tool.
"""
import math

import numpy as np
import astropy.units as u

from fovgen.equipment import FovResult
from fovgen.errors import InvalidInputError

ARCSEC_PER_RADIAN_UM_PER_MM = 206


def _check_positive(name, value):
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")


# ---------------------------------------------------------
# Full field along one sensor axis, whole arcseconds
# ---------------------------------------------------------
def field_arcsec(photosite_size_um, photosite_count, focal_length_mm):
    _check_positive("photosite size", photosite_size_um)
    _check_positive("photosite count", photosite_count)
    _check_positive("focal length", focal_length_mm)

    raw = (np.float32(photosite_size_um) * np.float32(photosite_count)
           * np.float32(ARCSEC_PER_RADIAN_UM_PER_MM) / np.float32(focal_length_mm))
    # half up, as the published footprints were rounded
    return int(math.floor(float(raw) + 0.5))


# ---------------------------------------------------------
# Half field, integer halving (odd fields drop the half)
# ---------------------------------------------------------
def half_field_arcsec(field):
    return float(np.rint(field // 2))


def compute_fov(camera, optic):
    """Return the FovResult (half width, half height) of a camera/optic pairing."""
    width = field_arcsec(camera.photosite_size_um, camera.width_px, optic.focal_length_mm)
    height = field_arcsec(camera.photosite_size_um, camera.height_px, optic.focal_length_mm)
    return FovResult(
        half_width_arcsec=half_field_arcsec(width),
        half_height_arcsec=half_field_arcsec(height),
    )


# ---------------------------------------------------------
# Exact half field (for comparison only, never written to .vot)
# ---------------------------------------------------------
def exact_half_field_arcsec(photosite_size_um, photosite_count, focal_length_mm):
    """
    Half field computed with the arctangent instead of the small-angle
    approximation, in arcseconds.
    """
    _check_positive("photosite size", photosite_size_um)
    _check_positive("photosite count", photosite_count)
    _check_positive("focal length", focal_length_mm)

    sensor_mm = photosite_size_um * photosite_count / 1000.0
    half_angle = math.atan(sensor_mm / (2.0 * focal_length_mm)) * u.rad
    return float(half_angle.to_value(u.arcsec))
