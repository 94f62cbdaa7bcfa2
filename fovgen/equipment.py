from dataclasses import dataclass


# ----------------------------
# CAMERA
# ----------------------------
@dataclass(frozen=True)
class Camera:
    name: str
    photosite_size_um: float
    width_px: int
    height_px: int


# ----------------------------
# TELESCOPE / OPTIC
# ----------------------------
@dataclass(frozen=True)
class Optic:
    name: str
    corrector_name: str
    focal_length_mm: int


# ----------------------------
# DERIVED
# ----------------------------
@dataclass(frozen=True)
class FovResult:
    half_width_arcsec: float
    half_height_arcsec: float


@dataclass(frozen=True)
class RenderedFile:
    filename: str
    content: str
