"""
catalog.py
Equipment catalog loading.

This module reads the two equipment catalogs bundled with the generator
and turns each row into an immutable record:

- cameras.csv: name, photosite size (um), width (photosites), height (photosites)
- optics.csv:  name, corrector/reducer name (may be blank), focal length (mm)

Both files are comma-separated with a header row. Columns are consumed by
position; the header names are only informative and extra columns are ignored.
"""
import csv
import logging
import math
import re

import pandas as pd

from fovgen.equipment import Camera, Optic
from fovgen.errors import ParseError, ResourceNotFoundError

logger = logging.getLogger(__name__)

CAMERA_COLUMNS = 4
OPTIC_COLUMNS = 3

# ASCII digits only, no underscores; surrounding whitespace is stripped first
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _field_counts(path):
    """Cell count of every non-blank row, header first, before any padding."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return [len(row) for row in csv.reader(f) if row]


def read_table(path: str) -> pd.DataFrame:
    """
    Read a header-first delimited file into a DataFrame of strings.

    Every row must have as many cells as the header. pandas pads short rows
    silently, so cells are counted on the raw rows first. Blank cells are
    kept as empty strings.

    Args:
        path (str): Path to the CSV file.

    Returns:
        pandas.DataFrame: One row per data record, columns named after the header.

    Raises:
        ResourceNotFoundError: the file does not exist.
        ParseError: the file is empty, not UTF-8, or a row has a different cell count.
    """
    try:
        counts = _field_counts(path)
        if not counts:
            raise ParseError(f"{path}: empty dataset")

        width = counts[0]
        for row, count in enumerate(counts[1:], start=1):
            if count != width:
                raise ParseError(f"{path}: row {row} has {count} fields, header has {width}")

        raw = pd.read_csv(path, header=None, dtype=str, keep_default_na=False, encoding="utf-8")
    except FileNotFoundError as e:
        raise ResourceNotFoundError(f"Dataset not found: {path}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: not valid UTF-8: {e}") from e
    except csv.Error as e:
        raise ParseError(f"{path}: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"{path}: empty dataset") from e
    except pd.errors.ParserError as e:
        raise ParseError(f"{path}: {e}") from e

    header = [str(v) for v in raw.iloc[0]]
    df = raw.iloc[1:].reset_index(drop=True)
    df.columns = header
    return df


def _require_columns(df, path, count):
    if df.shape[1] < count:
        raise ParseError(f"{path}: expected at least {count} columns, found {df.shape[1]}")


def _parse_float(value, path, row, column):
    if not FLOAT_PATTERN.fullmatch(value.strip()):
        raise ParseError(f"{path}: row {row}, column '{column}': not a decimal number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ParseError(f"{path}: row {row}, column '{column}': not a finite number: {value!r}")
    return number


def _parse_int(value, path, row, column):
    if not INT_PATTERN.fullmatch(value.strip()):
        raise ParseError(f"{path}: row {row}, column '{column}': not an integer: {value!r}")
    return int(value)


def load_cameras(path: str) -> list:
    """
    Load the camera catalog.

    Args:
        path (str): Path to cameras.csv.

    Returns:
        list[Camera]: Cameras in file order.
    """
    df = read_table(path)
    _require_columns(df, path, CAMERA_COLUMNS)
    columns = list(df.columns)

    cameras = []
    for i, values in enumerate(df.itertuples(index=False, name=None), start=1):
        cameras.append(Camera(
            name=values[0],
            photosite_size_um=_parse_float(values[1], path, i, columns[1]),
            width_px=_parse_int(values[2], path, i, columns[2]),
            height_px=_parse_int(values[3], path, i, columns[3]),
        ))

    logger.debug("Loaded %d cameras from %s", len(cameras), path)
    return cameras


def load_optics(path: str) -> list:
    """
    Load the optics catalog.

    Args:
        path (str): Path to optics.csv.

    Returns:
        list[Optic]: Optics in file order. A blank corrector is "".
    """
    df = read_table(path)
    _require_columns(df, path, OPTIC_COLUMNS)
    columns = list(df.columns)

    optics = []
    for i, values in enumerate(df.itertuples(index=False, name=None), start=1):
        optics.append(Optic(
            name=values[0],
            corrector_name=values[1],
            focal_length_mm=_parse_int(values[2], path, i, columns[2]),
        ))

    logger.debug("Loaded %d optics from %s", len(optics), path)
    return optics
