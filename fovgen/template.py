"""
template.py
Footprint template loading and placeholder substitution.

The template is a VOTable document understood by Aladin. It carries literal
placeholders of the form ``{TokenName}``:

    {ID}                      footprint identifier (the output filename)
    {TelescopeName}           optic name
    {InstrumentName}          camera name
    {HalfFieldWidthArcsec}    half field along the sensor width
    {HalfFieldHeightArcsec}   half field along the sensor height
"""
import re
from typing import NamedTuple

from fovgen.errors import ParseError, ResourceNotFoundError


def load_template(path):
    """
    Read the footprint template as UTF-8 text.

    Raises:
        ResourceNotFoundError: the template file does not exist.
        ParseError: the template is not valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ResourceNotFoundError(f"Template not found: {path}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: not valid UTF-8: {e}") from e


class FootprintFields(NamedTuple):
    id: str
    telescope_name: str
    instrument_name: str
    half_width_arcsec: float
    half_height_arcsec: float

    def pairs(self):
        """Ordered (token, value) pairs fed to `render`."""
        return [
            ("{ID}", self.id),
            ("{TelescopeName}", self.telescope_name),
            ("{InstrumentName}", self.instrument_name),
            ("{HalfFieldWidthArcsec}", str(self.half_width_arcsec)),
            ("{HalfFieldHeightArcsec}", str(self.half_height_arcsec)),
        ]


def render(template, pairs):
    """
    Replace every occurrence of each token by its value.

    All tokens are substituted in one scan of the template, so a value that
    happens to contain another token's text is copied through unchanged.
    Tokens missing from `pairs` stay in the output as they are.

    Args:
        template (str): Template text.
        pairs (list[tuple[str, str]]): (token, value) pairs, e.g. from
            `FootprintFields.pairs()`. For a repeated token the first pair wins.

    Returns:
        str: Rendered text.
    """
    values = {}
    for token, value in pairs:
        values.setdefault(token, value)
    if not values:
        return template

    pattern = re.compile("|".join(re.escape(token) for token in values))
    return pattern.sub(lambda m: values[m.group(0)], template)
