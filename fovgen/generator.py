# fovgen/generator.py
import logging
from pathlib import Path

import pandas as pd

from fovgen.catalog import load_cameras, load_optics
from fovgen.equipment import RenderedFile
from fovgen.naming import VOT_EXTENSION, compose_filename
from fovgen.optics import compute_fov, exact_half_field_arcsec
from fovgen.template import FootprintFields, load_template, render
from fovgen.writer import write_vot_file

logger = logging.getLogger(__name__)


class FovGenerator:
    """
    Generate Aladin footprint (.vot) files for every camera/optic pairing.

    A .vot file describes the field of view of a camera behind a telescope;
    loaded in Aladin it shows that field on the sky map. With several
    cameras and telescopes the generator writes the whole cartesian product.
    """

    def __init__(self, cameras, optics, template, output_dir=".", first_pair_only=False):
        self.cameras = list(cameras)
        self.optics = list(optics)
        self.template = template
        self.output_dir = Path(output_dir)
        # reproduces the original tool, which stopped after one file
        self.first_pair_only = first_pair_only

    @classmethod
    def from_config(cls, config):
        """Load the template and both catalogs once, as named in `config`."""
        resources = config['resources']
        output = config['output']

        logger.debug("Template: %s", resources['template'])
        template = load_template(resources['template'])
        cameras = load_cameras(resources['cameras'])
        optics = load_optics(resources['optics'])

        return cls(
            cameras,
            optics,
            template,
            output_dir=output.get('directory', '.'),
            first_pair_only=bool(output.get('first_pair_only', False)),
        )

    def pairings(self):
        """Yield (camera, optic) pairs, camera-major."""
        for camera in self.cameras:
            for optic in self.optics:
                yield camera, optic
                if self.first_pair_only:
                    return

    def render_pair(self, camera, optic):
        fov = compute_fov(camera, optic)
        logger.debug(
            "%s + %s: half field %s x %s arcsec",
            camera.name, optic.name, fov.half_width_arcsec, fov.half_height_arcsec,
        )

        name = compose_filename(camera.name, optic.name, optic.corrector_name)
        fields = FootprintFields(
            id=name,
            telescope_name=optic.name,
            instrument_name=camera.name,
            half_width_arcsec=fov.half_width_arcsec,
            half_height_arcsec=fov.half_height_arcsec,
        )
        return RenderedFile(filename=name + VOT_EXTENSION, content=render(self.template, fields.pairs()))

    def run(self, report=print):
        """
        Write one .vot file per pairing.

        Stops at the first error; files written before it are left in place.

        Args:
            report (callable): Receives one progress line per written file.

        Returns:
            list[pathlib.Path]: Written files, in pairing order.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for camera, optic in self.pairings():
            rendered = self.render_pair(camera, optic)
            written.append(write_vot_file(rendered.filename, rendered.content, self.output_dir))
            report(f"Writing file '{rendered.filename}'")

        logger.info("%d footprint files written to %s", len(written), self.output_dir)
        return written

    def footprint_table(self):
        """
        Return a DataFrame with one row per pairing, nothing written.

        Columns: camera, optic, corrector, filename, focal_length_mm,
        half_width_arcsec, half_height_arcsec, exact_half_width_arcsec,
        exact_half_height_arcsec
        """
        rows = []
        for camera, optic in self.pairings():
            fov = compute_fov(camera, optic)
            name = compose_filename(camera.name, optic.name, optic.corrector_name)
            rows.append({
                "camera": camera.name,
                "optic": optic.name,
                "corrector": optic.corrector_name,
                "filename": name + VOT_EXTENSION,
                "focal_length_mm": optic.focal_length_mm,
                "half_width_arcsec": fov.half_width_arcsec,
                "half_height_arcsec": fov.half_height_arcsec,
                "exact_half_width_arcsec": exact_half_field_arcsec(
                    camera.photosite_size_um, camera.width_px, optic.focal_length_mm),
                "exact_half_height_arcsec": exact_half_field_arcsec(
                    camera.photosite_size_um, camera.height_px, optic.focal_length_mm),
            })

        columns = [
            "camera", "optic", "corrector", "filename", "focal_length_mm",
            "half_width_arcsec", "half_height_arcsec",
            "exact_half_width_arcsec", "exact_half_height_arcsec",
        ]
        return pd.DataFrame(rows, columns=columns)
