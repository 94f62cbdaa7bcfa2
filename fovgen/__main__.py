"""
Entry point: ``python -m fovgen``.

Reads the optional ``config/config.toml``, then writes one footprint file
per camera/optic pairing. There are no command-line options.
"""
import logging
import sys

from fovgen.config_loader import load_config
from fovgen.errors import FovGenError
from fovgen.generator import FovGenerator
from fovgen.logging_setup import setup_logging

logger = logging.getLogger("fovgen")


def main(config_path=None):
    setup_logging()
    try:
        config = load_config(config_path) if config_path else load_config()
        setup_logging(config['logging'].get('level', 'WARNING'))
        FovGenerator.from_config(config).run()
    except (FovGenError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
