import logging
import sys


def setup_logging(level="WARNING"):
    """
    Configure the root logger once, writing to stderr.

    Unknown level names fall back to WARNING. Calling it again only
    changes the level.
    """
    root = logging.getLogger()
    lvl = getattr(logging, str(level).upper(), None)
    if not isinstance(lvl, int):
        lvl = logging.WARNING

    if not getattr(root, "_fovgen_configured", False):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
        root._fovgen_configured = True

    root.setLevel(lvl)
