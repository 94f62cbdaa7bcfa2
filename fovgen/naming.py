VOT_EXTENSION = ".vot"


def clean_string_for_filename(s):
    """Drop slashes and backslashes, turn spaces into hyphens."""
    return s.replace("/", "").replace("\\", "").replace(" ", "-")


def compose_filename(camera_name, optic_name, corrector_name):
    """
    Build the footprint identifier of a camera/optic pairing.

    Each name is cleaned on its own; the corrector part is left out when it
    is empty after cleaning. Other characters (colon, quotes, ...) are kept.

    Returns:
        str: ``camera-optic`` or ``camera-optic-corrector``, without extension.
    """
    camera = clean_string_for_filename(camera_name)
    optic = clean_string_for_filename(optic_name)
    corrector = clean_string_for_filename(corrector_name)

    filename = f"{camera}-{optic}"
    if corrector:
        filename += f"-{corrector}"
    return filename
