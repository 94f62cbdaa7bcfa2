from pathlib import Path


def write_vot_file(filename, content, directory="."):
    """
    Write a .vot file, replacing any existing file of the same name.

    The file is always written as UTF-8. Errors from the file system are not
    caught: a failed write stops the whole run.

    Returns:
        pathlib.Path: Path of the written file.
    """
    path = Path(directory) / filename
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path
