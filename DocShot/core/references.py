# Image reference builder
#
# Turns a directory of rendered pages into "@path/page_001.png @path/..." for
# the chat CLI.

import os
from typing import List

from .constants import IMAGE_EXTENSION, REFERENCE_MARKER
from .errors import DirectoryNotFound, NoImagesFound, NotADirectory


def find_images(directory: str) -> List[str]:
    """
    Find PNG files directly inside directory.

    Args:
        directory: Image directory

    Returns:
        Absolute paths sorted by filename
    """
    image_dir = os.path.abspath(directory)

    if not os.path.exists(image_dir):
        raise DirectoryNotFound(f"Directory not found: {image_dir}")
    if not os.path.isdir(image_dir):
        raise NotADirectory(f"Path is not a directory: {image_dir}")

    names = sorted(
        name for name in os.listdir(image_dir)
        if name.lower().endswith(IMAGE_EXTENSION)
        and os.path.isfile(os.path.join(image_dir, name))
    )
    if not names:
        raise NoImagesFound(f"No PNG files found in directory: {image_dir}")

    return [os.path.join(image_dir, name) for name in names]


def to_reference(path: str, cwd: str = None) -> str:
    return REFERENCE_MARKER + os.path.relpath(path, cwd or os.getcwd())


def build_reference_string(directory: str, cwd: str = None) -> str:
    """Space-joined '@'-prefixed paths of every image in directory, relative to cwd."""
    cwd = cwd or os.getcwd()
    return " ".join(to_reference(path, cwd) for path in find_images(directory))
