#!/usr/bin/env python3
"""
docload - start Claude Code with rendered documentation images attached

Usage:
    docload                         # images from ./docshot
    docload --images docs-images    # images from another directory
    docload -i docs-images --print "How do I authenticate?"

Every argument except --images/-i DIR is passed through to the chat CLI,
followed by --append-system-prompt "@docshot/page_001.png @docshot/page_002.png ...".
With --help/-h the arguments go to the chat CLI untouched.
"""

import subprocess
import sys
from typing import List, Sequence, Tuple

from . import config
from .core import (
    DocShotError,
    ExternalProcessError,
    InvalidConfiguration,
    NoImagesFound,
    build_reference_string,
)


def split_images_flag(args: Sequence[str], default_dir: str = None) -> Tuple[str, List[str]]:
    """
    Pull --images/-i DIR out of the argument list.

    Returns:
        (images_dir, remaining_args)
    """
    for index, arg in enumerate(args):
        if arg in config.IMAGES_FLAGS:
            if index + 1 >= len(args):
                raise InvalidConfiguration("--images flag requires a directory path")
            return args[index + 1], list(args[:index]) + list(args[index + 2:])
    return default_dir or config.OUTPUT_DIR, list(args)


def build_chat_args(args: Sequence[str], cwd: str = None) -> List[str]:
    """Arguments for the chat CLI with the image references appended."""
    if any(arg in config.HELP_FLAGS for arg in args):
        return list(args)

    images_dir, chat_args = split_images_flag(args)
    references = build_reference_string(images_dir, cwd=cwd)
    return chat_args + [config.APPEND_PROMPT_FLAG, references]


def run_chat(args: Sequence[str], executable: str = None) -> int:
    """
    Run the chat CLI with inherited stdin/stdout/stderr and wait for it.

    Returns:
        The process exit code (128 + N when killed by signal N)
    """
    executable = executable or config.CHAT_BIN
    try:
        completed = subprocess.run([executable, *args])
    except OSError as e:
        raise ExternalProcessError(f"Error spawning {executable} command: {e}") from e

    if completed.returncode < 0:
        return 128 - completed.returncode
    return completed.returncode


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        return run_chat(build_chat_args(args))
    except NoImagesFound as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        print("   Make sure you've run 'docshot convert' first to generate images.", file=sys.stderr)
        return e.exit_code
    except ExternalProcessError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        print(f"   Make sure '{config.CHAT_BIN}' CLI is installed and available in PATH.", file=sys.stderr)
        return e.exit_code
    except DocShotError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
