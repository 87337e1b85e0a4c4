# Error taxonomy
#
# Everything raised by DocShot derives from DocShotError so the CLI entry
# points can turn any failure into a one-line message and exit code 1.


class DocShotError(Exception):
    """Base class for all DocShot failures."""

    exit_code = 1


class InputNotFound(DocShotError):
    """Source file or directory does not exist."""


class DirectoryNotFound(InputNotFound):
    """Image directory does not exist."""


class NotADirectory(DocShotError):
    """Path exists but is not a directory."""


class NoContentFound(DocShotError):
    """No matching input files, no lines, or no images."""


class NoImagesFound(NoContentFound):
    """Image directory exists but holds no PNG files."""


class InvalidConfiguration(DocShotError):
    """Unknown density preset or out-of-range render setting."""


class ExternalProcessError(DocShotError):
    """The chat executable could not be started."""

    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode


class InputDecodeError(DocShotError):
    """Source file is not valid UTF-8 text."""
