# DocShot High-level API

import glob
import os
import tempfile
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from . import config as env_config
from .core import (
    DARK_THEME,
    DEFAULT_TITLE,
    DocShotError,
    InputDecodeError,
    InputNotFound,
    NoContentFound,
    RenderConfig,
    RenderedImage,
    Theme,
    render_pages,
    split_lines,
)

DEFAULT_PATTERN = "**/*.md"

# progress(page_number, total_pages, written_path)
ProgressCallback = Callable[[int, int, str], None]


@dataclass
class ConversionResult:
    source: Optional[str]
    output_dir: str
    image_paths: List[str]
    total_pages: int
    line_count: int
    char_count: int


@dataclass
class BatchResult:
    results: List[ConversionResult] = field(default_factory=list)
    failures: List[Tuple[str, DocShotError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def total_pages(self) -> int:
        return sum(r.total_pages for r in self.results)


def load_document(path: str) -> Tuple[List[str], str]:
    """
    Read a UTF-8 text file.

    Returns:
        (lines, raw content)
    """
    file_path = os.path.abspath(path)
    if not os.path.isfile(file_path):
        raise InputNotFound(f"File not found: {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise InputDecodeError(f"File is not valid UTF-8: {file_path} ({e.reason})") from e
    return split_lines(content), content


def document_char_count(lines: Sequence[str]) -> int:
    """Length of the original text, line feeds included."""
    return sum(len(line) for line in lines) + max(0, len(lines) - 1)


def _current_umask() -> int:
    # os.umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_image(image: RenderedImage, output_dir: str) -> str:
    """
    Write a rendered page into output_dir.

    The bytes go to a temporary file in the same directory which is then
    renamed over the target, so a failed write never leaves a partial page.
    The page gets the same permissions a plain open(..., "wb") would give it.
    """
    target = os.path.join(output_dir, image.filename)
    fd, tmp_path = tempfile.mkstemp(prefix=".tmp_", suffix=".part", dir=output_dir)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(image.data)
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, target)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    return target


def convert_document(
    lines: Sequence[str],
    output_dir: str,
    config: RenderConfig,
    theme: Theme = DARK_THEME,
    title: str = DEFAULT_TITLE,
    font_path: str = None,
    progress: Optional[ProgressCallback] = None,
    source: str = None,
) -> ConversionResult:
    """
    Render document lines to page_NNN.png files.

    Each page is written as soon as it is rendered.

    Args:
        lines: Document lines
        output_dir: Output directory (created if missing)
        config: Page geometry
        theme: Colors
        title: Header title
        font_path: Font file path (default: DOCSHOT_FONT_PATH)
        progress: Called after every written page
        source: Source file path, recorded in the result

    Returns:
        ConversionResult
    """
    if not lines:
        raise NoContentFound("Document has no lines")

    output_dir = os.path.abspath(output_dir)
    os.makedirs(output_dir, exist_ok=True)

    image_paths = []
    total_pages = 0
    font_path = font_path or env_config.FONT_PATH
    for image in render_pages(lines, config, theme=theme, title=title, font_path=font_path):
        path = write_image(image, output_dir)
        image_paths.append(path)
        total_pages = image.total_pages
        if progress is not None:
            progress(image.page_number, image.total_pages, path)

    return ConversionResult(
        source=source,
        output_dir=output_dir,
        image_paths=image_paths,
        total_pages=total_pages,
        line_count=len(lines),
        char_count=document_char_count(lines),
    )


def convert_file(path: str, output_dir: str, config: RenderConfig, **kwargs) -> ConversionResult:
    """Load a file and convert it (see convert_document)."""
    lines, _ = load_document(path)
    return convert_document(lines, output_dir, config, source=os.path.abspath(path), **kwargs)


def expand_inputs(inputs: Iterable[str], pattern: str = DEFAULT_PATTERN) -> List[str]:
    """
    Expand files, directories and glob patterns into a sorted file list.

    Directories are searched with pattern (recursive '**' supported).

    Returns:
        Absolute file paths, de-duplicated and sorted
    """
    files = set()
    for item in inputs:
        if glob.has_magic(item):
            matches = glob.glob(item, recursive=True)
        elif os.path.isdir(item):
            matches = glob.glob(os.path.join(item, pattern), recursive=True)
        elif os.path.exists(item):
            matches = [item]
        else:
            raise InputNotFound(f"File not found: {os.path.abspath(item)}")

        files.update(os.path.abspath(m) for m in matches if os.path.isfile(m))

    if not files:
        raise NoContentFound(f"No files matched: {' '.join(inputs)}")
    return sorted(files)


def is_batch(inputs: Sequence[str]) -> bool:
    """True unless the inputs name exactly one plain file."""
    if len(inputs) != 1:
        return True
    item = inputs[0]
    return glob.has_magic(item) or os.path.isdir(item)


def output_dir_for(path: str, base: str, output_root: str, batch: bool, keep_suffix: bool = False) -> str:
    """
    Output directory for one input file.

    A single file writes straight into output_root; in batch mode every file
    gets output_root/<path relative to base>, without its suffix unless
    keep_suffix is set.
    """
    if not batch:
        return os.path.abspath(output_root)
    rel = os.path.relpath(os.path.abspath(path), base)
    if not keep_suffix:
        rel = os.path.splitext(rel)[0]
    return os.path.abspath(os.path.join(output_root, rel))


def plan_output_dirs(files: Sequence[str], output_root: str, batch: bool) -> Dict[str, str]:
    """
    Map every input file to its own output directory.

    Files that would share a directory once the suffix is dropped
    (docs/a.md, docs/a.txt) keep their suffix (out/a.md, out/a.txt).
    """
    base = common_base(files)
    plain = {path: output_dir_for(path, base, output_root, batch) for path in files}
    if not batch:
        return plain

    counts = Counter(plain.values())
    return {
        path: output_dir_for(path, base, output_root, batch, keep_suffix=True) if counts[out] > 1 else out
        for path, out in plain.items()
    }


def common_base(files: Sequence[str]) -> str:
    return os.path.commonpath([os.path.dirname(f) for f in files])


def convert_files(
    inputs: Sequence[str],
    output_root: str,
    config: RenderConfig,
    pattern: str = DEFAULT_PATTERN,
    continue_on_error: bool = False,
    on_file_start: Optional[Callable[[str, List[str], str], None]] = None,
    progress_factory: Optional[Callable[[str], Optional[ProgressCallback]]] = None,
    **kwargs,
) -> BatchResult:
    """
    Convert one or more inputs (files, directories, glob patterns).

    Stops at the first failing file unless continue_on_error is set, in which
    case failures are collected in the result.

    Args:
        inputs: Files, directories or glob patterns
        output_root: Output directory
        config: Page geometry
        pattern: Glob used inside directories
        continue_on_error: Keep converting after a failed file
        on_file_start: Called with (source, lines, output_dir) once a file is loaded
        progress_factory: Returns the progress callback for a source file
        **kwargs: Passed to convert_document (theme, title, font_path)

    Returns:
        BatchResult
    """
    files = expand_inputs(inputs, pattern)
    output_dirs = plan_output_dirs(files, output_root, is_batch(inputs))

    result = BatchResult()
    for path in files:
        output_dir = output_dirs[path]
        try:
            lines, _ = load_document(path)
            if on_file_start is not None:
                on_file_start(path, lines, output_dir)
            progress = progress_factory(path) if progress_factory is not None else None
            result.results.append(
                convert_document(lines, output_dir, config, progress=progress, source=path, **kwargs)
            )
        except DocShotError as e:
            if not continue_on_error:
                raise
            result.failures.append((path, e))
    return result
