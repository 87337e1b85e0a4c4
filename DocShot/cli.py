#!/usr/bin/env python3
"""
DocShot CLI - convert documentation into terminal-style images

Usage:
    # Convert a file into docshot/page_001.png, page_002.png, ...
    docshot convert docs/api.md --density medium

    # Convert every markdown file under docs/ (one sub-directory per file)
    docshot convert docs/ -o docshot

    # Print loading instructions / image references
    docshot load docshot
    docshot refs docshot
"""

import argparse
import logging
import os
import sys

from tqdm import tqdm

from . import __version__, config
from .api import DEFAULT_PATTERN, convert_files, document_char_count
from .core import (
    DEFAULT_DENSITY,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_TITLE,
    DENSITY_PRESETS,
    RECOMMENDED_DENSITY,
    THEMES,
    DocShotError,
    NoImagesFound,
    build_reference_string,
    find_images,
    get_theme,
    page_count,
    resolve_render_config,
)

RULE_WIDTH = 70


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"❌ Error: {message}\n")


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: '{value}'")
    return number


def _print_error(message: str):
    print(f"❌ Error: {message}", file=sys.stderr)


class _PageProgress:
    """tqdm progress bar driven by convert_document's progress callback."""

    def __init__(self, disable: bool = False):
        self.disable = disable
        self.bar = None

    def __call__(self, page_number: int, total_pages: int, path: str):
        if self.bar is None:
            self.bar = tqdm(
                total=total_pages,
                desc="   Progress",
                unit="page",
                file=sys.stdout,
                disable=self.disable,
            )
        self.bar.update(1)
        if page_number == total_pages:
            self.close()

    def close(self):
        if self.bar is not None:
            self.bar.close()
            self.bar = None


def cmd_convert(args) -> int:
    """Convert documentation files into images."""
    render_config = resolve_render_config(
        args.density, lines=args.lines, font_size=args.font_size, width=args.width
    )
    theme = get_theme(args.theme)
    density = args.density.lower()
    output_root = os.path.abspath(args.output)
    show_progress = not (args.no_progress or config.NO_PROGRESS)

    print("⚙️  Configuration:")
    print(f"   Density: {density}{' ⭐ (recommended)' if density == RECOMMENDED_DENSITY else ''}")
    print(f"   Lines per image: {render_config.lines_per_page}")
    print(f"   Font size: {render_config.font_size}pt")
    print(f"   Image width: {render_config.image_width}px")
    print(f"   Output directory: {output_root}")
    print()

    progress_bars = []

    def on_file_start(path, lines, output_dir):
        print(f"📖 Reading documentation from: {path}")
        print(f"   Lines: {len(lines)}")
        print(f"   Characters: {document_char_count(lines)}")
        print("🖼️  Generating images...")
        print(f"   Total pages: {page_count(len(lines), render_config.lines_per_page)}")
        print(f"   Image dimensions: {render_config.image_width}x{render_config.image_height}px")
        print(f"   Output: {output_dir}")

    def progress_factory(path):
        bar = _PageProgress(disable=not show_progress)
        progress_bars.append(bar)
        return bar

    try:
        batch = convert_files(
            args.inputs,
            output_root,
            render_config,
            pattern=args.pattern,
            continue_on_error=args.continue_on_error,
            on_file_start=on_file_start,
            progress_factory=progress_factory,
            theme=theme,
            title=args.title,
            font_path=args.font_path,
        )
    finally:
        for bar in progress_bars:
            bar.close()

    for result in batch.results:
        print(f"   Generated {result.total_pages} images in {result.output_dir}")
    print()

    for path, error in batch.failures:
        _print_error(f"{path}: {error}")
    if not batch.ok:
        print(f"⚠️  Converted {len(batch.results)} file(s), {len(batch.failures)} failed")
        return 1

    print("✅ Success!")
    print()
    _print_savings(density)

    print("📥 Next: Load into Claude Code")
    print(f"   docload --images {args.output}")
    print()
    print("💡 Or use with Claude CLI:")
    print(f"   claude --print \"Your prompt here: $(docshot refs {args.output})\"")
    print()
    return 0


def _print_savings(density):
    # Figures measured per preset; custom densities have none
    preset = DENSITY_PRESETS.get(density)
    if preset is None:
        return
    star = " ⭐" if density == RECOMMENDED_DENSITY else ""
    print("📊 Token Savings (based on experiment results):")
    print(f"   Expected: ~{preset.expected_reduction:.1%} token reduction{star}")
    print(f"   Accuracy: ~{preset.expected_accuracy:.0%} (vs 100% baseline){star}")
    if density == RECOMMENDED_DENSITY:
        print("   📌 Best balance of efficiency and accuracy!")
    print()


def cmd_load(args) -> int:
    """Print instructions for loading images into Claude Code."""
    image_dir = os.path.abspath(args.dir)
    try:
        num_images = len(find_images(image_dir))
    except NoImagesFound:
        num_images = 0

    rule = "═" * RULE_WIDTH
    thin_rule = "─" * RULE_WIDTH
    print()
    print(rule)
    print("  LOADING IMAGES INTO CLAUDE CODE")
    print(rule)
    print()
    print("📁 Image Directory:")
    print(f"   {image_dir} ({num_images} images)")
    if num_images == 0:
        print("   ⚠️  No PNG files yet, run 'docshot convert' first.")
    print()
    print("💬 Copy and paste this into Claude Code:")
    print()
    print(thin_rule)
    print()
    print(f"Review all images in {image_dir}")
    print()
    print(thin_rule)
    print()
    print("💡 Or be more specific:")
    print()
    print(f"\"Based on the API documentation in {image_dir}, help me implement authentication\"")
    print()
    print(f"\"Explain the rate limiting strategy shown in {image_dir}\"")
    print()
    print(f"\"Using the examples in {image_dir}, write code to handle webhooks\"")
    print()
    print(rule)
    print()
    print("🚀 Or start a session with the images attached:")
    print(f"   docload --images {args.dir}")
    print()
    return 0


def cmd_refs(args) -> int:
    """Print '@'-prefixed image references for the chat CLI."""
    print(build_reference_string(args.dir))
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="docshot",
        description="Convert documentation into terminal-style images for efficient Claude context usage",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # convert
    p = sub.add_parser("convert", help="Convert documentation files into images")
    p.add_argument("inputs", nargs="+", metavar="file", help="File, directory or glob pattern")
    p.add_argument("--output", "-o", default=config.OUTPUT_DIR,
                   help=f"Output directory for images (default: {config.OUTPUT_DIR})")
    p.add_argument("--density", "-d", default=DEFAULT_DENSITY,
                   help=f"Image density: high, medium, or low (default: {DEFAULT_DENSITY})")
    p.add_argument("--lines", type=positive_int, help="Lines per image (overrides density preset)")
    p.add_argument("--font-size", type=positive_int, help="Font size in points (overrides density preset)")
    p.add_argument("--width", type=positive_int, default=DEFAULT_IMAGE_WIDTH,
                   help=f"Image width in pixels (default: {DEFAULT_IMAGE_WIDTH})")
    p.add_argument("--title", default=DEFAULT_TITLE, help="Header title on every page")
    p.add_argument("--theme", default="dark", choices=sorted(THEMES))
    p.add_argument("--font-path", type=str, default=None, help="Specify font file path")
    p.add_argument("--pattern", default=DEFAULT_PATTERN,
                   help=f"Glob used inside directory inputs (default: {DEFAULT_PATTERN})")
    p.add_argument("--continue-on-error", action="store_true",
                   help="Keep converting remaining files after a failure")
    p.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    p.set_defaults(func=cmd_convert)

    # load
    p = sub.add_parser("load", help="Get instructions for loading images into Claude Code")
    p.add_argument("dir", nargs="?", default=config.OUTPUT_DIR, help="Directory containing the images")
    p.set_defaults(func=cmd_load)

    # refs
    p = sub.add_parser("refs", help="Print @-prefixed image references")
    p.add_argument("dir", nargs="?", default=config.OUTPUT_DIR, help="Directory containing the images")
    p.set_defaults(func=cmd_refs)

    return parser


def main(argv=None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except DocShotError as e:
        _print_error(str(e))
        return e.exit_code
    except OSError as e:
        _print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
