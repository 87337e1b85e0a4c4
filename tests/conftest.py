from pathlib import Path

import pytest


def make_content(num_lines: int) -> str:
    """Documentation-like text with exactly num_lines lines."""
    samples = [
        "# Authentication",
        "const client = createClient({ apiKey })",
        "Requests are rate limited per API key.",
        "// retry with exponential backoff",
        "",
        "    return response.json()",
    ]
    return "\n".join(f"{samples[i % len(samples)]} {i + 1}".rstrip() for i in range(num_lines))


@pytest.fixture
def make_doc(tmp_path: Path):
    def _make(num_lines: int, name: str = "doc.md", directory: Path = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(make_content(num_lines), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def png_dir(tmp_path: Path) -> Path:
    """Directory holding page_001.png and page_002.png (placeholder bytes)."""
    directory = tmp_path / "images"
    directory.mkdir()
    for name in ("page_002.png", "page_001.png"):
        (directory / name).write_bytes(b"\x89PNG\r\n\x1a\n")
    return directory
