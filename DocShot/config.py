import os

from .core.constants import DEFAULT_OUTPUT_DIR as _DEFAULT_OUTPUT_DIR


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


# ================= Rendering =================
# DOCSHOT_FONT_PATH: monospace font file used instead of the system font search
FONT_PATH = os.getenv("DOCSHOT_FONT_PATH", "").strip() or None
# Default output / image directory for convert, load, refs and docload
OUTPUT_DIR = os.getenv("DOCSHOT_OUTPUT_DIR", "").strip() or _DEFAULT_OUTPUT_DIR
# Hide the tqdm progress bar (e.g. in CI logs)
NO_PROGRESS = _env_bool("DOCSHOT_NO_PROGRESS", False)

# ================= Chat CLI =================
CHAT_BIN = os.getenv("DOCSHOT_CHAT_BIN", "claude").strip() or "claude"
APPEND_PROMPT_FLAG = "--append-system-prompt"
IMAGES_FLAGS = ("--images", "-i")
HELP_FLAGS = ("--help", "-h")
