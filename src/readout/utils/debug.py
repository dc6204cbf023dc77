"""Debug log for config resolution, written to .readout/debug.log."""

import json
import time
from pathlib import Path

MAGENTA = "\033[0;35m"
GRAY = "\033[90m"
NC = "\033[0m"

DEBUG_LOG = Path(".readout/debug.log")
RULE = "=" * 60


def _render(data) -> str:
    # JSON strings are re-indented, anything else non-JSON is kept verbatim
    if isinstance(data, str):
        try:
            return json.dumps(json.loads(data), indent=2)
        except json.JSONDecodeError:
            return data
    return json.dumps(data, indent=2, sort_keys=True, default=str)


def debug_log(enabled: bool, label: str, data) -> None:
    """Append a timestamped entry when debug is on, and point stdout at it."""
    if not enabled:
        return

    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    DEBUG_LOG.parent.mkdir(parents=True, exist_ok=True)
    with DEBUG_LOG.open("a") as f:
        f.write(f"\n{RULE}\n[{timestamp}] {label}\n{RULE}\n{_render(data)}\n")
    print(f"{MAGENTA}[debug]{NC} {label}  {GRAY}-> {DEBUG_LOG}{NC}")
