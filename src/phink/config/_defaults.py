"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be fed straight into deep_merge.
The merge functions create copies, so the original is never mutated.
"""

from typing import Any

DEFAULT_GIT_ENV: dict[str, str] = {
    # Never block on a credential prompt; fail the command instead
    "GIT_TERMINAL_PROMPT": "0",
}

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "git_executable": "git",
    "timeout_ms": None,
    "env": dict(DEFAULT_GIT_ENV),
    "identity": None,
    "options": {},
    "logging": {
        "level": None,
        "format": "json",
        "file": "",
    },
}
