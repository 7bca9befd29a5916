"""Documentation links keyed by stable topic ids."""

from __future__ import annotations

BUILD_INIT_TOPIC = "build_init"
BUILD_SCRIPT_BASICS_TOPIC = "tutorial_build_script_basics"
HELP_TOPIC = "getting_help"


class DocumentationRegistry:
    """Resolve topic ids to user guide URLs for one documentation version."""

    def __init__(self, base_url: str, version: str = "latest") -> None:
        self.base_url = base_url.rstrip("/")
        self.version = version

    def url_for(self, topic_id: str) -> str:
        if not topic_id:
            raise ValueError("topic_id must not be empty")
        return f"{self.base_url}/{self.version}/userguide/{topic_id}.html"
