"""Code block model used while rendering a fenced code block."""

from dataclasses import dataclass
from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides alphanumerics and "_.-~"
URI_COMPONENT_SAFE = "!'()*"


@dataclass(frozen=True)
class CodeFragment:
    """A fenced code block about to be wrapped in the code-block container."""

    language: str  # Normalized language tag
    filename: str  # Shown in the block header
    raw_code: str  # Exactly as fenced in the source

    @property
    def encoded_code(self) -> str:
        """URL-encoded source for the data-code attribute."""
        return quote(self.raw_code, safe=URI_COMPONENT_SAFE)
