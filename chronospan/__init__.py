from importlib.resources import files

from .arithmetic import add, subtract
from .duration import Duration
from .errors import InvalidDurationFormat
from .formatter import format_compact, format_human
from .normalizer import NormalizedParts, normalize
from .parser import parse
from .units import Unit

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Duration",
    "InvalidDurationFormat",
    "NormalizedParts",
    "Unit",
    "parse",
    "normalize",
    "format_compact",
    "format_human",
    "add",
    "subtract",
    "docs",
]
