"""arscript: Arabic screenplay formatting.

Classifies raw Arabic script text into typed screenplay elements and renders
them as right-to-left HTML.
"""

from .config import ArScriptSettings, get_logger, get_settings
from .exceptions import ArScriptError
from .history import ScriptHistory
from .ingest import load_script_text
from .parser import ElementType, ScreenplayClassifier, ScreenplayElement, classify
from .render import extract_plain_text, render_document, render_elements
from .stats import ScriptStats, count_elements, count_text

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "ArScriptError",
    "ArScriptSettings",
    "ElementType",
    "ScreenplayClassifier",
    "ScreenplayElement",
    "ScriptHistory",
    "ScriptStats",
    "__version__",
    "classify",
    "count_elements",
    "count_text",
    "extract_plain_text",
    "get_logger",
    "get_settings",
    "load_script_text",
    "render_document",
    "render_elements",
]
