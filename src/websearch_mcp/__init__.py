from .service import ToolResponse, WebSearchService, TOOL_SPECS
from .settings import Settings, get_settings

__version__ = "1.0.0"

__all__ = ["ToolResponse", "WebSearchService", "TOOL_SPECS", "Settings", "get_settings", "__version__"]
