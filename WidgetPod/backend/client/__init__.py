from .api import TransportError, WidgetsApi
from .editor import WidgetEditor
from .state import WidgetsState

__all__ = ["TransportError", "WidgetsApi", "WidgetEditor", "WidgetsState"]
