from models import Widget


class WidgetValidationError(ValueError):
    pass


class WidgetStore:
    # one record per id, lives on app.state and dies with the process
    def __init__(self):
        self._widgets = {}

    def __len__(self):
        return len(self._widgets)

    def __contains__(self, widget_id):
        return widget_id in self._widgets

    def list_widgets(self):
        return list(self._widgets.values())

    def upsert(self, widget_id, text=None):
        if not widget_id:
            raise WidgetValidationError("ID is required")

        widget = Widget(id=widget_id, text=text or "")
        self._widgets[widget_id] = widget
        return widget

    def delete(self, widget_id):
        self._widgets.pop(widget_id, None)
