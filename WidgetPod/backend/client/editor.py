from typing import Optional

from models import Widget
from .state import WidgetsState


class WidgetEditor:
    """
    Draft text for one widget card.
      Bound(committed) --edit--> Dirty(draft) --blur--> Bound(draft)
    The draft follows the committed text whenever that changes underneath it
    (e.g. a revert), and typing never hits the network.
    """

    def __init__(self, state: WidgetsState, widget_id: str):
        self.state = state
        self.widget_id = widget_id
        self.text = ""
        self._committed: Optional[str] = None
        self.sync()
        self._unsubscribe = state.subscribe(lambda _state: self.sync())

    @property
    def widget(self) -> Optional[Widget]:
        return self.state.find(self.widget_id)

    @property
    def dirty(self) -> bool:
        widget = self.widget
        return widget is not None and self.text != widget.text

    def sync(self) -> None:
        widget = self.widget
        committed = widget.text if widget else None
        if committed != self._committed:
            self._committed = committed
            self.text = committed or ""

    def edit(self, text: str) -> None:
        self.text = text

    async def blur(self) -> bool:
        widget = self.widget
        if widget is None or self.text == widget.text:
            return False
        await self.state.update_widget(widget.model_copy(update={"text": self.text}))
        return True

    async def delete(self) -> None:
        await self.state.delete_widget(self.widget_id)

    def close(self) -> None:
        self._unsubscribe()
