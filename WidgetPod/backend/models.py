from typing import Optional

from pydantic import BaseModel


class Widget(BaseModel):
    id: str
    text: str = ""


# POST body; id is checked by the store so a missing id gets our own 400
class WidgetPayload(BaseModel):
    id: Optional[str] = None
    text: Optional[str] = None
