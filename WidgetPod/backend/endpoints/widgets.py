import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from models import WidgetPayload
from store import WidgetValidationError

widgets_router = APIRouter(prefix="/api")

logger = logging.getLogger("uvicorn.error")


#---------------------------------GET---------------------------------
@widgets_router.get("/widgets")
async def list_widgets(request: Request):
    store = request.app.state.store
    return [w.model_dump() for w in store.list_widgets()]


#---------------------------------POST---------------------------------
@widgets_router.post("/widgets")
async def save_widget(data: WidgetPayload, request: Request):
    store = request.app.state.store
    try:
        store.upsert(data.id, data.text)
    except WidgetValidationError as e:
        logger.info("Rejected widget write: %s", e)
        return JSONResponse(status_code=400, content={"error": str(e)})

    logger.info("Saved widget id=%s (%d stored)", data.id, len(store))
    return {"success": True}


#---------------------------------DELETE---------------------------------
# :path so ids containing "/" still reach the handler
@widgets_router.delete("/widgets/{widget_id:path}")
async def delete_widget(widget_id: str, request: Request):
    store = request.app.state.store
    if widget_id not in store:
        logger.info("Delete of unknown widget id=%s ignored", widget_id)
    store.delete(widget_id)
    return {"success": True}
