"""Admin routes for rendering and saving metadata field queues."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from metabox.constants import DataType
from metabox.exceptions import UnknownQueueError
from metabox.schemas import FieldSummary, QueueSummary, SaveResponse
from metabox.services.meta_manager import MetaManager
from metabox.templating import render_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meta", tags=["Metadata"])


def get_meta_manager(request: Request) -> MetaManager:
    """Return the MetaManager built by the application factory."""
    return request.app.state.meta_manager


@router.get("/queues", response_model=list[QueueSummary])
def list_queues(manager: MetaManager = Depends(get_meta_manager)):
    queues = []
    for name in manager.registry.queue_names():
        fields = [
            FieldSummary(
                name=meta_field.name,
                input_kind=meta_field.input_kind,
                data_type=meta_field.data_type.value
                if isinstance(meta_field.data_type, DataType)
                else str(meta_field.data_type),
                storage_type=meta_field.storage_type.value,
                label=meta_field.label or None,
            )
            for meta_field in manager.registry.get_queue(name)
        ]
        queues.append(QueueSummary(name=name, fields=fields))
    return queues


@router.get("/items/{item_id}/queues/{queue_name}", response_class=HTMLResponse)
def render_queue_form(
    item_id: str,
    queue_name: str,
    request: Request,
    manager: MetaManager = Depends(get_meta_manager),
):
    if not manager.queue_exists(queue_name):
        raise UnknownQueueError(queue_name)

    result = manager.render_queue(item_id, queue_name)
    if result.skipped:
        logger.warning("Rendered queue %s for item %s without fields %s", queue_name, item_id, result.skipped)

    html = render_template(
        "fields/form.html",
        prefix=manager.renderer.css_prefix,
        action=request.url.path,
        queue=queue_name,
        fields=result.html,
    )
    return HTMLResponse(content=str(html))


@router.post("/items/{item_id}/queues/{queue_name}", response_model=SaveResponse)
async def save_queue_form(
    item_id: str,
    queue_name: str,
    request: Request,
    manager: MetaManager = Depends(get_meta_manager),
):
    form = await request.form()
    submission = {key: value for key, value in form.items() if isinstance(value, str)}

    result = await run_in_threadpool(manager.save_queue, item_id, queue_name, submission)
    if result.error is not None:
        raise result.error

    return SaveResponse(item_id=item_id, queue=queue_name, saved=result.saved, skipped=result.skipped)
