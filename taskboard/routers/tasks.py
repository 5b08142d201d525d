# taskboard/routers/tasks.py
"""
Tasks router: list, create, edit and delete Task rows.

Reads are public. Anything that shows a form or changes data goes through
ensure_authenticated first. Store failures never reach the client as a 500;
they are logged, flashed and answered with a redirect.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from taskboard.deps import ensure_authenticated
from taskboard.flash import flash
from taskboard.repository import TaskRepository, TaskStoreError, get_task_repository
from taskboard.schemas import checkbox_checked
from taskboard.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

LIST_URL = "/tasks"
CREATE_URL = "/tasks/create"


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


async def _task_fields(request: Request) -> Dict[str, Any]:
    form = await request.form()
    data = dict(form)
    data["completed"] = checkbox_checked(form.get("completed"))
    return data


@router.get("")
def list_tasks(request: Request, repo: TaskRepository = Depends(get_task_repository)):
    try:
        tasks = repo.list_recent()
    except TaskStoreError:
        logger.exception("Failed to load tasks")
        return render(request, "error.html", {"title": "Error", "message": "Failed to load tasks"})

    return render(request, "tasks/list.html", {"title": "My Tasks", "tasks": tasks})


@router.get("/create")
def create_form(request: Request):
    denied = ensure_authenticated(request)
    if denied:
        return denied

    return render(request, "tasks/form.html", {
        "title": "Create Task",
        "form_action": CREATE_URL,
        "submit_label": "Create",
        "task": {},
    })


@router.post("/create")
async def create_task(request: Request, repo: TaskRepository = Depends(get_task_repository)):
    denied = ensure_authenticated(request)
    if denied:
        return denied

    try:
        repo.create(await _task_fields(request))
    except TaskStoreError:
        logger.exception("Failed to create task")
        flash(request, "error", "Failed to create task")
        return _redirect(CREATE_URL)

    flash(request, "success", "Task created successfully!")
    return _redirect(LIST_URL)


@router.get("/edit/{task_id}")
def edit_form(task_id: str, request: Request, repo: TaskRepository = Depends(get_task_repository)):
    denied = ensure_authenticated(request)
    if denied:
        return denied

    try:
        task = repo.get(task_id)
    except TaskStoreError:
        logger.exception("Error loading task %s", task_id)
        flash(request, "error", "Error loading task")
        return _redirect(LIST_URL)

    if task is None:
        flash(request, "error", "Task not found")
        return _redirect(LIST_URL)

    return render(request, "tasks/form.html", {
        "title": "Edit Task",
        "form_action": f"/tasks/edit/{task.id}",
        "submit_label": "Update",
        "task": task,
    })


@router.post("/edit/{task_id}")
async def update_task(task_id: str, request: Request, repo: TaskRepository = Depends(get_task_repository)):
    denied = ensure_authenticated(request)
    if denied:
        return denied

    try:
        found = repo.update(task_id, await _task_fields(request))
    except TaskStoreError:
        logger.exception("Failed to update task %s", task_id)
        flash(request, "error", "Failed to update task")
        return _redirect(LIST_URL)

    if not found:
        flash(request, "error", "Task not found")
    else:
        flash(request, "success", "Task updated successfully")
    return _redirect(LIST_URL)


@router.post("/delete/{task_id}")
def delete_task(task_id: str, request: Request, repo: TaskRepository = Depends(get_task_repository)):
    denied = ensure_authenticated(request)
    if denied:
        return denied

    try:
        # unknown id still ends with the task absent, so report success
        repo.delete(task_id)
    except TaskStoreError:
        logger.exception("Failed to delete task %s", task_id)
        flash(request, "error", "Failed to delete task")
        return _redirect(LIST_URL)

    flash(request, "success", "Task deleted")
    return _redirect(LIST_URL)
