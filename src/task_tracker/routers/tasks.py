from __future__ import annotations

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..queries import filter_by_tag, overdue, tag_summary
from ..repositories import Repository, get_repository
from ..schemas import TagCountOut, TaskCreate, TaskOut

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
)

NOT_FOUND = "Task not found"
TITLE_REQUIRED = "Title is required."


def _get_repo(repo: Repository = Depends(get_repository)) -> Repository:
    """
    Dependency wrapper for repository to keep signatures clean.
    """
    return repo


def _missing_title(payload: TaskCreate) -> Optional[JSONResponse]:
    if payload.title:
        return None
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": TITLE_REQUIRED})


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[TaskOut],
    summary="List Tasks",
    description=(
        "List every task ordered by id.\n\n"
        "Query parameters:\n"
        "- tag: only return tasks carrying this tag (case-insensitive, surrounding whitespace ignored)"
    ),
)
def list_tasks(
    tag: Optional[str] = Query(None, description="Filter by tag"),
    repo: Repository = Depends(_get_repo),
) -> List[TaskOut]:
    items = filter_by_tag(repo.list(), tag)
    return [TaskOut(**it) for it in items]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/overdue",
    response_model=List[TaskOut],
    summary="Overdue Tasks",
    description="Tasks whose due date has passed and whose status is not Done, earliest due first.",
)
def list_overdue(repo: Repository = Depends(_get_repo)) -> List[TaskOut]:
    return [TaskOut(**it) for it in overdue(repo.list())]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/tags",
    response_model=List[TagCountOut],
    summary="Tag Summary",
    description="Every tag in use with the number of tasks carrying it, sorted by tag name.",
)
def list_tag_summary(repo: Repository = Depends(_get_repo)) -> List[TagCountOut]:
    return [TagCountOut(tag=row.tag, count=row.count) for row in tag_summary(repo.list())]


# PUBLIC_INTERFACE
@router.get(
    "/{task_id}",
    response_model=TaskOut,
    summary="Get Task",
    description="Get a single task by ID.",
    responses={
        200: {"description": "Task found"},
        404: {"description": "Task not found"},
    },
)
def get_task(task_id: int, repo: Repository = Depends(_get_repo)) -> TaskOut:
    item = repo.get(task_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return TaskOut(**item)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a new task and return it. Any id or timestamps in the body are ignored.",
    responses={
        201: {"description": "Task created successfully"},
        400: {"description": "Title is missing or blank"},
    },
)
def create_task(payload: TaskCreate, response: Response, repo: Repository = Depends(_get_repo)) -> Union[TaskOut, JSONResponse]:
    error = _missing_title(payload)
    if error is not None:
        return error
    created = repo.create(payload.to_item())
    response.headers["Location"] = f"{router.prefix}/{created['id']}"
    logger.info("Task {} created", created["id"])
    return TaskOut(**created)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.put(
    "/{task_id}",
    response_model=TaskOut,
    summary="Replace Task",
    description=(
        "Replace an existing task. Fields omitted from the body are reset to their defaults; "
        "id and created_at are kept."
    ),
    responses={
        200: {"description": "Task updated"},
        400: {"description": "Title is missing or blank"},
        404: {"description": "Task not found"},
    },
)
def put_task(task_id: int, payload: TaskCreate, repo: Repository = Depends(_get_repo)) -> Union[TaskOut, JSONResponse]:
    error = _missing_title(payload)
    if error is not None:
        return error
    updated = repo.update(payload.to_item(task_id=task_id))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return TaskOut(**updated)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Task",
    description="Delete a task by ID.",
    responses={
        204: {"description": "Task deleted"},
        404: {"description": "Task not found"},
    },
)
def delete_task(task_id: int, repo: Repository = Depends(_get_repo)) -> Response:
    """
    Delete a task. Returns 204 on success, 404 if not found.
    """
    if not repo.delete(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Task {} deleted", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
