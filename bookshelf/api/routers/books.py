from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from ...handlers import BookHandlers

router = APIRouter()


def get_handlers(request: Request) -> BookHandlers:
    return BookHandlers(request.app.state.gateway)


def _respond(response) -> JSONResponse:
    status_code, body = response
    return JSONResponse(status_code=status_code, content=body)


@router.post("")
def create_book(payload: Any = Body(default=None), handlers: BookHandlers = Depends(get_handlers)):
    return _respond(handlers.create(payload))


@router.get("")
def list_books(
    name: str | None = None,
    reading: str | None = None,
    finished: str | None = None,
    handlers: BookHandlers = Depends(get_handlers),
):
    return _respond(handlers.list_books(name=name, reading=reading, finished=finished))


@router.get("/{book_id}")
def get_book(book_id: str, handlers: BookHandlers = Depends(get_handlers)):
    return _respond(handlers.get(book_id))


@router.put("/{book_id}")
def update_book(
    book_id: str,
    payload: Any = Body(default=None),
    handlers: BookHandlers = Depends(get_handlers),
):
    return _respond(handlers.update(book_id, payload))


@router.delete("/{book_id}")
def delete_book(book_id: str, handlers: BookHandlers = Depends(get_handlers)):
    return _respond(handlers.delete(book_id))
