"""FastAPI dependencies providing a ``RecordService`` per collection."""

from typing import Callable

from fastapi import Depends

from cinema_api.app.core.db import DocumentStore, get_document_store
from cinema_api.app.services.record_service import RecordService


def collection_service(collection: str) -> Callable[..., RecordService]:
    """Return a dependency that binds the current store to ``collection``."""

    def dependency(store: DocumentStore = Depends(get_document_store)) -> RecordService:
        return RecordService(store, collection)

    return dependency


get_book_service = collection_service("books")
get_user_service = collection_service("users")
get_movie_service = collection_service("movies")
get_system_theater_service = collection_service("systemTheaters")
get_group_theater_service = collection_service("groupTheaters")
