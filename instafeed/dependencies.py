from fastapi import Query

from instafeed.config import settings


class PaginationParams:
    """
    Reusable FastAPI dependency that parses and validates paging query
    parameters.

    Usage in a router::

        @router.get("/newsfeeds")
        async def list_newsfeeds(pagination: PaginationParams = Depends()):
            ...

    Ordering is fixed by the feed (most recently updated first), so only
    the window is caller-controlled.

    Attributes
    ----------
    page:
        1-based page number (minimum 1).
    page_size:
        Number of items per page, clamped to ``settings.MAX_PAGE_SIZE``.
    """

    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number (1-based)."),
        page_size: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            le=100,
            description="Number of items returned per page (max 100).",
        ),
    ) -> None:
        self.page = page
        self.page_size = min(page_size, settings.MAX_PAGE_SIZE)
