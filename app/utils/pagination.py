from app.config import settings
from app.repositories import Repository
from app.schemas.common import PagedResponse, ResourceResponse


def resolve_page_size(page_size: int | None) -> int:
    if page_size is None:
        page_size = settings.default_page_size
    if settings.max_page_size is not None:
        page_size = min(page_size, settings.max_page_size)
    return page_size


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Skip/take for a 1-based page. Non-positive values select nothing to skip / take."""
    skip = max((page - 1) * page_size, 0)
    take = max(page_size, 0)
    return skip, take


async def paginate(
    repository: Repository,
    resource: str,
    schema: type[ResourceResponse],
    page: int,
    page_size: int | None,
) -> PagedResponse:
    page_size = resolve_page_size(page_size)
    skip, take = page_bounds(page, page_size)
    items, total = await repository.page(skip, take)
    return PagedResponse[schema](
        data=[schema.from_entity(item, resource) for item in items],
        total_count=total,
        page=page,
        page_size=page_size,
    )
