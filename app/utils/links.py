from app.schemas.link import Link


def generate_links(resource: str, entity_id: int) -> dict[str, Link]:
    href = f"/{resource}/{entity_id}"
    return {
        "self": Link(href=href, rel="self", method="GET"),
        "update": Link(href=href, rel="update", method="PUT"),
        "delete": Link(href=href, rel="delete", method="DELETE"),
    }
