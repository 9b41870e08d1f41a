from app.utils.links import generate_links


def test_generate_links_has_exactly_three_links():
    links = generate_links("motos", 7)
    assert set(links) == {"self", "update", "delete"}


def test_generate_links_hrefs_and_methods():
    links = generate_links("alertas", 3)

    assert links["self"].model_dump() == {"href": "/alertas/3", "rel": "self", "method": "GET"}
    assert links["update"].model_dump() == {"href": "/alertas/3", "rel": "update", "method": "PUT"}
    assert links["delete"].model_dump() == {"href": "/alertas/3", "rel": "delete", "method": "DELETE"}
