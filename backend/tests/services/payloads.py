"""Request bodies shared by the route tests."""

BIO = (
    "Sarah paints coastal landscapes in oil, mostly large canvases "
    "of the Pacific shoreline at dawn."
)


def artist_payload(**overrides) -> dict:
    """Valid section 1 body; override any field per test."""
    data = {
        "full_name": "Sarah Jones",
        "studio_name": "Jones Studio",
        "email": "sarah@example.com",
        "location": "Vancouver, BC",
        "bio": BIO,
        "artistic_style": "Impressionist seascapes",
        "primary_color": "#1A2B3C",
        "social_links": {"website": "https://sarahjones.art"},
    }
    data.update(overrides)
    return data


def variant_payload(**overrides) -> dict:
    data = {
        "product_type": "unframed_print",
        "size": "8x10",
        "media": "Fine Art Rag",
        "base_cost": 20,
    }
    data.update(overrides)
    return data


def artwork_payload(**overrides) -> dict:
    data = {
        "title": "Dawn at Tofino",
        "year_created": 2021,
        "medium": "Oil on canvas",
        "orientation": "landscape",
        "dimensions": {"width": 24, "height": 18},
        "keywords": ["ocean", "dawn"],
    }
    data.update(overrides)
    return data
