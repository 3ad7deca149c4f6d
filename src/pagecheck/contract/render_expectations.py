"""
Render expectations – minimal UI footprint per page.

Defines the minimum counts of UI elements each page must produce
when rendered correctly, and optional markers for diagnostic purposes.
"""

RENDER_EXPECTATIONS = {
    "integrations": {
        "min": {"cards": 1, "labels": 2, "buttons": 1},
        "markers": ["has_featured_section"],
    },
}
