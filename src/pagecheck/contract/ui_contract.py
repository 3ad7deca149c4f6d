"""
UI Contract – Canonical definitions of UI pages and routes.

This module is the single source of truth for page IDs, import paths,
and route paths. It must NOT contain any runtime UI creation,
import‑time side effects, or dependencies on other UI modules.
"""

UI_CONTRACT = {
    "page_ids": ["integrations"],
    "pages": {
        "integrations": "pagecheck.pages.integrations",
    },
    "routes": {
        "integrations": "/integrations",
    },
    "titles": {
        "integrations": "Integrations",
    },
}

PAGE_IDS = UI_CONTRACT["page_ids"]

PAGE_MODULES = dict(UI_CONTRACT["pages"])

PAGE_ROUTES = dict(UI_CONTRACT["routes"])

# Element types counted by the UI registry
ELEMENT_TYPES = ["buttons", "links", "labels", "badges", "icons", "cards"]
