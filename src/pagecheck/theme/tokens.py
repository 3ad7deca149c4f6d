"""Design tokens consumed by the global CSS and the generated page styles."""

BORDER_COLOR = "#334155"  # slate-700
SHADOW_ELEVATED = "0 10px 15px -3px rgba(0, 0, 0, 0.2), 0 4px 6px -2px rgba(0, 0, 0, 0.1)"

TOKENS = {
    "backgrounds": {
        "primary": "#030014",
        "panel_dark": "#09041f",
        "panel_medium": "#150a38",
    },
    # Tailwind slate equivalents
    "text": {
        "primary": "#f1f5f9",
        "secondary": "#cbd5e1",
        "muted": "#64748b",
    },
    "accents": {
        "purple": "#a855f7",
        "cyan": "#06b6d4",
        "blue": "#3b82f6",
    },
    "border": BORDER_COLOR,
    "fonts": {
        "ui": "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif",
    },
    "spacing": {
        "2": "0.5rem",
        "4": "1rem",
    },
    "radii": {
        "md": "0.5rem",
    },
}
