"""Color palette constants for dark theme."""

# Base theme colors
BACKGROUND = "#0F172A"
PANEL_BG = "#1E293B"
SURFACE = "#334155"
BORDER = "#475569"

# Accent colors
ACCENT = "#3B82F6"
ACCENT_HOVER = "#60A5FA"

# Semantic colors
WARNING = "#F59E0B"
ERROR = "#EF4444"

# Text colors
TEXT_PRIMARY = "#F8FAFC"
TEXT_SECONDARY = "#B0BEC5"
TEXT_DISABLED = "#64748B"

# Spectrum bar indicator
INDICATOR = "#F8FAFC"
INDICATOR_GLOW = "#3B82F6"
INDICATOR_SHADOW = "#000000"

# Fallback for values outside the catalog
UNKNOWN_REGION = "#64748B"
