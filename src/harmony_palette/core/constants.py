"""Constants shared across the palette core."""

# Slots in a working or saved palette
PALETTE_SIZE = 5

# Lightness/saturation step used by the complementary and triadic rules
SHADE_STEP = 20

# Default file name for exported collections
DEFAULT_EXPORT_NAME = "color-palettes.json"
