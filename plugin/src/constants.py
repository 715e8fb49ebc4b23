"""
Sort Background Colors - Constants and Configuration

This module contains all constant values used throughout the plugin:
- Layout metrics (margins, gutters, padding)
- Defaults for freshly created containers
- Color model weights
- User-facing messages
"""

# ======================================================================
# LAYOUT METRICS
# ======================================================================
# All values are in document points, relative to the container frame

# Offset of the first column/row from the container's top-left corner
LAYOUT_MARGIN = 5

# Gap between neighbouring layers, horizontally and between rows
LAYOUT_SPACING = 5

# Space kept free on the right edge of the container before wrapping
LAYOUT_RIGHT_PADDING = 10

# Extra height added to the first row when sizing the container
LAYOUT_BOTTOM_PADDING = 10

# ======================================================================
# NEW CONTAINER DEFAULTS
# ======================================================================
# Used when no container was selected and one has to be created

DEFAULT_CONTAINER_NAME = 'Colors'
DEFAULT_CONTAINER_WIDTH = 600
DEFAULT_CONTAINER_HEIGHT = 600  # Overwritten by the layout pass

# ======================================================================
# COLOR MODEL
# ======================================================================

# Luma weights (intentionally not the Rec. 601 0.299/0.587/0.114 set)
LUMA_WEIGHT_RED = 0.3
LUMA_WEIGHT_GREEN = 0.59
LUMA_WEIGHT_BLUE = 0.11

# Hue used for layers whose background cannot be resolved
FALLBACK_HUE = 0

# ======================================================================
# USER MESSAGES
# ======================================================================

MSG_NO_SELECTION = 'No layers selected!'
MSG_NO_COLORABLE_LAYERS = 'No layers with background selected!'

# How long status bar messages stay visible (milliseconds)
STATUS_MESSAGE_TIMEOUT_MS = 4000

# ======================================================================
# CONFIGURATION
# ======================================================================

CONFIG_FILE_NAME = 'sort_background_colors.json'
