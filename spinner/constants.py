"""Named dimension constants for the spinner schematic.

All values in millimetres unless noted.
"""

# Default parameters
DEFAULT_BRANCHES = 3              # three-armed spinner
DEFAULT_INTERNAL_RADIUS = 30.0    # center to bearing-hole center
DEFAULT_BEARING_SIZE = 18.0       # bearing outer diameter

# Body proportions
SPINNER_RADIUS_FACTOR = 1.5       # spinner radius = internal + bearing radius * factor
WAIST_DIVISOR = 3                 # waist point radius = spinner radius / divisor
CONTROL_DIVISOR = 6               # arm-edge control points sit angle step / divisor off the tip
MARGIN = 10.0                     # space between silhouette and page edge

# Drawing
DOT_RADIUS = 1.0                  # bearing-center marker
CLIP_ID = "clip"
CLIP_PAD = 1.0                    # clip circle radius beyond the silhouette
SURFACE_ID = "spinner"            # id of the root <svg> element
HUB_FILL = "blue"                 # central bearing fill

# Reference ruler
RULER_X = 10
RULER_Y = 10
RULER_LENGTH = 10
