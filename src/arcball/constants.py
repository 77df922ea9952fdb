"""
Arcball Constants - Single Source of Truth
==========================================

Defaults for the curve shapes, the animation configuration and the
numerical tolerances used by the frame loop. Every other module imports
its defaults from here.
"""

# ==============================================================================
# Shape Defaults
# ==============================================================================

class DefaultShape:
    """Default shape parameters (a unit ellipse stretched to 75x50)."""

    X_EXTENT           = 75.0   # domain half-width of the curve
    Y_EXTENT           = 50.0   # range scale of the curve
    CURVATURE_CONSTANT = 1.0    # 1.0 = unit ellipse / parabola

    # Number of values an explicit shape tuple must carry
    PARAM_COUNT = 3


# ==============================================================================
# Animation Defaults
# ==============================================================================

class DefaultAnimation:
    """Default animation configuration."""

    FRAME_RATE     = 10     # frames per second
    POINT_COUNT    = 4      # length of the point trail
    TOTAL_DURATION = 100    # seconds (negative = run forever)
    OUTPUT_WIDTH   = 100    # character columns
    MARKER         = "*"


# Any negative duration disables the stop condition; -1 is the canonical form
RUN_FOREVER = -1


# ==============================================================================
# Tolerances
# ==============================================================================

# Fraction of the full render span (2 * y_extent) treated as "at the extreme"
# when deciding whether to flip the reversal sign.
REVERSAL_TOLERANCE = 5e-7

# The loop starts on the opposite half-cycle; the first reversal check (all
# points rest at render 0) flips it to +1.
INITIAL_REVERSAL_SIGN = -1

# Curve family names accepted by make_curve() and the CLI
CURVE_KINDS = ("ellipse", "parabola")
