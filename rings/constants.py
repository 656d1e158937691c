"""Named policy constants for the skill ring chart.

All lengths in SVG user units (px) unless noted. Angles in radians.
Width factors are multiples of the font size.
"""

# Canvas
CANVAS_SIZE = 720                 # square chart side
INNER_CORE_R = 20                 # always-empty hub radius
MIN_ROW_THICKNESS = 6             # floor for the shared unit thickness
PAD_ANGLE = 0.0                   # gap between category sectors
PAD_ANGLE_MAX_SHARE = 0.5         # pad never takes more than this share of a sector
FULL_TURN_TRIM = 1e-3             # full-turn sectors are shortened by this

# Spacer rows (empirically tuned, not derived)
COMFORTABLE_SPACER_ROWS = 3       # filled block before a non-empty Comfortable band
BASE_SPACER_ROWS = 1              # gap before the first band when Comfortable is empty

# Chart-wide row font
CHART_FONT_MIN = 7                # smallest row label font
CHART_FONT_MAX = 12               # largest row label font
ROW_FONT_MARGIN = 2               # row font <= row height - 2
ROW_FONT_WEIGHT = 500

# Row labels
ROW_PAD_PX = 6                    # angular padding at both sector ends, as arc length
ROW_SAFE_PX = 8                   # safety margin taken off the arc budget
TEXT_FLOW = "cw"                  # every row label flows the same way round

# Row fills
OPACITY_DECAY = 0.2               # per-row opacity step inside a band
OPACITY_FLOOR = 0.3               # lowest row opacity
INACTIVE_DIM = 0.9                # multiplier for bands that are not highlighted

# Category labels
LABEL_FONT_SIZE = 14
LABEL_FONT_WEIGHT = 700
LABEL_OFFSET = 8                  # horizontal gap between anchor and text
LABEL_PAD_EXTRA = 8               # safety added to the reserved outer padding
LABEL_PAD_MIN = 28                # smallest reserved outer padding
LABEL_MARGIN_MIN = 16             # smallest radial gap outside a category
CANVAS_SAFE = 4                   # labels keep this far from the canvas edge
LABEL_CHAR_W = 0.6                # per-character estimate for category names
LABEL_FIT_SLACK = 4               # room kept past the per-character estimate
LABEL_HALO_WIDTH = 4              # background-colored stroke behind label fill

# Width estimator factors
W_SPACE = 0.35                    # whitespace
W_LATIN = 0.56                    # Latin letters, digits, punctuation
W_WIDE = 0.95                     # CJK and fullwidth forms
W_SYMBOL = 1.2                    # emoji and pictographic symbols
ELLIPSIS = "…"
ELLIPSIS_RESERVE = 0.95           # room kept for the ellipsis while fitting
FIT_MIN = 0.7                     # budgets at or below this draw nothing

# Colors
BG_COLOR = "#ffffff"
LABEL_COLOR = "#334155"           # slate-700
ROW_TEXT_COLOR = "#ffffff"
GLOW_COLOR = "#fecdd3"            # rose-200

# Legend (composite export)
EXPORT_PAD = 24                   # outer padding around chart and legend
LEGEND_PAD = 12                   # legend inner padding
LEGEND_TITLE_H = 18
LEGEND_TITLE_GAP = 8
LEGEND_ITEM_H = 22
LEGEND_ITEM_GAP = 6
LEGEND_SWATCH = 14
LEGEND_RADIUS = 12
LEGEND_TITLE = "图例 Legend"
LEGEND_STROKE = "#e5e7eb"         # slate-200
LEGEND_TITLE_COLOR = "#334155"    # slate-700
LEGEND_TEXT_COLOR = "#475569"     # slate-600

# Raster export
RASTER_SCALE = 2

# Persistence
STORE_KEY = "cci-data"
