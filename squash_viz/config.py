"""
Configuration for Squash Court Visualiser.
"""
from pathlib import Path

# ── Court dimensions (metres, regulation singles court) ──────────────────────
COURT_WIDTH            = 6.4
COURT_LENGTH           = 9.75
COURT_HEIGHT           = 4.57
TIN_HEIGHT             = 0.48
SERVICE_LINE_HEIGHT    = 1.83
OUT_LINE_HEIGHT        = COURT_HEIGHT
SHORT_LINE_DISTANCE    = 4.26       # measured from the back wall
HALF_COURT_LINE_LENGTH = 4.26       # short line → back wall
SERVICE_BOX_WIDTH      = 1.6
SERVICE_BOX_DEPTH      = 1.6
BACK_WALL_CUTOUT       = 2.44       # back wall stops this far below the side walls

# ── Court markings / overlays ────────────────────────────────────────────────
LINE_WIDTH           = 0.05         # painted marking strips
OUT_BAND_HEIGHT      = 2.0          # "out of court" band above each wall
FLOOR_LIFT           = 0.002        # floor markings sit just above the floor
FLOOR_LABEL_LIFT     = 0.003        # service-box text sits above the box fill
SERVICE_BOX_LIFT     = 0.001
WALL_OVERLAY_OFFSET  = 0.005        # tin / service / out line in front of wall
DIAGONAL_INSET       = 0.005
WALL_LABEL_INSET     = 0.002
EDGE_INSET           = 0.002

WALL_LABEL_FONT_SIZE    = 0.5
MARKING_LABEL_FONT_SIZE = 0.3

WALL_COLOR         = "white"
FLOOR_COLOR        = "white"
MARKING_COLOR      = "red"
EDGE_COLOR         = "black"
LABEL_COLOR        = "black"
SERVICE_BOX_COLOR  = "mistyrose"

# ── Ball ─────────────────────────────────────────────────────────────────────
BALL_RADIUS       = 0.03
BALL_COLOR        = "orange"
BALL_START        = (0.0, 0.0, 0.0)
BALL_HIDDEN_Y     = 10000.0         # far above the scene = out of view

# ── Shot timing (milliseconds) ───────────────────────────────────────────────
SHOT_LEAD_IN_MS   = 500             # pause after the ball is placed
SHOT_SEGMENT_MS   = 1000
BOAST_FINISH_MS   = 500

# ── Camera ───────────────────────────────────────────────────────────────────
CAMERA_HOME       = (0.0, 15.0, 15.0)
CAMERA_TARGET     = (0.0, 0.0, 0.0)
CAMERA_RESET_MS   = 1000
CAMERA_FOV_DEG    = 50.0
CAMERA_NEAR       = 0.1

# ── Rendering ────────────────────────────────────────────────────────────────
FRAME_WIDTH       = 1280
FRAME_HEIGHT      = 720
RENDER_FPS        = 30.0
TAIL_MS           = 500             # keep rendering briefly after the shot lands
BACKGROUND_BGR    = (40, 40, 40)
EDGE_THICKNESS    = 2

# CSS colour names used by the geometry → OpenCV BGR
COLOR_BGR = {
    "white":     (255, 255, 255),
    "black":     (0, 0, 0),
    "red":       (0, 0, 255),
    "orange":    (0, 165, 255),
    "mistyrose": (225, 228, 255),
}

# ── Output ───────────────────────────────────────────────────────────────────
PROJECT_ROOT       = Path(__file__).resolve().parent.parent
RESULTS_DIR        = PROJECT_ROOT / "results"
OUTPUT_VIDEO_CODEC = "mp4v"
