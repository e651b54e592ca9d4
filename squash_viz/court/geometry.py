"""
Procedural squash court geometry.

build_court() turns CourtDimensions into the flat descriptor lists a
renderer needs. It has no side effects and always returns the same
descriptors for the same inputs, so it is safe to call again whenever
label visibility changes.

Top view (y up out of the page):

        front wall  z = -L/2
    ┌──────────────────────────┐
    │                          │
    │                          │   tin / service / out line on front wall
    │                          │
    ├────────────┬─────────────┤   short line  z = L/2 - short
    │  box (L)   │   box (R)   │
    │            │             │   half-court line
    └────────────┴─────────────┘
        back wall   z = +L/2
   x = -W/2                  x = +W/2
"""
from __future__ import annotations
import logging
import math
from typing import List

from ..models.court import (CourtDimensions, CourtGeometry, EdgeLineDescriptor,
                            FaceSide, LabelDescriptor, SurfaceDescriptor)
from .. import config

logger = logging.getLogger(__name__)

PI = math.pi

# Plane orientations (XYZ Euler, radians)
FLAT          = (PI / 2, 0.0, 0.0)         # lying on the floor
FACING_BACK   = (0.0, 0.0, 0.0)            # front wall, normal towards the back
FACING_FRONT  = (0.0, PI, 0.0)            # back wall, normal towards the front
RIGHT_WALL    = (0.0, PI / 2, 0.0)
LEFT_WALL     = (0.0, PI * 1.5, 0.0)

FLOOR_TEXT      = (-PI / 2, 0.0, 0.0)
FLOOR_TEXT_LONG = (-PI / 2, 0.0, PI / 2)  # reads along the half-court line
WALL_TEXT       = (0.0, 0.0, 0.0)
LEFT_WALL_TEXT  = (0.0, -PI * 1.5, 0.0)
RIGHT_WALL_TEXT = (0.0, -PI / 2, 0.0)

# Draw layers for surfaces that overlay a panel
FILL    = 1
MARKING = 2

# Label offsets from the feature they name (metres)
SHORT_LINE_LABEL_GAP  = 0.24      # towards the back wall
HALF_LINE_LABEL_GAP   = 0.15      # to the left of the line
FRONT_WALL_LABEL_LIFT = 1.0
TIN_LABEL_LIFT        = 0.12
SERVICE_LABEL_LIFT    = 0.17


def build_court(dimensions: CourtDimensions, show_labels: bool = False) -> CourtGeometry:
    """
    Build every surface, edge and (optionally) label for a court.

    Labels are only constructed when ``show_labels`` is set.
    """
    geometry = CourtGeometry(
        surfaces=tuple(_walls(dimensions) + _floor_markings(dimensions)
                       + _front_wall_markings(dimensions)),
        edges=tuple(_edges(dimensions)),
        labels=tuple(_labels(dimensions)) if show_labels else (),
    )
    logger.debug("built court: %d surfaces, %d edges, %d labels",
                 len(geometry.surfaces), len(geometry.edges), len(geometry.labels))
    return geometry


# ── Surfaces ──────────────────────────────────────────────────────────────────

def _walls(d: CourtDimensions) -> List[SurfaceDescriptor]:
    W, L, H = d.width, d.length, d.height
    band = config.OUT_BAND_HEIGHT
    wall = config.WALL_COLOR

    diagonal_angle = math.atan(d.back_wall_cutout / L)
    diagonal_length = math.hypot(L, d.back_wall_cutout)
    diagonal_y = H - d.back_wall_cutout / 2

    return [
        SurfaceDescriptor("floor", (0.0, 0.0, 0.0), FLAT, (W, L),
                          config.FLOOR_COLOR, FaceSide.DOUBLE),

        SurfaceDescriptor("left_wall", (-W / 2, H / 2, 0.0), LEFT_WALL, (L, H),
                          wall, FaceSide.BACK),
        SurfaceDescriptor("left_wall_upper", (-W / 2, d.out_line_height, 0.0), LEFT_WALL,
                          (L, band), wall, FaceSide.BACK),
        SurfaceDescriptor("right_wall", (W / 2, H / 2, 0.0), RIGHT_WALL, (L, H),
                          wall, FaceSide.BACK),
        SurfaceDescriptor("right_wall_upper", (W / 2, d.out_line_height, 0.0), RIGHT_WALL,
                          (L, band), wall, FaceSide.BACK),

        SurfaceDescriptor("front_wall", (0.0, H / 2, -L / 2), FACING_BACK, (W, H), wall),
        SurfaceDescriptor("front_wall_upper", (0.0, d.out_line_height, -L / 2), FACING_BACK,
                          (W, band), wall),

        # Starts at the floor; the gap above it is the cutout
        SurfaceDescriptor("back_wall", (0.0, d.back_wall_height / 2, L / 2), FACING_FRONT,
                          (W, d.back_wall_height), wall),

        SurfaceDescriptor("right_diagonal", (W / 2 - config.DIAGONAL_INSET, diagonal_y, 0.0),
                          (0.0, PI / 2, diagonal_angle),
                          (diagonal_length, config.LINE_WIDTH),
                          config.MARKING_COLOR, FaceSide.BACK, layer=MARKING),
        SurfaceDescriptor("left_diagonal", (-W / 2 + config.DIAGONAL_INSET, diagonal_y, 0.0),
                          (0.0, PI * 1.5, -diagonal_angle),
                          (diagonal_length, config.LINE_WIDTH),
                          config.MARKING_COLOR, FaceSide.BACK, layer=MARKING),
    ]


def _floor_markings(d: CourtDimensions) -> List[SurfaceDescriptor]:
    W, L = d.width, d.length
    y = config.FLOOR_LIFT
    lw = config.LINE_WIDTH
    red = config.MARKING_COLOR
    short_z = L / 2 - d.short_line_distance

    surfaces = [
        SurfaceDescriptor("short_line", (0.0, y, short_z), FLAT, (W, lw),
                          red, FaceSide.DOUBLE, layer=MARKING),
        SurfaceDescriptor("half_court_line", (0.0, y, L / 2 - d.half_court_line_length / 2),
                          FLAT, (lw, d.half_court_line_length), red, FaceSide.DOUBLE, layer=MARKING),
    ]

    bw, bd = d.service_box_width, d.service_box_depth
    box_z = short_z + bd / 2
    for side, s in (("left", -1), ("right", 1)):
        surfaces += [
            SurfaceDescriptor(f"{side}_service_box", (s * (W - bw) / 2, config.SERVICE_BOX_LIFT, box_z),
                              FLAT, (bw, bd), config.SERVICE_BOX_COLOR, FaceSide.DOUBLE,
                              layer=FILL),
            # back edge of the box
            SurfaceDescriptor(f"{side}_service_box_back", (s * (W - bw) / 2, y, short_z + bd),
                              FLAT, (bw, lw), red, FaceSide.DOUBLE, layer=MARKING),
            # inner edge, running from the short line
            SurfaceDescriptor(f"{side}_service_box_inner", (s * (W / 2 - bw), y, box_z),
                              FLAT, (lw, bd + lw), red, FaceSide.DOUBLE, layer=MARKING),
        ]
    return surfaces


def _front_wall_markings(d: CourtDimensions) -> List[SurfaceDescriptor]:
    z = -d.length / 2 + config.WALL_OVERLAY_OFFSET
    band = (d.width, config.LINE_WIDTH)
    red = config.MARKING_COLOR
    return [
        SurfaceDescriptor("tin", (0.0, d.tin_height, z), FACING_BACK, band, red,
                          layer=MARKING),
        SurfaceDescriptor("service_line", (0.0, d.service_line_height, z), FACING_BACK, band, red,
                          layer=MARKING),
        SurfaceDescriptor("out_line", (0.0, d.out_line_height, z), FACING_BACK, band, red,
                          layer=MARKING),
    ]


# ── Edges ─────────────────────────────────────────────────────────────────────

def _edges(d: CourtDimensions) -> List[EdgeLineDescriptor]:
    hw, hl = d.width / 2, d.length / 2
    y = config.FLOOR_LIFT
    e = config.EDGE_INSET
    return [
        EdgeLineDescriptor("edge_left",  (-hw, y, -hl), (-hw, y, hl)),
        EdgeLineDescriptor("edge_front", (-hw, y, -hl), (hw, y, -hl)),
        EdgeLineDescriptor("edge_right", (hw, y, hl), (hw, y, -hl)),
        EdgeLineDescriptor("edge_back",  (-hw, y, hl), (hw, y, hl)),
        EdgeLineDescriptor("edge_front_left_corner",
                           (-hw + e, y, -hl + e), (-hw + e, d.height, -hl + e)),
        EdgeLineDescriptor("edge_front_right_corner",
                           (hw - e, y, -hl + e), (hw - e, d.height, -hl + e)),
        EdgeLineDescriptor("edge_back_left_corner",
                           (-hw + e, y, hl - e), (-hw + e, d.back_wall_height, hl - e)),
        EdgeLineDescriptor("edge_back_right_corner",
                           (hw - e, y, hl - e), (hw - e, d.back_wall_height, hl - e)),
    ]


# ── Labels ────────────────────────────────────────────────────────────────────

def _labels(d: CourtDimensions) -> List[LabelDescriptor]:
    W, L, H = d.width, d.length, d.height
    inset = config.WALL_LABEL_INSET
    wall_font = config.WALL_LABEL_FONT_SIZE
    mark_font = config.MARKING_LABEL_FONT_SIZE
    front_z = -L / 2 + config.WALL_OVERLAY_OFFSET
    box_z = L / 2 - d.short_line_distance + d.service_box_depth / 2
    box_x = (W - d.service_box_width) / 2

    return [
        LabelDescriptor("SIDE WALL (LEFT)", (-W / 2 + inset, H / 2, 0.0),
                        LEFT_WALL_TEXT, wall_font),
        LabelDescriptor("SIDE WALL (RIGHT)", (W / 2 - inset, H / 2, 0.0),
                        RIGHT_WALL_TEXT, wall_font),
        LabelDescriptor("FRONT WALL", (0.0, H / 2 + FRONT_WALL_LABEL_LIFT, -L / 2 + inset),
                        WALL_TEXT, wall_font),
        LabelDescriptor("BACK WALL", (0.0, d.back_wall_height / 2, L / 2),
                        WALL_TEXT, wall_font),
        LabelDescriptor("SHORT LINE",
                        (0.0, config.FLOOR_LIFT, L / 2 - d.short_line_distance - SHORT_LINE_LABEL_GAP),
                        FLOOR_TEXT, mark_font),
        LabelDescriptor("HALF COURT LINE",
                        (-HALF_LINE_LABEL_GAP, config.FLOOR_LIFT, L / 2 - d.half_court_line_length / 2),
                        FLOOR_TEXT_LONG, mark_font),
        LabelDescriptor("SERVICE\nBOX", (-box_x, config.FLOOR_LABEL_LIFT, box_z),
                        FLOOR_TEXT, mark_font),
        LabelDescriptor("SERVICE\nBOX", (box_x, config.FLOOR_LABEL_LIFT, box_z),
                        FLOOR_TEXT, mark_font),
        LabelDescriptor("TIN", (0.0, d.tin_height + TIN_LABEL_LIFT, front_z),
                        WALL_TEXT, mark_font),
        LabelDescriptor("SERVICE LINE", (0.0, d.service_line_height + SERVICE_LABEL_LIFT, front_z),
                        WALL_TEXT, mark_font),
    ]
