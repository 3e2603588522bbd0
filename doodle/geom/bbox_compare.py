"""Layout vs. measured geometry (debug cross-check).

Purpose
- Put the box predicted by the layout engine (`bounding_box`) and a box
  measured on the rendered output (svgelements on an exported SVG) in the
  same device space, and report how far apart they are.

Design constraints
- Pure Python, no Qt.
- Never raises: bad input turns into a NO_LAYOUT / NO_GEOM status.

Notes
- Layout boxes are y-up and relative to the scene origin; device boxes are
  y-down (x0, y0, x1, y1). `device_bbox` maps one onto the other.
- Neither side includes stroke width.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from doodle.geom.bounding_box import BoundingBox

STATUS_PASS = "PASS"
STATUS_WARN = "WARN"
STATUS_FAIL = "FAIL"
STATUS_NO_LAYOUT = "NO_LAYOUT"
STATUS_NO_GEOM = "NO_GEOM"

_DEGENERATE_PX = 1e-6


@dataclass(frozen=True)
class BBoxXYXY:
    """Device-space box, y pointing down."""

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def w(self) -> float:
        return self.x1 - self.x0

    @property
    def h(self) -> float:
        return self.y1 - self.y0

    def is_degenerate(self) -> bool:
        return self.w <= _DEGENERATE_PX or self.h <= _DEGENERATE_PX

    def edge_deltas(self, other: "BBoxXYXY") -> Tuple[float, float, float, float]:
        """other - self, edge by edge."""
        return (other.x0 - self.x0, other.y0 - self.y0, other.x1 - self.x1, other.y1 - self.y1)

    def as_list(self) -> List[float]:
        return [float(v) for v in (self.x0, self.y0, self.x1, self.y1)]


def device_bbox(box: BoundingBox, center: Tuple[float, float]) -> BBoxXYXY:
    """Map a y-up layout box drawn at `center` into device xyxy (y down)."""
    cx, cy = float(center[0]), float(center[1])
    return BBoxXYXY(cx + box.left, cy - box.top, cx + box.right, cy - box.bottom)


def bbox_from_xyxy_tuple(xyxy: Any) -> Optional[BBoxXYXY]:
    """Accept a BBoxXYXY or any 4-sequence of numbers; None otherwise."""
    if isinstance(xyxy, BBoxXYXY):
        return xyxy
    if not isinstance(xyxy, (list, tuple)) or len(xyxy) != 4:
        return None
    try:
        return BBoxXYXY(*(float(v) for v in xyxy))
    except (TypeError, ValueError):
        return None


def _status_for(err: float, tol_abs_px: float, warn_abs_px: float) -> str:
    if err <= tol_abs_px:
        return STATUS_PASS
    if err <= warn_abs_px:
        return STATUS_WARN
    return STATUS_FAIL


def compare_bboxes(
    layout_bbox_xyxy: Any,
    measured_bbox_xyxy: Any,
    *,
    tol_abs_px: float = 0.5,
    warn_abs_px: float = 2.0,
) -> Dict[str, Any]:
    """Compare the layout box with the measured one.

    The status comes from the largest edge error:
    - PASS: error <= tol_abs_px
    - WARN: error <= warn_abs_px
    - FAIL: anything larger
    - NO_LAYOUT / NO_GEOM: one of the boxes is missing
    """
    layout = bbox_from_xyxy_tuple(layout_bbox_xyxy)
    measured = bbox_from_xyxy_tuple(measured_bbox_xyxy)
    tol, warn = float(tol_abs_px), float(warn_abs_px)

    report: Dict[str, Any] = {
        "status": None,
        "tol_abs_px": tol,
        "warn_abs_px": warn,
        "layout_bbox_xyxy": layout.as_list() if layout else None,
        "measured_bbox_xyxy": measured.as_list() if measured else None,
        "max_abs_err_px": None,
        "diff": None,
        "notes": [],
    }
    if layout is None:
        report.update(status=STATUS_NO_LAYOUT, notes=["layout bbox not available"])
        return report
    if measured is None:
        report.update(status=STATUS_NO_GEOM, notes=["measured bbox not available"])
        return report

    dx0, dy0, dx1, dy1 = layout.edge_deltas(measured)
    err = max(abs(dx0), abs(dy0), abs(dx1), abs(dy1))

    notes = [f"{name} bbox degenerate" for name, b in (("layout", layout), ("measured", measured)) if b.is_degenerate()]
    report.update(
        status=_status_for(err, tol, warn),
        max_abs_err_px=float(err),
        diff={"dx0": dx0, "dy0": dy0, "dx1": dx1, "dy1": dy1, "dw": measured.w - layout.w, "dh": measured.h - layout.h},
        notes=notes,
    )
    return report
