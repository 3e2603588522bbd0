"""svgelements adapter: measure exported SVG geometry (debug tooling).

This module is optional at runtime: if `svgelements` is not installed,
callers keep working and get `available: False`.

`cross_check_layout` exports an image with the SVG sink, measures it with
svgelements and compares the result against the layout engine's box.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from doodle.core.common_colors import BLACK
from doodle.core.drawing_context import DrawingContext
from doodle.core.image import Image
from doodle.geom.bbox_compare import compare_bboxes, device_bbox
from doodle.geom.bounding_box import bounding_box
from doodle.svg.exporter import export_image_svg
from doodle.utils.errors import DoodleError

log = logging.getLogger(__name__)


def measure_svg_bbox(svg_path: str | Path, *, ppi: float = 96.0) -> Dict[str, Any]:
    """Geometry bbox of an SVG document (strokes excluded).

    Returns a dict like:
    - available: bool
    - bbox: (x0, y0, x1, y1) in viewport units, or None
    - error: str (optional)
    """

    try:
        from svgelements import SVG  # type: ignore
    except ImportError as e:
        return {"available": False, "bbox": None, "error": f"{type(e).__name__}: {e}"}

    try:
        svg = SVG.parse(str(svg_path), ppi=float(ppi), reify=True)
        b = svg.bbox(with_stroke=False)
    except Exception as e:
        log.debug("svgelements could not measure %s", svg_path, exc_info=True)
        return {"available": True, "bbox": None, "error": f"{type(e).__name__}: {e}"}

    if b is None:
        return {"available": True, "bbox": None}
    return {"available": True, "bbox": (float(b[0]), float(b[1]), float(b[2]), float(b[3]))}


def cross_check_layout(
    image: Image,
    *,
    size_px: Tuple[int, int] = (400, 400),
    out_dir: Optional[str | Path] = None,
    tol_abs_px: float = 0.5,
    warn_abs_px: float = 2.0,
) -> Dict[str, Any]:
    """Export `image` to SVG, measure it and compare with `bounding_box(image)`."""
    w, h = int(size_px[0]), int(size_px[1])
    expected = device_bbox(bounding_box(image), (w / 2.0, h / 2.0))

    # Fill only: the measurement ignores strokes anyway.
    context = DrawingContext(stroke=None).with_fill_color(BLACK)
    try:
        if out_dir is None:
            with tempfile.TemporaryDirectory(prefix="doodle_bbox_") as tmp:
                p = export_image_svg(image, Path(tmp) / "layout.svg", w, h, context=context)
                measured = measure_svg_bbox(p)
        else:
            p = export_image_svg(image, Path(out_dir) / "layout.svg", w, h, context=context)
            measured = measure_svg_bbox(p)
    except DoodleError as e:
        return {"status": "NO_GEOM", "error": str(e), "layout_bbox_xyxy": expected.as_list()}

    report = compare_bboxes(expected, measured.get("bbox"), tol_abs_px=tol_abs_px, warn_abs_px=warn_abs_px)
    report["svgelements_available"] = bool(measured.get("available"))
    if measured.get("error"):
        report["error"] = measured["error"]
    return report