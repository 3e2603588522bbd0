"""Geometry of image trees.

`bounding_box` is the layout engine proper: pure, recomputed on every call,
no caching on the nodes. `bbox_compare` and `svgelements_bbox` are debug
helpers used to check the layout against an independent SVG measurement.
"""

from __future__ import annotations
