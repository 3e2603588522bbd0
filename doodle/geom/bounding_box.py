"""Axis-aligned bounding boxes for image trees.

Convention
- Extents are relative to the node's own local origin, y pointing up:
  `width = right - left`, `height = top - bottom`.
- Primitives are symmetric about the origin.
- Beside/Above boxes are centered on the origin: their children get placed
  inside that box by the renderer (see `doodle.core.render`).

The computation is derived on demand and never stored on the nodes; calling
it twice on the same tree gives the same result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never, cast

from doodle.core.image import (
    Above,
    At,
    Beside,
    Circle,
    ContextTransform,
    Drawable,
    Image,
    ImageNode,
    Overlay,
    Rectangle,
    Triangle,
)
from doodle.core.point import Vec


@dataclass(frozen=True)
class BoundingBox:
    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def centered(cls, width: float, height: float) -> "BoundingBox":
        w2 = width / 2.0
        h2 = height / 2.0
        return cls(left=-w2, right=w2, top=h2, bottom=-h2)

    @classmethod
    def of(cls, image: Image) -> "BoundingBox":
        return bounding_box(image)

    @property
    def width(self) -> float:
        return float(self.right - self.left)

    @property
    def height(self) -> float:
        return float(self.top - self.bottom)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            left=min(self.left, other.left),
            right=max(self.right, other.right),
            top=max(self.top, other.top),
            bottom=min(self.bottom, other.bottom),
        )

    def translate(self, v: Vec) -> "BoundingBox":
        return BoundingBox(
            left=self.left + v.x,
            right=self.right + v.x,
            top=self.top + v.y,
            bottom=self.bottom + v.y,
        )

    def as_list(self) -> list[float]:
        return [float(self.left), float(self.right), float(self.top), float(self.bottom)]


def bounding_box(image: Image) -> BoundingBox:
    """Compute the box of `image` bottom-up."""
    node = cast(ImageNode, image)
    if isinstance(node, Circle):
        r = node.radius
        return BoundingBox(left=-r, right=r, top=r, bottom=-r)
    elif isinstance(node, Rectangle):
        return BoundingBox.centered(node.width, node.height)
    elif isinstance(node, Triangle):
        return BoundingBox.centered(node.width, node.height)
    elif isinstance(node, Overlay):
        return bounding_box(node.top).union(bounding_box(node.bottom))
    elif isinstance(node, Beside):
        lb = bounding_box(node.left)
        rb = bounding_box(node.right)
        return BoundingBox.centered(lb.width + rb.width, max(lb.height, rb.height))
    elif isinstance(node, Above):
        tb = bounding_box(node.top)
        bb = bounding_box(node.bottom)
        return BoundingBox.centered(max(tb.width, bb.width), tb.height + bb.height)
    elif isinstance(node, At):
        return bounding_box(node.inner).translate(node.offset)
    elif isinstance(node, ContextTransform):
        return bounding_box(node.inner)
    elif isinstance(node, Drawable):
        return bounding_box(node.draw())
    else:
        assert_never(node)
