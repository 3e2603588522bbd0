"""Tests for the SVG sink/exporter and the layout cross-check."""
from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from doodle.core.color import rgba
from doodle.core.common_colors import RED
from doodle.core.drawing_context import DrawingContext
from doodle.core.image import Circle, Rectangle, Triangle
from doodle.geom.bbox_compare import BBoxXYXY, bbox_from_xyxy_tuple, compare_bboxes, device_bbox
from doodle.geom.bounding_box import BoundingBox
from doodle.svg.exporter import SVG_NS, build_svg, export_image_svg, image_to_svg_string
from doodle.utils.errors import DoodleIOError

NS = {"svg": SVG_NS}


def paths(svg_text: str):
    root = ET.fromstring(svg_text)
    return root.findall(".//svg:path", NS)


class TestSvgSink:
    def test_circle_is_two_half_arcs(self):
        (p,) = paths(image_to_svg_string(Circle(10), 100, 100))
        assert p.get("d") == "M 10.0 0.0 A 10.0 10.0 0 0 1 -10.0 0.0 A 10.0 10.0 0 0 1 10.0 0.0 Z"
        assert p.get("fill") == "none"
        assert p.get("stroke") == "#000000"
        assert p.get("stroke-width") == "1.0"
        assert p.get("stroke-linecap") == "butt"
        assert p.get("stroke-linejoin") == "miter"

    def test_rectangle_path(self):
        ctx = DrawingContext().with_fill_color(RED)
        (p,) = paths(image_to_svg_string(Rectangle(20, 10), 100, 100, context=ctx))
        assert p.get("d") == "M -10.0 -5.0 h 20.0 v 10.0 h -20.0 Z"
        assert p.get("fill") == "#ff0000"
        assert p.get("stroke") == "none"

    def test_triangle_path(self):
        (p,) = paths(image_to_svg_string(Triangle(20, 10), 100, 100))
        assert p.get("d") == "M 0.0 5.0 L 10.0 -5.0 L -10.0 -5.0 Z"

    def test_fill_path_comes_before_stroke_path(self):
        ps = paths(image_to_svg_string(Circle(5).fill_color(RED), 50, 50))
        assert [p.get("stroke") for p in ps] == ["none", "#000000"]
        assert [p.get("fill") for p in ps] == ["#ff0000", "none"]

    def test_translucent_colors_get_opacity(self):
        img = Circle(5).fill_color(rgba(255, 0, 0, 0.5)).line_color(rgba(0, 0, 0, 0.25))
        fill_path, stroke_path = paths(image_to_svg_string(img, 50, 50))
        assert fill_path.get("fill-opacity") == "0.5"
        assert stroke_path.get("stroke-opacity") == "0.25"

    def test_no_style_no_paths(self):
        assert paths(image_to_svg_string(Circle(5).no_line(), 50, 50)) == []


class TestBuildSvg:
    def test_scene_group_flips_y_around_the_center(self):
        root = build_svg(Circle(1), 200, 100)
        assert root.get("viewBox") == "0 0 200 100"
        g = root.find("g")
        assert g.get("id") == "DOODLE_SCENE"
        assert g.get("transform") == "matrix(1 0 0 -1 100.0 50.0)"

    def test_background(self):
        root = build_svg(Circle(1), 20, 10, background="rgba(0, 0, 255, 0.5)")
        bg = root.find("rect")
        assert bg.get("fill") == "#0000ff"
        assert bg.get("fill-opacity") == "0.5"
        assert bg.get("width") == "20"

    def test_string_is_parseable(self):
        root = ET.fromstring(image_to_svg_string(Circle(3).beside(Circle(4)), 64, 64))
        assert root.tag == f"{{{SVG_NS}}}svg"


class TestExport:
    def test_writes_file_and_forces_suffix(self, tmp_path):
        out = export_image_svg(Circle(10), tmp_path / "sub" / "circle.txt", 40, 40)
        assert out == tmp_path / "sub" / "circle.svg"
        assert out.read_text(encoding="utf-8").startswith("<svg")

    def test_unwritable_target_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(DoodleIOError):
            export_image_svg(Circle(1), blocker / "out.svg", 10, 10)


class TestBBoxCompare:
    def test_device_bbox_flips_y(self):
        box = BoundingBox(left=-10, right=30, top=5, bottom=-15)
        assert device_bbox(box, (100, 100)) == BBoxXYXY(90, 95, 130, 115)

    def test_coerce_tuple(self):
        assert bbox_from_xyxy_tuple((0, 1, 2, 3)) == BBoxXYXY(0, 1, 2, 3)
        assert bbox_from_xyxy_tuple("nope") is None
        assert bbox_from_xyxy_tuple(("a", 1, 2, 3)) is None

    @pytest.mark.parametrize(
        "measured, status",
        [((0, 0, 10, 10), "PASS"), ((0, 0, 11, 10), "WARN"), ((0, 0, 15, 10), "FAIL"), (None, "NO_GEOM")],
    )
    def test_status(self, measured, status):
        assert compare_bboxes((0, 0, 10, 10), measured)["status"] == status

    def test_missing_layout(self):
        assert compare_bboxes(None, (0, 0, 1, 1))["status"] == "NO_LAYOUT"

    def test_report_diff(self):
        report = compare_bboxes((0, 0, 10, 10), (1, 0, 10, 12))
        assert report["max_abs_err_px"] == 2.0
        assert report["diff"]["dw"] == -1.0
        assert report["diff"]["dh"] == 2.0


class TestCrossCheck:
    @pytest.fixture(autouse=True)
    def _needs_svgelements(self):
        pytest.importorskip("svgelements")

    @pytest.mark.parametrize(
        "image",
        [
            Circle(40),
            Rectangle(60, 20),
            Circle(10).beside(Rectangle(20, 10)),
            Circle(10).above(Triangle(30, 20)).at(15, -25),
        ],
        ids=["circle", "rect", "beside", "above-at"],
    )
    def test_layout_matches_measured_geometry(self, image, tmp_path):
        from doodle.geom.svgelements_bbox import cross_check_layout

        report = cross_check_layout(image, size_px=(300, 300), out_dir=tmp_path)
        assert report["status"] == "PASS", report

    def test_measure_missing_file(self, tmp_path):
        from doodle.geom.svgelements_bbox import measure_svg_bbox

        res = measure_svg_bbox(tmp_path / "missing.svg")
        assert res["available"] is True
        assert res["bbox"] is None
        assert "error" in res
