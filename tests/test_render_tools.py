"""Tests for the render MCP tools."""
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

SMALL = dict(north=0.01, south=0.0, east=0.01, west=0.0)


def _register_and_get(tool_name: str):
    """Register render tools against a mock MCP and extract the named tool."""
    from map_vector_forge.tools.render import register_render_tools
    tools = {}
    mock_mcp = MagicMock()
    def capture(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn
        return decorator
    mock_mcp.tool = capture
    register_render_tools(mock_mcp)
    return tools[tool_name]


@pytest.fixture
def geojson_path(tmp_path):
    path = tmp_path / "area.geojson"
    path.write_text(json.dumps({
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "LineString", "coordinates": [[0.001, 0.001], [0.009, 0.009]]},
                "properties": {"tags": {"highway": "residential"}},
            },
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [0.005, 0.005]},
                "properties": {"tags": {"amenity": "cafe"}},
            },
        ],
    }))
    return str(path)


class TestDescribeArea:
    def test_reports_area_and_zoom(self):
        describe_area = _register_and_get("describe_area")
        result = json.loads(describe_area(north=37.80, south=37.75, east=-122.40, west=-122.45))
        assert result["exceeds_export_limit"] is False
        assert result["area"] == "0.0025°²"
        assert 5 <= result["suggested_zoom"] <= 19

    def test_flags_large_area(self):
        describe_area = _register_and_get("describe_area")
        result = json.loads(describe_area(north=48.0, south=47.0, east=-121.0, west=-122.0))
        assert result["exceeds_export_limit"] is True

    def test_invalid_bounds(self):
        describe_area = _register_and_get("describe_area")
        result = describe_area(north=47.0, south=48.0, east=-121.0, west=-122.0)
        assert result.startswith("Error:")


class TestRenderSvg:
    def test_returns_svg(self, geojson_path):
        render_svg = _register_and_get("render_svg")
        svg = render_svg(geojson_path=geojson_path, **SMALL)
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert '<g class="layer-roads"><path d=' in svg
        assert "<circle" not in svg

    def test_stroke_multiplier_applied(self, geojson_path):
        render_svg = _register_and_get("render_svg")
        svg = render_svg(geojson_path=geojson_path, roads=1.5, **SMALL)
        assert ".layer-roads{fill:none;stroke:#555555;stroke-width:2.4;" in svg

    def test_refuses_large_area(self, geojson_path):
        render_svg = _register_and_get("render_svg")
        result = render_svg(geojson_path=geojson_path, north=48.0, south=47.0, east=-121.0, west=-122.0)
        assert result.startswith("Error:")
        assert "Zoom in" in result

    def test_missing_file(self, tmp_path):
        render_svg = _register_and_get("render_svg")
        result = render_svg(geojson_path=str(tmp_path / "missing.geojson"), **SMALL)
        assert result.startswith("Error:")
        assert "not found" in result

    def test_refuses_empty_north_south_extent(self, geojson_path):
        render_svg = _register_and_get("render_svg")
        result = render_svg(geojson_path=geojson_path, north=0.0, south=0.0, east=0.01, west=0.0)
        assert result.startswith("Error: Invalid bounds")

    def test_invalid_multiplier(self, geojson_path):
        render_svg = _register_and_get("render_svg")
        result = render_svg(geojson_path=geojson_path, water=0.0, **SMALL)
        assert result.startswith("Error: Invalid options")


class TestPreviewSvg:
    def test_includes_points(self, geojson_path):
        preview_svg = _register_and_get("preview_svg")
        svg = preview_svg(geojson_path=geojson_path, point_radius=2.5, **SMALL)
        assert '<g class="geom-points"><circle' in svg
        assert 'r="2.5"' in svg


class TestExportSvg:
    def test_writes_file(self, geojson_path, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        export_svg = _register_and_get("export_svg")
        out = tmp_path / "exports" / "map.svg"
        result = export_svg(geojson_path=geojson_path, output_path=str(out), **SMALL)
        assert result.startswith("SVG map exported to")
        assert out.read_text(encoding="utf-8").endswith("</svg>")

    def test_refuses_path_outside_home(self, geojson_path, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
        export_svg = _register_and_get("export_svg")
        out = tmp_path / "map.svg"
        result = export_svg(geojson_path=geojson_path, output_path=str(out), **SMALL)
        assert result.startswith("Error:")
        assert not out.exists()
