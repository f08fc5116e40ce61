"""Tests for ConvertService."""

from __future__ import annotations

from zenkaku.domain.registry import SchemeRegistry, build_default_registry
from zenkaku.domain.schemes import Scheme
from zenkaku.services.convert import ConvertService


class TestConvert:
    def test_encode_lines(self, registry: SchemeRegistry) -> None:
        result = ConvertService(registry).convert(["Room 204", "no digits"], "fullwidth")
        assert result.ok
        assert result.op == "encode"
        assert result.data == {
            "scheme": "fullwidth",
            "lines": ["Room ２０４", "no digits"],
            "count": 2,
        }

    def test_decode_lines(self, registry: SchemeRegistry) -> None:
        result = ConvertService(registry).convert(["⓪①", "②"], "circle", reverse=True)
        assert result.ok
        assert result.op == "decode"
        assert result.data["lines"] == ["01", "2"]

    def test_lines_processed_independently_in_order(self, registry: SchemeRegistry) -> None:
        lines = [str(i) for i in range(10)]
        result = ConvertService(registry).convert(lines, "chinese")
        assert result.data["lines"] == list("〇一二三四五六七八九")

    def test_accepts_generator(self, registry: SchemeRegistry) -> None:
        result = ConvertService(registry).convert((s for s in ["1", "2"]), "thai")
        assert result.data["lines"] == ["๑", "๒"]

    def test_empty_input(self, registry: SchemeRegistry) -> None:
        result = ConvertService(registry).convert([], "roman")
        assert result.ok
        assert result.data["lines"] == []
        assert result.data["count"] == 0

    def test_unknown_scheme(self, registry: SchemeRegistry) -> None:
        result = ConvertService(registry).convert(["123"], "not-a-real-scheme")
        assert not result.ok
        assert result.op == "encode"
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == "UNKNOWN_SCHEME"
        assert "not-a-real-scheme" in result.error.message
        assert result.error.detail["available"] == registry.list_names()

    def test_unknown_scheme_reverse_op(self, registry: SchemeRegistry) -> None:
        result = ConvertService(registry).convert(["x"], "nope", reverse=True)
        assert not result.ok
        assert result.op == "decode"

    def test_surrogate_escaped_input_survives(self, registry: SchemeRegistry) -> None:
        line = b"7\xff".decode("utf-8", "surrogateescape")
        result = ConvertService(registry).convert([line], "fullwidth")
        out = result.data["lines"][0].encode("utf-8", "surrogateescape")
        assert out == "７".encode() + b"\xff"


class TestListSchemes:
    def test_builtin_listing(self, registry: SchemeRegistry) -> None:
        result = ConvertService(registry).list_schemes()
        assert result.ok
        assert result.op == "list_schemes"
        assert result.data["count"] == 5
        names = [item["name"] for item in result.data["items"]]
        assert names == ["chinese", "circle", "fullwidth", "roman", "thai"]

    def test_item_shape(self, registry: SchemeRegistry) -> None:
        items = ConvertService(registry).list_schemes().data["items"]
        circle = next(item for item in items if item["name"] == "circle")
        assert circle["glyphs"] == "⓪①②③④⑤⑥⑦⑧⑨"
        assert circle["description"]

    def test_includes_extra_schemes(self) -> None:
        extra = Scheme(name="superscript", glyphs=tuple("⁰¹²³⁴⁵⁶⁷⁸⁹"), description="Sup")
        registry = build_default_registry([extra])
        items = ConvertService(registry).list_schemes().data["items"]
        assert {"name": "superscript", "glyphs": "⁰¹²³⁴⁵⁶⁷⁸⁹", "description": "Sup"} in items
