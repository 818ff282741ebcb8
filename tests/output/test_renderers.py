"""Tests for Rich renderers of ServiceResult."""

from mdconv.output.renderers import THEME, render_quiet, render_result
from mdconv.services.result import ServiceError, ServiceResult

FRONT_MATTER = {"title": "Test", "date": "2024-01-01", "categories": [], "tags": ["a", "b"]}


class TestRenderConvert:
    def test_fields_and_front_matter(self) -> None:
        result = ServiceResult(
            ok=True,
            op="convert",
            data={
                "input": "content/hello.md",
                "output": "public/output.html",
                "front_matter_output": "public/frontmatter/front_matter_output.json",
                "has_front_matter": True,
                "front_matter": FRONT_MATTER,
            },
        )
        output = render_result(result)
        assert output.startswith("OK  convert")
        assert "input: content/hello.md" in output
        assert "output: public/output.html" in output
        assert "front_matter_output: public/frontmatter/front_matter_output.json" in output
        assert "title: Test" in output
        assert "tags: a, b" in output


class TestRenderExtract:
    def test_notes_missing_block(self) -> None:
        result = ServiceResult(
            ok=True,
            op="extract_front_matter",
            data={"input": "x.md", "has_front_matter": False, "front_matter": FRONT_MATTER},
        )
        output = render_result(result)
        assert "no front matter block" in output
        assert "date: 2024-01-01" in output

    def test_block_present(self) -> None:
        result = ServiceResult(
            ok=True,
            op="extract_front_matter",
            data={"input": "x.md", "has_front_matter": True, "front_matter": FRONT_MATTER},
        )
        assert "no front matter block" not in render_result(result)


class TestRenderGeneric:
    def test_unknown_op(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"count": 3})
        output = render_result(result)
        assert "OK  other" in output
        assert "count: 3" in output


class TestRenderError:
    def _error(self) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op="convert",
            error=ServiceError(
                code="READ_FAILED",
                message="Failed to read [missing].md: [Errno 2] No such file",
                detail={"path": "[missing].md"},
            ),
        )

    def test_message_rendered_literally(self) -> None:
        output = render_result(self._error())
        assert output.startswith("ERROR  convert: ")
        assert "[missing].md" in output
        assert "[Errno 2]" in output
        assert "READ_FAILED" not in output

    def test_verbose_shows_code_and_detail(self) -> None:
        output = render_result(self._error(), verbose=True)
        assert "code: READ_FAILED" in output
        assert "path: [missing].md" in output

    def test_quiet(self) -> None:
        assert render_quiet(self._error()).startswith("ERROR: convert: Failed to read")


class TestRenderMeta:
    def test_telemetry_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="convert",
            data={"front_matter": FRONT_MATTER},
            meta={
                "telemetry": {
                    "name": "ConvertService.convert",
                    "duration_ms": 1.5,
                    "children": [
                        {"name": "render_html", "duration_ms": 0.4, "annotations": {"bytes": 15}}
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "ConvertService.convert" in output
        assert "render_html  (bytes=15)" in output

    def test_meta_hidden_when_not_verbose(self) -> None:
        result = ServiceResult(
            ok=True,
            op="convert",
            data={"front_matter": FRONT_MATTER},
            meta={"telemetry": {"name": "x", "duration_ms": 1.0}},
        )
        assert "meta:" not in render_result(result)


class TestConsole:
    def test_no_ansi_outside_terminal(self) -> None:
        output = render_result(ServiceResult(ok=True, op="convert", data={"input": "a.md"}))
        assert "\x1b[" not in output

    def test_long_paths_not_wrapped(self) -> None:
        path = "public/" + "nested/" * 12 + "output.html"
        output = render_result(ServiceResult(ok=True, op="convert", data={"output": path}))
        assert f"output: {path}" in output

    def test_theme_covers_status_styles(self) -> None:
        assert {"mdconv.ok", "mdconv.error", "mdconv.op"} <= set(THEME.styles)
