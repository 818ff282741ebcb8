"""ConvertService: front matter extraction and markdown to HTML conversion.

Pipeline (strictly sequential, every failure aborts the run):
  read -> decode -> extract front matter -> write front matter
       -> strip -> render HTML -> write HTML

Outputs already written are left in place when a later stage fails.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from mdconv.domain.content import Document, dump_front_matter, parse_document
from mdconv.domain.frontmatter import FrontMatterError
from mdconv.domain.markdown import render_html
from mdconv.infrastructure.filesystem import read_document, resolve_path, write_output
from mdconv.services.base import BaseService
from mdconv.services.result import ServiceResult
from mdconv.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)

# Error codes, one per pipeline stage.
READ_FAILED = "READ_FAILED"
DECODE_FAILED = "DECODE_FAILED"
FRONT_MATTER_INVALID = "FRONT_MATTER_INVALID"
FRONT_MATTER_WRITE_FAILED = "FRONT_MATTER_WRITE_FAILED"
HTML_WRITE_FAILED = "HTML_WRITE_FAILED"


class _StageFailure(Exception):
    """Internal signal carrying the error code of the stage that failed."""

    def __init__(self, code: str, message: str, path: Path) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path


class ConvertService(BaseService):
    """Convert markdown documents with optional YAML front matter."""

    @traced
    def convert(
        self,
        input_path: str | Path,
        *,
        output_path: str | Path | None = None,
        front_matter_path: str | Path | None = None,
    ) -> ServiceResult:
        """Run the full pipeline for *input_path*.

        Relative *output_path* and *front_matter_path* are resolved under
        the configured public directory; when omitted, the configured
        defaults are used.
        """
        op = "convert"
        paths = self._settings.paths
        fm_settings = self._settings.front_matter
        public_dir = self._base_dir(paths.public_dir)

        source = self.resolve_input(input_path)
        html_target = resolve_path(output_path or paths.output, public_dir)
        fm_target = resolve_path(front_matter_path or paths.front_matter_output, public_dir)

        try:
            document = self._load(source)

            with trace_span("write_front_matter"):
                serialized = dump_front_matter(
                    document.front_matter,
                    fm_settings.format,
                    include_categories=fm_settings.include_categories,
                )
                self._write(fm_target, serialized, FRONT_MATTER_WRITE_FAILED, "front matter")
            log.debug("front_matter.written", path=str(fm_target), format=fm_settings.format)

            with trace_span("render_html") as span:
                html = render_html(
                    document.body,
                    preset=self._settings.markdown.preset,
                    html=self._settings.markdown.html,
                )
                if span:
                    span.annotate("bytes", len(html.encode("utf-8")))

            with trace_span("write_html"):
                self._write(html_target, html, HTML_WRITE_FAILED, "HTML")
            log.debug("html.written", path=str(html_target))
        except _StageFailure as exc:
            return ServiceResult.failure(op, exc.code, exc.message, path=str(exc.path))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": str(source),
                "output": str(html_target),
                "front_matter_output": str(fm_target),
                "has_front_matter": document.has_front_matter,
                "front_matter": document.front_matter.to_payload(
                    include_categories=fm_settings.include_categories
                ),
            },
        )

    @traced
    def extract(self, input_path: str | Path) -> ServiceResult:
        """Read and decode the front matter of *input_path* without writing anything."""
        op = "extract_front_matter"
        source = self.resolve_input(input_path)
        try:
            document = self._load(source)
        except _StageFailure as exc:
            return ServiceResult.failure(op, exc.code, exc.message, path=str(exc.path))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": str(source),
                "has_front_matter": document.has_front_matter,
                "front_matter": document.front_matter.to_payload(
                    include_categories=self._settings.front_matter.include_categories
                ),
            },
        )

    def resolve_input(self, input_path: str | Path) -> Path:
        """Resolve *input_path* under the configured content directory."""
        return resolve_path(input_path, self._base_dir(self._settings.paths.content_dir))

    # ── Stages ───────────────────────────────────────────────────────

    def _load(self, source: Path) -> Document:
        with trace_span("read"):
            try:
                text = read_document(source)
            except UnicodeDecodeError as exc:
                msg = f"Failed to decode {source} as UTF-8: {exc}"
                raise _StageFailure(DECODE_FAILED, msg, source) from exc
            except OSError as exc:
                msg = f"Failed to read {source}: {exc}"
                raise _StageFailure(READ_FAILED, msg, source) from exc
        log.debug("document.read", path=str(source), chars=len(text))

        with trace_span("parse_front_matter") as span:
            try:
                document = parse_document(text)
            except FrontMatterError as exc:
                msg = f"Failed to parse front matter in {source}: {exc}"
                raise _StageFailure(FRONT_MATTER_INVALID, msg, source) from exc
            if span:
                span.annotate("present", document.has_front_matter)
        log.debug("front_matter.extracted", present=document.has_front_matter)
        return document

    def _write(self, target: Path, text: str, code: str, label: str) -> None:
        try:
            write_output(target, text, create_parents=self._settings.paths.create_parents)
        except OSError as exc:
            msg = f"Failed to write {label} output to {target}: {exc}"
            raise _StageFailure(code, msg, target) from exc
