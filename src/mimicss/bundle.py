"""Bundle integration: run the minification phases over a set of build artifacts."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Iterable

from mimicss.config import MinifierConfig
from mimicss.errors import ParseError
from mimicss.minifier import ClassMinifier
from mimicss.model.artifact import Artifact, ArtifactKind

__all__ = ["BundleResult", "minify_bundle"]

log = logging.getLogger("mimicss")


@dataclass
class BundleResult:
    """Outcome of one bundle pass.

    Attributes:
        artifacts: The input artifacts, rewritten in place, plus the class map
            artifact when it was requested.
        class_count: Number of entries in the class map.
        mapping: Original -> rewritten class names.
        skipped: Names of program chunks left unmodified because they failed
            to parse.
    """

    artifacts: list[Artifact]
    class_count: int = 0
    mapping: dict[str, str] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)


def minify_bundle(
    artifacts: Iterable[Artifact],
    config: MinifierConfig | None = None,
    minifier: ClassMinifier | None = None,
) -> BundleResult:
    """Minify class names across *artifacts*.

    All stylesheets are extracted together, so one class map covers the whole
    bundle. A stylesheet that cannot be parsed aborts the pass with
    ParseError; a program chunk that cannot be parsed is left as it was.
    """
    config = config or MinifierConfig()
    minifier = minifier or ClassMinifier(config.options())
    artifacts = list(artifacts)
    stylesheets = [a for a in artifacts if a.kind is ArtifactKind.STYLESHEET]
    programs = [a for a in artifacts if a.kind is ArtifactKind.PROGRAM]

    for chunk in programs:
        if not minifier.analyze_js(chunk.text):
            log.debug("Skipping usage analysis of %s: not parseable", chunk.name)

    minifier.extract_from_css("\n".join(sheet.text for sheet in stylesheets))
    log.info("Found %d classes in %d stylesheet(s)", minifier.get_class_count(), len(stylesheets))

    for sheet in stylesheets:
        sheet.text = minifier.transform_css(sheet.text)
        log.info("Rewrote stylesheet %s", sheet.name)

    result = BundleResult(artifacts=artifacts)
    for chunk in programs:
        try:
            chunk.text = minifier.transform_js(chunk.text)
        except ParseError as exc:
            log.warning("Left %s unmodified: %s", chunk.name, exc)
            result.skipped.append(chunk.name)
            continue
        log.info("Rewrote program %s", chunk.name)

    result.mapping = minifier.get_mapping()
    result.class_count = minifier.get_class_count()
    if config.verbose:
        artifacts.append(
            Artifact(
                name=config.map_file,
                kind=ArtifactKind.OTHER,
                text=json.dumps(result.mapping, indent=2),
            )
        )
    return result
