"""Generation of the build file and PHPUnit configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from jinja2 import Environment
from loguru import logger
from rich.console import Console

from . import settings as s
from .rendering import create_environment, render_template
from .settings import SettingsStore


@dataclass(slots=True, frozen=True)
class Artifact:
    """A generated file written when any of ``requires`` is enabled."""

    name: str
    template: str
    filename: str
    requires: Tuple[str, ...]
    message: str

    def is_required(self, settings: SettingsStore) -> bool:
        return settings.any_enabled(*self.requires)


PHPUNIT_CONFIG = Artifact(
    name="phpunit",
    template="phpunit.xml.dist",
    filename="phpunit.xml",
    requires=(s.ENABLE_PHP_UNIT,),
    message="Config file for PHPUnit written",
)

BUILD_FILE = Artifact(
    name="build",
    template="build.xml.dist",
    filename="build.xml",
    requires=(
        s.ENABLE_PHP_CS_FIXER,
        s.ENABLE_PHP_MESS_DETECTOR,
        s.ENABLE_PHP_COPY_PASTE_DETECTION,
        s.ENABLE_PHP_CODE_SNIFFER,
        s.ENABLE_PHP_UNIT,
        s.ENABLE_PHP_LINT,
    ),
    message="Ant build file written",
)

ARTIFACTS: Tuple[Artifact, ...] = (PHPUNIT_CONFIG, BUILD_FILE)


class ArtifactWriter:
    """Render artifacts from the final settings and write them to the project root.

    Existing files are overwritten without backup.
    """

    def __init__(
        self,
        project_root: Path,
        *,
        environment: Optional[Environment] = None,
        console: Optional[Console] = None,
        artifacts: Sequence[Artifact] = ARTIFACTS,
    ) -> None:
        self.project_root = project_root
        self.environment = environment or create_environment()
        self.console = console or Console()
        self.artifacts = tuple(artifacts)

    def destination(self, artifact: Artifact) -> Path:
        return self.project_root / artifact.filename

    def write_artifact(self, artifact: Artifact, settings: SettingsStore) -> Optional[Path]:
        if not artifact.is_required(settings):
            logger.debug("Skipping {}: none of {} enabled", artifact.filename, ", ".join(artifact.requires))
            return None

        content = render_template(self.environment, artifact.template, settings.all())
        path = self.destination(artifact)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote {} ({} bytes)", path, len(content))
        self.console.print(artifact.message)
        return path

    def write(self, settings: SettingsStore) -> List[Path]:
        written: List[Path] = []
        for artifact in self.artifacts:
            path = self.write_artifact(artifact, settings)
            if path is not None:
                written.append(path)
        return written


__all__ = ["Artifact", "ArtifactWriter", "ARTIFACTS", "BUILD_FILE", "PHPUNIT_CONFIG"]
