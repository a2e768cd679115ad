"""Pipeline orchestration: parse once, emit accessors then constructors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import GoBoilrConfig, OutputPaths, derive_output_paths, load_config
from .emit import EmissionEngine, EmitMode
from .logging import get_logger
from .models import ParsedFile
from .parsing import SourceModelBuilder


@dataclass
class RunOutcome:
    """Result of one generation run."""

    source: Path
    parsed: ParsedFile
    outputs: OutputPaths
    dry_run: bool = False

    @property
    def struct_count(self) -> int:
        return len(self.parsed.declarations)


class Orchestrator:
    """Runs the builder and the emission engine for a single input file."""

    def __init__(
        self,
        builder: SourceModelBuilder | None = None,
        engine: EmissionEngine | None = None,
    ) -> None:
        self.builder = builder or SourceModelBuilder()
        self.engine = engine or EmissionEngine()
        self.logger = get_logger("orchestrator")

    def run(
        self,
        source: Path,
        *,
        config: GoBoilrConfig | None = None,
        dry_run: bool = False,
    ) -> RunOutcome:
        config = config or load_config(source.parent)
        outputs = derive_output_paths(source, config.output)
        self.logger.info("Processing %s", source)

        parsed = self.builder.build(source)
        outcome = RunOutcome(source=source, parsed=parsed, outputs=outputs, dry_run=dry_run)
        if dry_run:
            self.logger.info("Dry run: skipping writes for %s", source.name)
            return outcome

        for mode, destination in (
            (EmitMode.ACCESSORS, outputs.accessors),
            (EmitMode.CONSTRUCTORS, outputs.constructors),
        ):
            self.engine.emit(parsed, destination, mode)
        return outcome


__all__ = ["Orchestrator", "RunOutcome"]
