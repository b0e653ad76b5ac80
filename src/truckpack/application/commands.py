"""Application commands (use cases) for pack analysis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from truckpack.application.config import (
    PackDocument,
    config_to_catalog,
    config_to_pack,
    load_pack_document,
)
from truckpack.application.presets import PresetManager
from truckpack.domain.entities import Catalog, Pack
from truckpack.domain.services import LoadAnalysisService, LoadReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisOutput:
    """Result of analyzing one pack document.

    Attributes:
        pack: The pack snapshot that was analyzed.
        catalog: Catalog used to resolve instances.
        report: Every derived output for the snapshot.
    """

    pack: Pack
    catalog: Catalog
    report: LoadReport


class AnalyzePackCommand:
    """Command to analyze a pack document.

    Converts the document into domain entities and runs the
    LoadAnalysisService on the resulting snapshot.
    """

    def __init__(
        self,
        analysis_service: LoadAnalysisService | None = None,
        preset_manager: PresetManager | None = None,
    ) -> None:
        self.analysis_service = analysis_service or LoadAnalysisService()
        self.preset_manager = preset_manager or PresetManager()

    def execute(self, document: PackDocument) -> AnalysisOutput:
        """Analyze a validated pack document.

        Args:
            document: Validated pack document.

        Returns:
            AnalysisOutput with the pack, catalog and report.

        Raises:
            ConfigError: If the document names an unknown preset.
        """
        pack = config_to_pack(document, presets=self.preset_manager)
        catalog = config_to_catalog(document)
        report = self.analysis_service.analyze(pack, catalog)

        stats = report.stats
        logger.info(
            f"Analyzed {stats.total_count} instance(s): {stats.packed_count} packed, "
            f"{len(report.oog_warnings)} out of gauge, "
            f"{len(report.pallet_warnings)} overloaded pallet(s)"
        )
        return AnalysisOutput(pack=pack, catalog=catalog, report=report)

    def execute_file(self, path: Path) -> AnalysisOutput:
        """Load a pack document from disk and analyze it.

        Raises:
            ConfigError: If the file cannot be loaded or validated.
        """
        return self.execute(load_pack_document(path))
