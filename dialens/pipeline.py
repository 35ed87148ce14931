"""
Main Pipeline Module
Orchestrates the lens workflow:
Matching → Extraction → Classification → Risk window → Rendering → Injection
"""

from typing import Any, Dict, List, Optional
import logging
from pathlib import Path
from datetime import datetime

from .config import Config
from .classification import CategoryClassifier
from .document import BeautifulSoupProvider, DocumentProvider
from .exceptions import LensError, RenderingFailure
from .extraction import AnnotationExtractor
from .language import LanguageResolver
from .matching import DocumentMatcher, entries_of, load_document
from .models import LensResult, LensStatus
from .profiles import ProfileResolver, RiskWindowEstimator
from .rendering import PanelRenderer
from .utils import load_json, load_text, save_json, save_text

logger = logging.getLogger(__name__)


class HypoLens:
    """Hypoglycaemia risk lens for insulin ePIs."""

    def __init__(self, config=Config, document_provider: Optional[DocumentProvider] = None):
        self.config = config

        self.matcher = DocumentMatcher(config)
        self.language_resolver = LanguageResolver(config)
        self.extractor = AnnotationExtractor(config)
        self.classifier = CategoryClassifier()
        self.profile_resolver = ProfileResolver(config)
        self.estimator = RiskWindowEstimator()
        self.renderer = PanelRenderer(config)
        self.document_provider = document_provider or BeautifulSoupProvider()

    def get_specification(self) -> str:
        return self.config.SPECIFICATION

    def enhance(self, document: Any, html: str) -> str:
        """Return the HTML with the risk panel injected, or unchanged when out of scope."""
        return self.apply(document, html).html

    def apply(self, document: Any, html: str) -> LensResult:
        """
        Run the lens on one ePI.

        Args:
            document: ePI bundle (dict or JSON string)
            html: rendered ePI HTML

        Returns:
            LensResult with status ENHANCED or OUT_OF_SCOPE

        Raises:
            InvalidDocument, NoCompositionFound, RenderingFailure
        """
        try:
            return self._apply(document, html)
        except LensError as e:
            logger.error(f"Lens failed: {e}")
            raise

    def _apply(self, document: Any, html: str) -> LensResult:
        document = load_document(document)
        entries_of(document)
        self.extractor.compositions(document)

        # Stage 1: Matching
        if not self.matcher.matches(document):
            logger.info("ePI out of scope, returning HTML unchanged")
            return LensResult(html=html, status=LensStatus.OUT_OF_SCOPE)

        # Stage 2: Extraction + classification
        annotations = self.extractor.extract_annotations(document)
        risk_profile = self.classifier.classify(annotations)

        # Stage 3: Risk windows, only without textual annotations
        timelines = ()
        if risk_profile.is_empty:
            profiles = self.profile_resolver.resolve(document)
            timelines = self.estimator.timelines(profiles)

        # Stage 4: Rendering
        language = self.language_resolver.resolve_language(document)
        panel = self.renderer.render(risk_profile, language, timelines)

        # Stage 5: Injection
        dom = self.document_provider.from_html(html or "")
        dom.insert_first(panel.markup)
        output = dom.serialize()
        if not output or not output.strip():
            raise RenderingFailure("Serialized HTML is empty after injecting the panel")

        return LensResult(
            html=output,
            status=LensStatus.ENHANCED,
            language=panel.language,
            annotations=len(annotations),
            timelines=tuple(timeline.profile.id for timeline in timelines),
        )

    def process_batch(self, input_dir: str,
                      output_dir: Optional[str] = None) -> List[Dict]:
        """
        Run the lens on every <name>.json + <name>.html pair of a directory.

        Args:
            input_dir: Directory containing ePI JSON and HTML files
            output_dir: Directory for enhanced HTML files

        Returns:
            List of per-document results
        """
        input_dir = Path(input_dir)
        output_dir = Path(output_dir) if output_dir else input_dir / "enhanced"
        output_dir.mkdir(exist_ok=True, parents=True)

        epi_files = sorted(input_dir.glob("*.json"))
        logger.info(f"Found {len(epi_files)} ePI files to process")

        results = []
        for epi_path in epi_files:
            html_path = epi_path.with_suffix(".html")
            record = {"epi": str(epi_path), "timestamp": datetime.now().isoformat()}

            document = load_json(str(epi_path))
            html = load_text(str(html_path)) if html_path.exists() else ""
            if document is None or html is None:
                record.update(status="failed", error="could not read input files")
                results.append(record)
                continue

            try:
                result = self.apply(document, html)
            except LensError as e:
                record.update(status="failed", error=str(e), error_type=type(e).__name__)
                results.append(record)
                continue

            output_file = output_dir / f"{epi_path.stem}.html"
            save_text(result.html, str(output_file))
            record.update(
                status=result.status.value,
                language=result.language,
                annotations=result.annotations,
                output=str(output_file),
            )
            results.append(record)

        summary = self._generate_batch_summary(results)
        summary_file = output_dir / "batch_summary.json"
        save_json(summary, str(summary_file))
        logger.info(f"Batch processing complete. Summary saved to: {summary_file}")

        return results

    def _generate_batch_summary(self, results: List[Dict]) -> Dict:
        """Generate summary statistics for batch processing."""
        return {
            "specification": self.get_specification(),
            "total_documents": len(results),
            "enhanced": sum(1 for r in results if r.get("status") == LensStatus.ENHANCED.value),
            "out_of_scope": sum(1 for r in results if r.get("status") == LensStatus.OUT_OF_SCOPE.value),
            "failed": sum(1 for r in results if r.get("status") == "failed"),
            "results": results,
        }
