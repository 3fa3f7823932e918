"""
Export Functionality for StatCoach

Writes analysis results in the formats the CLI offers:
- JSON: the full result in wire shape (normalized stats, impacts,
  recommendations, narrative, display metrics)
- Text/Markdown: the coaching narrative only
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from statcoach import __version__
from statcoach.analysis.models import AnalysisResult

logger = logging.getLogger(__name__)

TEXT_FORMATS = ("txt", "text", "md", "markdown")


def export_to_json(
    result: AnalysisResult,
    output_path: Path | None = None,
    indent: int = 2,
    include_metadata: bool = True,
) -> str:
    """
    Export an analysis result to JSON.

    Args:
        result: Analysis to export
        output_path: Optional path to write the file
        indent: JSON indentation level
        include_metadata: Whether to include export metadata

    Returns:
        JSON string
    """
    export_data = result.to_dict()

    if include_metadata:
        export_data = {
            "_metadata": {
                "exported_at": datetime.now().isoformat(),
                "format": "statcoach_json",
                "version": __version__,
            },
            **export_data,
        }

    json_str = json.dumps(export_data, indent=indent, ensure_ascii=False)

    if output_path:
        output_path.write_text(json_str, encoding="utf-8")
        logger.info(f"Exported JSON to: {output_path}")

    return json_str


def export_to_text(result: AnalysisResult, output_path: Path | None = None) -> str:
    """Export the coaching narrative as plain text."""
    text = result.insights_text
    if output_path:
        output_path.write_text(text, encoding="utf-8")
        logger.info(f"Exported text to: {output_path}")
    return text


def export_analysis(
    result: AnalysisResult,
    output_path: Path,
    format: str | None = None,
    indent: int = 2,
) -> None:
    """
    Export an analysis result to the specified format.

    Format is detected from the file extension if not specified.

    Args:
        result: Analysis to export
        output_path: Path to write the export
        format: Optional format override (json, txt, md)
        indent: JSON indentation level

    Raises:
        ValueError: If the format is not supported
    """
    if format is None:
        format = output_path.suffix.lstrip(".").lower()

    if format == "json":
        export_to_json(result, output_path, indent=indent)
    elif format in TEXT_FORMATS:
        export_to_text(result, output_path)
    else:
        raise ValueError(f"Unsupported export format: {format}")
