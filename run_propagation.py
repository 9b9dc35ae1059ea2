"""
Batch runner for the Similar Text Span Propagator.

Reads:
  - every *.json document payload in settings.INPUT_DIR

Produces:
  - one payload per successfully processed document in settings.OUTPUT_DIR,
    with the new annotations
  - propagation_summary.json in settings.OUTPUT_DIR, one entry per input
    file, failed documents included
"""
import json
import logging
import sys
from pathlib import Path
from typing import List, Tuple

from jsonschema import validate

from src.config import settings
from src.config.schemas import PROPAGATION_OUTPUT_SCHEMA
from src.document_io.json_codec import document_from_payload, document_to_payload
from src.models.document import AnnotatedDocument
from src.models.propagation_result import PropagationResult
from src.models.propagator_config import PropagatorConfig
from src.span_propagation.errors import PropagationError
from src.span_propagation.pipeline import propagate_corpus

logger = logging.getLogger("run_propagation")

SUMMARY_FILE_NAME = "propagation_summary.json"


def load_documents(
    input_files: List[Path],
) -> Tuple[List[Tuple[Path, AnnotatedDocument]], List[PropagationResult]]:
    """
    Parse every payload file.

    Returns:
        (loaded (path, document) pairs, failed results for unreadable payloads).
    """
    loaded: List[Tuple[Path, AnnotatedDocument]] = []
    failed: List[PropagationResult] = []

    for path in input_files:
        try:
            with open(path, encoding="utf-8") as f:
                loaded.append((path, document_from_payload(f.read())))
        except (PropagationError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logger.error("Cannot load %s: %s", path.name, e)
            failed.append(PropagationResult.failed(path.stem, e))

    return loaded, failed


def run_batch(input_dir: Path, output_dir: Path, config: PropagatorConfig) -> List[dict]:
    """
    Propagate spans over every payload in *input_dir*.

    Writes one payload per succeeded document plus the summary file to
    *output_dir*, and returns the summary entries.
    """
    input_files = sorted(input_dir.glob("*.json"))
    logger.info("input directory   : %s", input_dir)
    logger.info("documents         : %d", len(input_files))

    loaded, failed = load_documents(input_files)
    results = propagate_corpus([document for _, document in loaded], config)

    output_dir.mkdir(parents=True, exist_ok=True)

    summary: List[dict] = []
    for (path, document), result in zip(loaded, results):
        if result.succeeded:
            with open(output_dir / path.name, "w", encoding="utf-8") as f:
                json.dump(document_to_payload(document), f, ensure_ascii=False, indent=2)
        summary.append(result.to_dict())

    summary.extend(r.to_dict() for r in failed)
    for entry in summary:
        validate(instance=entry, schema=PROPAGATION_OUTPUT_SCHEMA)

    with open(output_dir / SUMMARY_FILE_NAME, "w", encoding="utf-8") as f:
        json.dump(summary, f, ensure_ascii=False, indent=2)

    logger.info(
        "Annotations created: %d, failed documents: %d",
        sum(e["processing_metadata"]["annotations_created"] for e in summary),
        sum(1 for e in summary if e["error"] is not None),
    )
    logger.info("Output saved to   : %s", output_dir)
    return summary


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stdout,
    )

    config = PropagatorConfig.from_settings()
    logger.info("parameters        : %s", config.to_params())

    output_dir = Path(settings.OUTPUT_DIR)
    summary = run_batch(Path(settings.INPUT_DIR), output_dir, config)

    print("\n" + "=" * 70)
    print("SPAN PROPAGATION — SUMMARY")
    print("=" * 70)
    for entry in summary:
        meta = entry["processing_metadata"]
        if entry["error"] is not None:
            print(f"  {entry['document_id']:30s} FAILED: {entry['error']}")
        else:
            print(
                f"  {entry['document_id']:30s} sources={meta['sources_scanned']:<5d} "
                f"suppressed={meta['duplicates_suppressed']:<5d} created={meta['annotations_created']}"
            )
    print("=" * 70)
    print(f"Output: {output_dir}")
    print("=" * 70 + "\n")


if __name__ == "__main__":
    main()
