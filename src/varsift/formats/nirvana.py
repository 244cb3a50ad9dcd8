"""Nirvana annotated JSON reader.

ARCHITECTURE:
    Nirvana JSON(.gz) → NirvanaHeader + NirvanaPosition[] → VariantCall[]

Loads the whole file into memory and converts each annotated position into
a VariantCall ready for filtering.

Key Design:
- Gzip detected from the magic bytes, so plain JSON is accepted too
- Schema validation through pydantic models with Nirvana field aliases
- Any structural problem aborts the whole run with NirvanaParseError naming
  the file and position index; there is no skip-and-continue
- Positions without annotated variants are skipped (reference-only sites)
"""

import gzip
import json
import logging
import zlib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from varsift.constants import GNOMAD_EXOME_SOURCE, GNOMAD_SOURCE, ONEKG_SOURCE, PASS_FILTER
from varsift.formats.nirvana_models import NirvanaHeader, NirvanaPosition, NirvanaVariant
from varsift.models.variant import PopulationFrequency, VariantCall

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


class NirvanaParseError(Exception):
    """Exception raised for unreadable or malformed Nirvana input."""

    pass


def parse_nirvana_json(path: str | Path) -> tuple[NirvanaHeader, list[VariantCall]]:
    """Parse a Nirvana JSON file into variant calls.

    Args:
        path: Path to a ``.json.gz`` or ``.json`` Nirvana file

    Returns:
        Tuple of (header, variant calls in file order)

    Raises:
        NirvanaParseError: If the file cannot be read or does not follow the schema
    """
    path = Path(path)

    if not path.exists():
        raise NirvanaParseError(f"Input file does not exist: {path}")

    data = _load_json(path)

    if not isinstance(data, dict) or "header" not in data:
        raise NirvanaParseError(f"No header found in {path}")

    try:
        header = NirvanaHeader.model_validate(data["header"])
    except ValidationError as e:
        raise NirvanaParseError(f"Failed to parse header in {path}: {e}") from e

    positions = data.get("positions")
    if positions is None:
        raise NirvanaParseError(f"No positions found in {path}")
    if not isinstance(positions, list):
        raise NirvanaParseError(f"Positions is not an array in {path}")

    variant_calls = []
    for idx, position_data in enumerate(positions):
        try:
            variant_call = parse_position(position_data)
        except (ValidationError, ValueError) as e:
            preview = json.dumps(position_data)[:500]
            raise NirvanaParseError(
                f"Failed to parse position {idx} in {path}: {e}\nJSON preview: {preview}"
            ) from e
        if variant_call is not None:
            variant_calls.append(variant_call)

    logger.info(
        f"Parsed {len(variant_calls)} variant positions from {path} "
        f"({header.genome_assembly}, {header.annotator})"
    )
    return header, variant_calls


def _load_json(path: Path) -> Any:
    try:
        with open(path, "rb") as f:
            is_gzip = f.read(2) == GZIP_MAGIC

        if is_gzip:
            logger.info(f"Decompressing {path}...")
            with gzip.open(path, "rt", encoding="utf-8") as f:
                return json.load(f)

        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    except json.JSONDecodeError as e:
        raise NirvanaParseError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, EOFError, UnicodeDecodeError, zlib.error) as e:
        raise NirvanaParseError(f"Failed to read {path}: {e}") from e


def parse_position(position_data: dict[str, Any]) -> VariantCall | None:
    """Validate one position and convert it to a VariantCall.

    Returns:
        VariantCall, or None if the position has no annotated variants

    Raises:
        ValidationError: If the position does not match the schema
        ValueError: If the position has no alternate allele
    """
    position = NirvanaPosition.model_validate(position_data)
    return position_to_variant_call(position)


def position_to_variant_call(position: NirvanaPosition) -> VariantCall | None:
    """Convert a validated position, applying input defaults.

    Only the first alternate allele and its annotation block are used.
    Filters default to PASS when absent; depth and VAF come from the first sample.
    """
    if not position.variants:
        return None

    if not position.alt_alleles:
        raise ValueError(
            f"No alternate alleles found at {position.chromosome}:{position.position}"
        )

    variant = position.variants[0]
    sample = position.samples[0] if position.samples else None

    return VariantCall(
        chromosome=position.chromosome,
        start=position.position,
        end=position.position,
        reference_allele=position.ref_allele,
        alternate_allele=position.alt_alleles[0],
        variant_type=variant.variant_type,
        filters=position.filters or [PASS_FILTER],
        total_depth=sample.total_depth if sample else None,
        variant_frequencies=sample.variant_frequencies if sample else None,
        transcripts=variant.transcripts,
        clinvar=variant.clinvar,
        cosmic=variant.cosmic,
        population_frequencies=extract_population_frequencies(variant),
        dbsnp_ids=variant.dbsnp,
        primate_ai_3d=variant.primate_ai_3d[0].score if variant.primate_ai_3d else None,
        primate_ai=variant.primate_ai[0].score_percentile if variant.primate_ai else None,
        revel_score=variant.revel.score if variant.revel else None,
        dann_score=variant.dann_score,
    )


def extract_population_frequencies(variant: NirvanaVariant) -> list[PopulationFrequency]:
    """Collect gnomAD, gnomAD-exome and 1000 Genomes frequency blocks."""
    blocks = (
        (GNOMAD_SOURCE, variant.gnomad),
        (GNOMAD_EXOME_SOURCE, variant.gnomad_exome),
        (ONEKG_SOURCE, variant.one_kg),
    )

    frequencies = []
    for source, block in blocks:
        if block is None:
            continue
        frequencies.append(PopulationFrequency.model_validate({**block, "source": source}))
    return frequencies
