"""Core filtering engine.

ARCHITECTURE:
    VariantCall → QualityGate → ClinVarResolver + PredictiveScorer → DecisionFuser → AnnotationMapper → MAFRecord

Runs the filtering stages for each call and reduces per-worker statistics.

Key Design:
- Each call is processed independently end to end; stages are pure functions
- Quality failures short-circuit before any evidence is assessed
- Batches are split into chunks and mapped over a process pool; with a single
  worker everything runs in-process
- Every chunk returns its records plus a partial FilterStats, merged after the
  parallel stage (no shared mutable state, no locks)
"""

import logging
from collections.abc import Callable, Iterator
from concurrent.futures import ProcessPoolExecutor
from functools import reduce

from pydantic import BaseModel, Field

from varsift.filters.clinvar import assess_clinvar_pathogenicity
from varsift.filters.decision import make_filter_decision
from varsift.filters.predictive import assess_predictive_scores
from varsift.filters.quality import apply_quality_filters
from varsift.models.assessment import (
    ClinVarVerdict,
    Decision,
    EvidenceSource,
    PathogenicityClass,
    PredictiveVerdict,
    QualityFailure,
    QualityVerdict,
)
from varsift.models.config import FilterConfig
from varsift.models.maf import MAFRecord
from varsift.models.stats import FilterStats
from varsift.models.variant import VariantCall
from varsift.utils.annotation_mapping import AnnotationMapper

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000

_FAILURE_COUNTERS = {
    QualityFailure.FILTER: "failed_filter",
    QualityFailure.DEPTH: "failed_depth",
    QualityFailure.VAF: "failed_vaf",
    QualityFailure.POPULATION_AF: "failed_af",
}


class VariantOutcome(BaseModel):
    """Everything the engine concluded about one call."""

    quality: QualityVerdict
    clinvar: ClinVarVerdict | None = None
    predictive: PredictiveVerdict | None = None
    decision: Decision | None = None
    record: MAFRecord | None = None
    stats: FilterStats = Field(default_factory=FilterStats)


class BatchResult(BaseModel):
    """Records and merged statistics for a batch of calls."""

    records: list[MAFRecord] = Field(default_factory=list)
    stats: FilterStats = Field(default_factory=FilterStats)


class FilterEngine:
    """Engine applying the filtering stages to variant calls."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        self.config = config or FilterConfig()

    def process_variant(self, variant: VariantCall) -> VariantOutcome:
        """Run all stages for a single call.

        Never raises for data reasons: a call that cannot be included simply
        yields an outcome without a record.
        """
        quality = apply_quality_filters(variant, self.config)
        if not quality.passed:
            logger.debug(f"{variant.to_locus()}: quality failure: {quality.failure_reason}")
            return VariantOutcome(quality=quality, stats=tally_quality_failure(quality))

        clinvar = assess_clinvar_pathogenicity(variant.clinvar)
        predictive = assess_predictive_scores(variant, self.config)
        decision = make_filter_decision(clinvar, predictive, self.config.exclude_benign)

        record = None
        if decision.should_include:
            record = AnnotationMapper.variant_to_maf(variant, decision)

        logger.debug(f"{variant.to_locus()}: {decision.to_report()}")

        return VariantOutcome(
            quality=quality,
            clinvar=clinvar,
            predictive=predictive,
            decision=decision,
            record=record,
            stats=tally_decision(decision, predictive),
        )

    def process_chunk(self, variants: list[VariantCall]) -> BatchResult:
        """Process calls sequentially, returning records and a partial tally."""
        records = []
        stats = FilterStats()
        for variant in variants:
            outcome = self.process_variant(variant)
            stats = stats.merge(outcome.stats)
            if outcome.record is not None:
                records.append(outcome.record)
        return BatchResult(records=records, stats=stats)

    def process_batch(
        self,
        variants: list[VariantCall],
        workers: int = 1,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        progress: Callable[[int], None] | None = None,
    ) -> BatchResult:
        """Process a batch of calls, optionally across worker processes.

        Args:
            variants: Calls to filter
            workers: Number of worker processes (1 = in-process)
            chunk_size: Calls per unit of work
            progress: Called with the number of calls completed after each chunk

        Returns:
            BatchResult with included records and merged statistics
        """
        chunks = list(iter_chunks(variants, chunk_size))
        logger.info(f"Filtering {len(variants)} variants in {len(chunks)} chunk(s) with {workers} worker(s)")

        if workers <= 1 or len(chunks) <= 1:
            partials = (self.process_chunk(chunk) for chunk in chunks)
            return _reduce_partials(partials, chunks, progress)

        with ProcessPoolExecutor(max_workers=workers) as executor:
            partials = executor.map(_process_chunk, [self.config] * len(chunks), chunks)
            return _reduce_partials(partials, chunks, progress)


def _process_chunk(config: FilterConfig, variants: list[VariantCall]) -> BatchResult:
    # Module-level so it can be pickled into worker processes
    return FilterEngine(config).process_chunk(variants)


def _reduce_partials(
    partials: Iterator[BatchResult],
    chunks: list[list[VariantCall]],
    progress: Callable[[int], None] | None,
) -> BatchResult:
    records: list[MAFRecord] = []
    tallies: list[FilterStats] = []
    for chunk, partial in zip(chunks, partials):
        records.extend(partial.records)
        tallies.append(partial.stats)
        if progress is not None:
            progress(len(chunk))

    return BatchResult(records=records, stats=reduce(FilterStats.merge, tallies, FilterStats()))


def iter_chunks(variants: list[VariantCall], chunk_size: int) -> Iterator[list[VariantCall]]:
    """Split calls into consecutive chunks of at most ``chunk_size``."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    for start in range(0, len(variants), chunk_size):
        yield variants[start:start + chunk_size]


def tally_quality_failure(quality: QualityVerdict) -> FilterStats:
    """One-call tally for a call rejected by the quality gate."""
    counter = _FAILURE_COUNTERS[quality.failure_category]
    return FilterStats(**{counter: 1})


def tally_decision(decision: Decision, predictive: PredictiveVerdict) -> FilterStats:
    """One-call tally for a call that passed quality and received a decision."""
    counts = {"passed_quality": 1}

    if decision.should_include:
        counts["included"] = 1
        if decision.primary_evidence == EvidenceSource.CLINVAR:
            if decision.pathogenicity_class == PathogenicityClass.PATHOGENIC:
                counts["clinvar_pathogenic"] = 1
            else:
                counts["clinvar_likely"] = 1
        elif decision.primary_evidence == EvidenceSource.PREDICTIVE:
            counts["predictive_likely"] = 1
            if predictive.has_primary_predictor_support and predictive.support_count == 1:
                counts["primate_ai_only"] = 1
            else:
                counts["multi_score"] = 1
    else:
        counts["excluded"] = 1
        if decision.pathogenicity_class == PathogenicityClass.EXCLUDED_BENIGN:
            counts["excluded_benign"] = 1

    return FilterStats(**counts)
