"""Computational predictor aggregation.

PrimateAI (3-D preferred) is trusted on its own; REVEL, DANN and COSMIC
presence each need corroboration from at least one other signal.
"""

from varsift.constants import COSMIC, COSMIC_PRESENCE_SCORE, DANN, PRIMATE_AI, PRIMATE_AI_3D, REVEL
from varsift.models.assessment import PredictiveVerdict
from varsift.models.config import FilterConfig
from varsift.models.variant import VariantCall

PRIMARY_BASE_CONFIDENCE = 0.7
SECONDARY_BASE_CONFIDENCE = 0.5
CONFIDENCE_STEP = 0.1


def assess_predictive_scores(variant: VariantCall, config: FilterConfig) -> PredictiveVerdict:
    """Count predictor signals that pass their thresholds.

    Args:
        variant: Variant call with optional predictor scores
        config: Per-predictor minimum scores

    Returns:
        PredictiveVerdict with support count and confidence
    """
    contributing: dict[str, float] = {}

    primary = variant.primary_predictor_score
    if primary is not None and primary >= config.min_primate_ai_score:
        contributing[primary_predictor_name(variant)] = primary

    if variant.revel_score is not None and variant.revel_score >= config.min_revel_score:
        contributing[REVEL] = variant.revel_score

    if variant.dann_score is not None and variant.dann_score >= config.min_dann_score:
        contributing[DANN] = variant.dann_score

    if is_in_cosmic(variant):
        contributing[COSMIC] = COSMIC_PRESENCE_SCORE

    support_count = len(contributing)
    has_primary = PRIMATE_AI_3D in contributing or PRIMATE_AI in contributing

    return PredictiveVerdict(
        suggests_pathogenic=has_primary or support_count >= 2,
        contributing_scores=contributing,
        confidence=calculate_confidence(has_primary, support_count),
        support_count=support_count,
        has_primary_predictor_support=has_primary,
    )


def calculate_confidence(has_primary: bool, support_count: int) -> float:
    """Base 0.7 with primary support (0.5 without), +0.1 per extra signal, max 1.0."""
    if support_count == 0:
        return 0.0

    base = PRIMARY_BASE_CONFIDENCE if has_primary else SECONDARY_BASE_CONFIDENCE
    confidence = base + CONFIDENCE_STEP * max(0, support_count - 1)
    return min(confidence, 1.0)


def primary_predictor_name(variant: VariantCall) -> str:
    """Name of the primary predictor actually used for this call."""
    return PRIMATE_AI_3D if variant.primate_ai_3d is not None else PRIMATE_AI


def is_in_cosmic(variant: VariantCall) -> bool:
    return bool(variant.cosmic)
