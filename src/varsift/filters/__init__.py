"""Variant filtering stages."""

from varsift.filters.clinvar import assess_clinvar_pathogenicity
from varsift.filters.decision import make_filter_decision
from varsift.filters.predictive import assess_predictive_scores
from varsift.filters.quality import apply_quality_filters

__all__ = [
    "apply_quality_filters",
    "assess_clinvar_pathogenicity",
    "assess_predictive_scores",
    "make_filter_decision",
]
