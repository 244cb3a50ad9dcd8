"""Data models for varsift."""

from varsift.models.assessment import (
    ClinVarVerdict,
    ConfidenceLevel,
    Decision,
    EvidenceSource,
    PathogenicityClass,
    PredictiveVerdict,
    QualityFailure,
    QualityVerdict,
)
from varsift.models.config import FilterConfig
from varsift.models.evidence.clinvar import ClinVarSubmission
from varsift.models.evidence.cosmic import CosmicEntry
from varsift.models.maf import MAFRecord
from varsift.models.stats import FilterStats
from varsift.models.variant import PopulationFrequency, TranscriptAnnotation, VariantCall

__all__ = [
    "VariantCall",
    "TranscriptAnnotation",
    "PopulationFrequency",
    "ClinVarSubmission",
    "CosmicEntry",
    "FilterConfig",
    "QualityFailure",
    "QualityVerdict",
    "ConfidenceLevel",
    "ClinVarVerdict",
    "PredictiveVerdict",
    "PathogenicityClass",
    "EvidenceSource",
    "Decision",
    "MAFRecord",
    "FilterStats",
]
