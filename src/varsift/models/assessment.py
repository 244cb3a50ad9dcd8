"""Assessment and decision models.

Every verdict is frozen: once a filter stage has produced it, downstream
stages can only read it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from varsift.models.evidence.clinvar import ClinVarSubmission


class QualityFailure(str, Enum):
    """Which quality check rejected a call."""

    FILTER = "filter"
    DEPTH = "depth"
    VAF = "vaf"
    POPULATION_AF = "population_af"


class ConfidenceLevel(str, Enum):
    """Confidence in a ClinVar call, derived from review status."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class PathogenicityClass(str, Enum):
    """Pathogenicity class assigned by the decision stage."""

    PATHOGENIC = "Pathogenic"
    LIKELY_PATHOGENIC = "Likely pathogenic"
    EXCLUDED_BENIGN = "Excluded (Benign)"
    EXCLUDED = "Excluded"


class EvidenceSource(str, Enum):
    """Evidence that drove a decision."""

    CLINVAR = "ClinVar"
    PREDICTIVE = "Predictive"
    NONE = "None"


class QualityVerdict(BaseModel):
    """Outcome of the sequencing and population quality gate."""

    model_config = ConfigDict(frozen=True)

    passed: bool
    failure_reason: str | None = None
    failure_category: QualityFailure | None = None
    depth: int | None = None
    vaf: float | None = None
    population_af_used: float | None = Field(
        None, description="East Asian AF that was compared against the maximum"
    )


class ClinVarVerdict(BaseModel):
    """Resolved ClinVar classification for one call."""

    model_config = ConfigDict(frozen=True)

    is_pathogenic: bool = False
    is_likely_pathogenic: bool = False
    is_benign: bool = False
    is_likely_benign: bool = False
    selected_entry: ClinVarSubmission | None = None
    confidence_level: ConfidenceLevel = ConfidenceLevel.NONE
    reason: str = ""


class PredictiveVerdict(BaseModel):
    """Aggregated computational predictor evidence."""

    model_config = ConfigDict(frozen=True)

    suggests_pathogenic: bool = False
    contributing_scores: dict[str, float] = Field(
        default_factory=dict, description="Predictor name -> raw score for passing signals"
    )
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    support_count: int = 0
    has_primary_predictor_support: bool = False


class Decision(BaseModel):
    """Final inclusion decision for a call."""

    model_config = ConfigDict(frozen=True)

    should_include: bool
    pathogenicity_class: PathogenicityClass
    primary_evidence: EvidenceSource
    justification: str
    clinvar_entry: ClinVarSubmission | None = Field(
        None, description="Submission backing a ClinVar-sourced decision"
    )

    def to_report(self) -> str:
        """One-line summary for logs."""
        status = "INCLUDE" if self.should_include else "EXCLUDE"
        return (
            f"{status} | {self.pathogenicity_class.value} | "
            f"evidence: {self.primary_evidence.value} | {self.justification}"
        )
