"""Evidence fusion into a final include/exclude decision.

Rules are evaluated in strict priority order and the first match wins:

1. ClinVar pathogenic
2. ClinVar likely pathogenic
3. ClinVar benign / likely benign (only when benign exclusion is enabled)
4. Predictive scores suggest pathogenic
5. Exclude for insufficient evidence

Benign exclusion sits after both pathogenic rules, so benign evidence can
never override a pathogenic ClinVar classification.
"""

from varsift.models.assessment import (
    ClinVarVerdict,
    Decision,
    EvidenceSource,
    PathogenicityClass,
    PredictiveVerdict,
)


def make_filter_decision(
    clinvar: ClinVarVerdict,
    predictive: PredictiveVerdict,
    exclude_benign: bool = False,
) -> Decision:
    """Fuse ClinVar and predictive evidence for a call that passed quality.

    Args:
        clinvar: Resolved ClinVar verdict
        predictive: Aggregated predictor verdict
        exclude_benign: Exclude calls ClinVar classifies as (likely) benign

    Returns:
        Decision with class, evidence source and justification
    """
    if clinvar.is_pathogenic:
        return Decision(
            should_include=True,
            pathogenicity_class=PathogenicityClass.PATHOGENIC,
            primary_evidence=EvidenceSource.CLINVAR,
            justification=f"ClinVar pathogenic variant (confidence: {clinvar.confidence_level.value})",
            clinvar_entry=clinvar.selected_entry,
        )

    if clinvar.is_likely_pathogenic:
        return Decision(
            should_include=True,
            pathogenicity_class=PathogenicityClass.LIKELY_PATHOGENIC,
            primary_evidence=EvidenceSource.CLINVAR,
            justification=f"ClinVar likely pathogenic variant (confidence: {clinvar.confidence_level.value})",
            clinvar_entry=clinvar.selected_entry,
        )

    if exclude_benign and (clinvar.is_benign or clinvar.is_likely_benign):
        benign_class = "Benign" if clinvar.is_benign else "Likely benign"
        return Decision(
            should_include=False,
            pathogenicity_class=PathogenicityClass.EXCLUDED_BENIGN,
            primary_evidence=EvidenceSource.CLINVAR,
            justification=f"ClinVar {benign_class} variant (confidence: {clinvar.confidence_level.value})",
        )

    if predictive.suggests_pathogenic:
        # Alphabetical order
        score_names = sorted(predictive.contributing_scores)
        return Decision(
            should_include=True,
            pathogenicity_class=PathogenicityClass.LIKELY_PATHOGENIC,
            primary_evidence=EvidenceSource.PREDICTIVE,
            justification=(
                f"Supported by predictive scores: {', '.join(score_names)} "
                f"(confidence: {predictive.confidence:.2f})"
            ),
        )

    return Decision(
        should_include=False,
        pathogenicity_class=PathogenicityClass.EXCLUDED,
        primary_evidence=EvidenceSource.NONE,
        justification="insufficient evidence for pathogenicity",
    )
