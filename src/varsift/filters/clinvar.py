"""ClinVar significance resolution.

ARCHITECTURE:
    ClinVarSubmission[] → classify (pathogenic / benign) → resolve conflicts → ClinVarVerdict

Key Design:
- Significance labels are free text from a small vocabulary ("Pathogenic",
  "Likely pathogenic", "Pathogenic/Likely pathogenic", ...). They are split by
  a tokenizer and classified per token, never by ad hoc search on the whole string.
- Conflicts are resolved by a total order: review-status tier, then
  cancer-related phenotype, then most recent evaluation date.
- Benign status is reported alongside pathogenic status; whether benign
  evidence excludes a call is decided later by the decision stage.
"""

from varsift.constants import (
    CANCER_KEYWORDS,
    HIGH_CONFIDENCE_MAX_TIER,
    MEDIUM_CONFIDENCE_MAX_TIER,
    REVIEW_STATUS_RULES,
    SIGNIFICANCE_DELIMITERS,
    ReviewStatusTier,
)
from varsift.models.assessment import ClinVarVerdict, ConfidenceLevel
from varsift.models.evidence.clinvar import ClinVarSubmission


def assess_clinvar_pathogenicity(entries: list[ClinVarSubmission]) -> ClinVarVerdict:
    """Resolve the ClinVar submissions of one call into a single verdict.

    Args:
        entries: All ClinVar submissions attached to the call

    Returns:
        ClinVarVerdict with pathogenic/benign flags and the selected submission
    """
    if not entries:
        return ClinVarVerdict(reason="No ClinVar entries available")

    pathogenic_entries = [e for e in entries if is_pathogenic_entry(e)]
    benign_entries = [e for e in entries if is_benign_entry(e)]

    is_benign = False
    is_likely_benign = False
    if benign_entries:
        selected_benign = resolve_conflicting_entries(benign_entries)
        is_benign, is_likely_benign = classify_significance(
            tokenize_significance(selected_benign.significance), "benign"
        )

    if not pathogenic_entries:
        return ClinVarVerdict(
            is_benign=is_benign,
            is_likely_benign=is_likely_benign,
            reason="No pathogenic entries (no pathogenic or likely pathogenic ClinVar submissions)",
        )

    selected = resolve_conflicting_entries(pathogenic_entries)
    is_pathogenic, is_likely_pathogenic = classify_significance(
        tokenize_significance(selected.significance), "pathogenic"
    )

    return ClinVarVerdict(
        is_pathogenic=is_pathogenic,
        is_likely_pathogenic=is_likely_pathogenic,
        is_benign=is_benign,
        is_likely_benign=is_likely_benign,
        selected_entry=selected,
        confidence_level=get_confidence_level(selected.review_status),
        reason=build_assessment_reason(selected, len(pathogenic_entries)),
    )


def tokenize_significance(labels: list[str]) -> list[str]:
    """Split significance labels into lowercased tokens.

    Labels are joined and split on ``/``, ``,`` and ``;`` so that co-expressed
    classes like "Pathogenic/Likely pathogenic" become separate tokens.

    Example:
        >>> tokenize_significance(["Pathogenic/Likely pathogenic"])
        ['pathogenic', 'likely pathogenic']
    """
    text = ", ".join(labels).lower()
    for delimiter in SIGNIFICANCE_DELIMITERS:
        text = text.replace(delimiter, "\n")
    return [token.strip() for token in text.split("\n") if token.strip()]


def classify_significance(tokens: list[str], term: str) -> tuple[bool, bool]:
    """Decide standalone vs. "likely" form of a significance term.

    Args:
        tokens: Output of ``tokenize_significance``
        term: "pathogenic" or "benign"

    Returns:
        (standalone, likely_only). ``likely_only`` is True only when no
        standalone token is present.
    """
    standalone = any(term in token and "likely" not in token for token in tokens)
    likely = any(term in token and "likely" in token for token in tokens)
    return standalone, (not standalone and likely)


def is_pathogenic_entry(entry: ClinVarSubmission) -> bool:
    """Pathogenic-compatible: mentions pathogenic, never benign or uncertain."""
    text = entry.joined_significance().lower()
    return "pathogenic" in text and "benign" not in text and "uncertain" not in text


def is_benign_entry(entry: ClinVarSubmission) -> bool:
    """Benign-compatible: mentions benign, never pathogenic or uncertain."""
    text = entry.joined_significance().lower()
    return "benign" in text and "pathogenic" not in text and "uncertain" not in text


def get_review_status_tier(review_status: str | None) -> ReviewStatusTier:
    """Map a free-text review status to its strength tier."""
    status = (review_status or "").lower()
    for required, tier in REVIEW_STATUS_RULES:
        if all(part in status for part in required):
            return tier
    return ReviewStatusTier.UNKNOWN


def is_cancer_related(phenotypes: list[str]) -> bool:
    """Check if any phenotype mentions a cancer keyword."""
    return any(
        keyword in phenotype.lower()
        for phenotype in phenotypes
        for keyword in CANCER_KEYWORDS
    )


def resolve_conflicting_entries(entries: list[ClinVarSubmission]) -> ClinVarSubmission:
    """Select the authoritative submission among same-class entries.

    Ordering (first wins):
    1. Review-status tier ascending (stronger review first)
    2. Cancer-related phenotypes before others
    3. Last-evaluated date descending; ISO dates compare lexically and
       missing dates sort last

    Raises:
        ValueError: If ``entries`` is empty
    """
    if not entries:
        raise ValueError("Cannot resolve an empty list of ClinVar entries")
    if len(entries) == 1:
        return entries[0]

    # Stable sorts applied from least to most significant key
    ordered = sorted(entries, key=lambda e: e.last_evaluated or "", reverse=True)
    ordered = sorted(ordered, key=lambda e: not is_cancer_related(e.phenotypes))
    ordered = sorted(ordered, key=lambda e: get_review_status_tier(e.review_status))
    return ordered[0]


def get_confidence_level(review_status: str | None) -> ConfidenceLevel:
    """Confidence from review-status tier: ≤2 high, ≤4 medium, else low."""
    tier = get_review_status_tier(review_status)
    if tier <= HIGH_CONFIDENCE_MAX_TIER:
        return ConfidenceLevel.HIGH
    if tier <= MEDIUM_CONFIDENCE_MAX_TIER:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def build_assessment_reason(entry: ClinVarSubmission, total_entries: int) -> str:
    """Human-readable justification for the selected submission."""
    parts = []

    if entry.significance:
        parts.append(f"ClinVar: {entry.joined_significance()}")

    if entry.review_status:
        parts.append(f"Review: {entry.review_status}")

    if total_entries > 1:
        parts.append(f"selected from {total_entries} entries")

    if is_cancer_related(entry.phenotypes):
        parts.append("cancer-related disease")

    return "; ".join(parts)
