"""Quality gate: call filters, sequencing depth, VAF and population frequency.

Checks run in a fixed order and the first failing check decides the verdict.
When no population database reports an East Asian AF the call passes that
check; missing frequency data is not treated as evidence of commonness.
"""

from varsift.constants import EAS_AF_SOURCES, PASS_FILTER
from varsift.models.assessment import QualityFailure, QualityVerdict
from varsift.models.config import FilterConfig
from varsift.models.variant import VariantCall


def apply_quality_filters(variant: VariantCall, config: FilterConfig) -> QualityVerdict:
    """Run the quality gate for a single call.

    Args:
        variant: Variant call to check
        config: Filter thresholds

    Returns:
        QualityVerdict; ``failure_reason`` names the first failing check
    """
    depth = variant.total_depth
    vaf = variant.vaf

    if variant.filters != [PASS_FILTER]:
        return QualityVerdict(
            passed=False,
            failure_reason=f"Failed VCF filters: [{', '.join(variant.filters)}]",
            failure_category=QualityFailure.FILTER,
            depth=depth,
            vaf=vaf,
        )

    sequencing = check_sequencing_quality(variant, config)
    if sequencing is not None:
        category, reason = sequencing
        return QualityVerdict(
            passed=False,
            failure_reason=reason,
            failure_category=category,
            depth=depth,
            vaf=vaf,
        )

    population_reason, eas_af = check_population_frequency(variant, config)
    if population_reason is not None:
        return QualityVerdict(
            passed=False,
            failure_reason=population_reason,
            failure_category=QualityFailure.POPULATION_AF,
            depth=depth,
            vaf=vaf,
            population_af_used=eas_af,
        )

    return QualityVerdict(passed=True, depth=depth, vaf=vaf, population_af_used=eas_af)


def check_sequencing_quality(
    variant: VariantCall, config: FilterConfig
) -> tuple[QualityFailure, str] | None:
    """Check depth then VAF.

    Returns:
        (failure category, reason) for the first failing check, or None if both pass
    """
    depth = variant.total_depth
    if depth is None:
        return QualityFailure.DEPTH, "Missing sequencing depth"
    if depth < config.min_total_depth:
        return (
            QualityFailure.DEPTH,
            f"Low sequencing depth ({depth} < {config.min_total_depth})",
        )

    vaf = variant.vaf
    if vaf is None:
        return QualityFailure.VAF, "Missing variant frequency"
    if vaf < config.min_variant_frequency:
        return (
            QualityFailure.VAF,
            f"Low variant frequency ({vaf:.4f} < {config.min_variant_frequency})",
        )

    return None


def check_population_frequency(
    variant: VariantCall, config: FilterConfig
) -> tuple[str | None, float | None]:
    """Compare East Asian AF from the first source that reports one.

    Returns:
        (failure reason or None, AF that was compared or None)
    """
    for source, display_name in EAS_AF_SOURCES:
        eas_af = get_eas_af(variant, source)
        if eas_af is None:
            continue
        if eas_af > config.max_eas_af:
            return (
                f"High East Asian AF in {display_name} ({eas_af:.4f} > {config.max_eas_af})",
                eas_af,
            )
        return None, eas_af

    return None, None


def get_eas_af(variant: VariantCall, source: str) -> float | None:
    """East Asian allele frequency reported by one database."""
    frequency = variant.population_frequency(source)
    if frequency is None:
        return None
    return frequency.eas_af
