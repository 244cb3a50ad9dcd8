"""Run-level filtering statistics.

FilterStats is a merge-associative accumulator: ``FilterStats()`` is the
identity and ``merge`` adds counters field by field. Workers build partial
tallies independently and the engine reduces them after the parallel stage,
so the order in which partial results arrive does not change the total.
"""

from pydantic import BaseModel


class FilterStats(BaseModel):
    """Counters describing what happened to the variants of one run."""

    # Quality gate
    passed_quality: int = 0
    failed_filter: int = 0
    failed_depth: int = 0
    failed_vaf: int = 0
    failed_af: int = 0

    # Pathogenicity assessment
    clinvar_pathogenic: int = 0
    clinvar_likely: int = 0
    predictive_likely: int = 0
    primate_ai_only: int = 0
    multi_score: int = 0
    excluded_benign: int = 0

    # Final outcome
    included: int = 0
    excluded: int = 0

    def merge(self, other: "FilterStats") -> "FilterStats":
        """Return a new tally with counters of both operands added."""
        return FilterStats(**{
            name: getattr(self, name) + getattr(other, name)
            for name in type(self).model_fields
        })

    def __add__(self, other: "FilterStats") -> "FilterStats":
        return self.merge(other)

    @property
    def total(self) -> int:
        """Number of variants seen (passed + failed quality)."""
        return (
            self.passed_quality
            + self.failed_filter
            + self.failed_depth
            + self.failed_vaf
            + self.failed_af
        )

    def to_report(self, num_threads: int = 1) -> str:
        """Render the statistics report."""
        rule = "═" * 59
        benign_section = ""
        if self.excluded_benign > 0:
            benign_section = (
                f"\nClinVar benign filtering:\n"
                f"  - Excluded benign/likely benign: {self.excluded_benign}\n"
            )

        return (
            f"\n{rule}\n"
            f"                  Filtering Statistics Report\n"
            f"{rule}\n\n"
            f"Number of workers:      {num_threads}\n\n"
            f"Quality filtering:\n"
            f"  - Passed quality:     {self.passed_quality}\n"
            f"  - Failed VCF filters: {self.failed_filter}\n"
            f"  - Insufficient depth: {self.failed_depth}\n"
            f"  - VAF too low:        {self.failed_vaf}\n"
            f"  - Population freq too high: {self.failed_af}\n\n"
            f"Pathogenicity assessment:\n"
            f"  - ClinVar Pathogenic:         {self.clinvar_pathogenic}\n"
            f"  - ClinVar Likely pathogenic:  {self.clinvar_likely}\n"
            f"  - Predictive scores support:  {self.predictive_likely}\n"
            f"    * PrimateAI-3D solo support: {self.primate_ai_only}\n"
            f"    * 2+ scores support:         {self.multi_score}\n"
            f"{benign_section}\n"
            f"Final results:\n"
            f"  - Included variants:  {self.included}\n"
            f"  - Excluded variants:  {self.excluded}\n\n"
            f"{rule}\n"
        )
