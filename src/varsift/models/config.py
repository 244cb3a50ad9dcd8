"""Filter configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class FilterConfig(BaseModel):
    """Thresholds consumed by the filtering engine.

    Ranges are enforced at construction, so an invalid configuration fails the
    whole run with a ``pydantic.ValidationError`` before any variant is read.
    """

    model_config = ConfigDict(frozen=True)

    # Quality filtering
    min_total_depth: int = Field(30, ge=1, description="Minimum total read depth")
    min_variant_frequency: float = Field(0.03, ge=0.0, le=1.0, description="Minimum VAF")

    # Population frequency filtering
    max_eas_af: float = Field(0.01, ge=0.0, le=1.0, description="Maximum East Asian allele frequency")

    # Predictive score thresholds
    min_revel_score: float = Field(0.75, ge=0.0, le=1.0)
    min_primate_ai_score: float = Field(0.8, ge=0.0, le=1.0)
    min_dann_score: float = Field(0.96, ge=0.0, le=1.0)

    # ClinVar options
    exclude_benign: bool = Field(False, description="Exclude benign/likely benign variants")

    def to_report(self) -> str:
        """Render the configuration banner shown in verbose mode."""
        rule = "=" * 60
        return (
            f"{rule}\n"
            f"varsift Filter Configuration\n"
            f"{rule}\n\n"
            f"Quality filtering parameters:\n"
            f"  Minimum sequencing depth (min_total_depth):       {self.min_total_depth}\n"
            f"  Minimum VAF (min_variant_frequency):              {self.min_variant_frequency}\n\n"
            f"Population frequency filtering parameters:\n"
            f"  Maximum East Asian AF (max_eas_af):               {self.max_eas_af}\n\n"
            f"Predictive score thresholds:\n"
            f"  REVEL minimum score (min_revel_score):            {self.min_revel_score}\n"
            f"  PrimateAI-3D minimum score:                       {self.min_primate_ai_score}\n"
            f"  DANN minimum score:                               {self.min_dann_score}\n\n"
            f"ClinVar filtering options:\n"
            f"  Exclude benign/likely benign variants:            {self.exclude_benign}\n\n"
            f"{rule}"
        )
