from pydantic import BaseModel, ConfigDict, Field


class ClinVarSubmission(BaseModel):
    """A curated clinical-significance submission from ClinVar.

    Field aliases follow the Nirvana JSON schema, so entries can be validated
    straight from the ``clinvar`` array of an annotated variant.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    allele_id: str | None = Field(None, alias="variantId")
    significance: list[str] = Field(default_factory=list)
    review_status: str | None = Field(None, alias="reviewStatus")
    phenotypes: list[str] = Field(default_factory=list)
    last_evaluated: str | None = Field(None, alias="lastEvaluated")

    def joined_significance(self) -> str:
        """Significance labels joined for display (e.g. "Pathogenic, risk factor")."""
        return ", ".join(self.significance)
