from pydantic import BaseModel, ConfigDict, Field


class CosmicEntry(BaseModel):
    """Hit in COSMIC (Catalogue of Somatic Mutations in Cancer)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    gene: str | None = None
    mutation_type: str | None = Field(None, alias="mutationType")
    count: int | None = None
