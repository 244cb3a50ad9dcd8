"""Variant call data models."""

from pydantic import BaseModel, ConfigDict, Field

from varsift.models.evidence.clinvar import ClinVarSubmission
from varsift.models.evidence.cosmic import CosmicEntry


class TranscriptAnnotation(BaseModel):
    """Transcript-level annotation of a variant (Nirvana ``transcripts`` entry)."""

    model_config = ConfigDict(populate_by_name=True)

    transcript_id: str | None = Field(None, alias="transcript", description="Transcript accession (e.g., NM_004333.4)")
    source: str | None = Field(None, description="Annotation source (RefSeq/Ensembl)")
    gene_symbol: str | None = Field(None, alias="hgnc", description="HGNC gene symbol")
    consequence: list[str] = Field(default_factory=list, description="Ordered SO consequence terms")
    impact: str | None = Field(None, description="Impact severity label")
    amino_acids: str | None = Field(None, alias="aminoAcids")
    cdna_pos: str | None = Field(None, alias="cdnaPos")
    cds_pos: str | None = Field(None, alias="cdsPos")
    exons: str | None = None
    codons: str | None = None
    protein_pos: str | None = Field(None, alias="proteinPos")
    hgvsc: str | None = Field(None, description="HGVS coding notation")
    hgvsp: str | None = Field(None, description="HGVS protein notation")
    is_canonical: bool | None = Field(None, alias="isCanonical")
    is_mane_select: bool | None = Field(None, alias="isManeSelect")


class PopulationFrequency(BaseModel):
    """Allele frequencies from one population database."""

    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., description="Database key (gnomad, gnomad-exome, oneKg)")
    all_af: float | None = Field(None, alias="allAf")
    eas_af: float | None = Field(None, alias="easAf")
    afr_af: float | None = Field(None, alias="afrAf")
    amr_af: float | None = Field(None, alias="amrAf")
    eur_af: float | None = Field(None, alias="eurAf")


class VariantCall(BaseModel):
    """A single variant call with all annotations needed for filtering.

    Only the first alternate allele of a position is represented; the parser
    is responsible for that selection and for default filter flags.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "chromosome": "chr7",
                "start": 140453136,
                "end": 140453136,
                "reference_allele": "A",
                "alternate_allele": "T",
                "variant_type": "SNV",
                "filters": ["PASS"],
                "total_depth": 100,
                "variant_frequencies": [0.45],
            }
        }
    )

    chromosome: str
    start: int = Field(..., description="1-based position")
    end: int = Field(..., description="1-based end position")
    reference_allele: str
    alternate_allele: str
    variant_type: str = Field(..., description="Variant type tag (SNV, insertion, deletion, MNV, ...)")

    filters: list[str] = Field(default_factory=lambda: ["PASS"])
    total_depth: int | None = None
    variant_frequencies: list[float] | None = None

    transcripts: list[TranscriptAnnotation] = Field(default_factory=list)
    clinvar: list[ClinVarSubmission] = Field(default_factory=list)
    cosmic: list[CosmicEntry] = Field(default_factory=list)
    population_frequencies: list[PopulationFrequency] = Field(default_factory=list)
    dbsnp_ids: list[str] = Field(default_factory=list)

    # Predictive scores
    primate_ai_3d: float | None = None
    primate_ai: float | None = None
    revel_score: float | None = None
    dann_score: float | None = None

    @property
    def vaf(self) -> float | None:
        """Variant allele fraction of the chosen (first) alternate allele."""
        if not self.variant_frequencies:
            return None
        return self.variant_frequencies[0]

    @property
    def primary_predictor_score(self) -> float | None:
        """PrimateAI-3D score, falling back to sequence-based PrimateAI."""
        if self.primate_ai_3d is not None:
            return self.primate_ai_3d
        return self.primate_ai

    def population_frequency(self, source: str) -> PopulationFrequency | None:
        """Return the frequency record for a database, if present."""
        for frequency in self.population_frequencies:
            if frequency.source == source:
                return frequency
        return None

    def to_locus(self) -> str:
        """Compact locus string for logging (chr7:140453136 A>T)."""
        return f"{self.chromosome}:{self.start} {self.reference_allele}>{self.alternate_allele}"
