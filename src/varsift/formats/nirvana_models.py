"""Pydantic models for the Nirvana annotated JSON schema."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from varsift.models.evidence.clinvar import ClinVarSubmission
from varsift.models.evidence.cosmic import CosmicEntry
from varsift.models.variant import TranscriptAnnotation


class DataSource(BaseModel):
    """Annotation data source listed in the header."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str
    description: str | None = None
    release_date: str | None = Field(None, alias="releaseDate")


class NirvanaHeader(BaseModel):
    """Nirvana file header."""

    model_config = ConfigDict(populate_by_name=True)

    annotator: str
    creation_time: str = Field(..., alias="creationTime")
    genome_assembly: str = Field(..., alias="genomeAssembly")
    schema_version: int = Field(..., alias="schemaVersion")
    data_sources: list[DataSource] = Field(default_factory=list, alias="dataSources")
    samples: list[str] = Field(default_factory=list)


class NirvanaSample(BaseModel):
    """Per-sample genotype information."""

    model_config = ConfigDict(populate_by_name=True)

    total_depth: int | None = Field(None, alias="totalDepth")
    variant_frequencies: list[float] | None = Field(None, alias="variantFrequencies")


class PrimateAI3DEntry(BaseModel):
    """PrimateAI-3D structural prediction."""

    model_config = ConfigDict(populate_by_name=True)

    score: float | None = None
    score_percentile: float | None = Field(None, alias="scorePercentile")
    classification: str | None = None
    ensembl_transcript_id: str | None = Field(None, alias="ensemblTranscriptId")
    ref_seq_transcript_id: str | None = Field(None, alias="refSeqTranscriptId")


class PrimateAIEntry(BaseModel):
    """Sequence-based PrimateAI prediction."""

    model_config = ConfigDict(populate_by_name=True)

    hgnc: str | None = None
    score_percentile: float | None = Field(None, alias="scorePercentile")


class RevelScore(BaseModel):
    """REVEL ensemble score."""

    score: float | None = None


class NirvanaVariant(BaseModel):
    """Annotation block for one alternate allele.

    Population frequency blocks (``gnomad``, ``gnomad-exome``, ``oneKg``) are
    kept as raw dicts; the parser turns them into PopulationFrequency records.
    """

    model_config = ConfigDict(populate_by_name=True)

    variant_type: str = Field(..., alias="variantType")
    transcripts: list[TranscriptAnnotation] = Field(default_factory=list)
    clinvar: list[ClinVarSubmission] = Field(default_factory=list)
    cosmic: list[CosmicEntry] = Field(default_factory=list)
    dbsnp: list[str] = Field(default_factory=list)
    primate_ai_3d: list[PrimateAI3DEntry] = Field(default_factory=list, alias="primateAI-3D")
    primate_ai: list[PrimateAIEntry] = Field(default_factory=list, alias="primateAI")
    dann_score: float | None = Field(None, alias="dannScore")
    revel: RevelScore | None = None

    gnomad: dict[str, Any] | None = None
    gnomad_exome: dict[str, Any] | None = Field(None, alias="gnomad-exome")
    one_kg: dict[str, Any] | None = Field(None, alias="oneKg")


class NirvanaPosition(BaseModel):
    """One genomic position with its alleles, samples and annotations."""

    model_config = ConfigDict(populate_by_name=True)

    chromosome: str
    position: int
    ref_allele: str = Field(..., alias="refAllele")
    alt_alleles: list[str] = Field(default_factory=list, alias="altAlleles")
    filters: list[str] = Field(default_factory=list)
    samples: list[NirvanaSample] = Field(default_factory=list)
    variants: list[NirvanaVariant] = Field(default_factory=list)
