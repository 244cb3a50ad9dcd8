"""MAF output record model."""

from pydantic import BaseModel, ConfigDict, Field


class MAFRecord(BaseModel):
    """One row of the MAF output.

    Field aliases are the MAF column headers and field order is column order.
    Numeric annotations are pre-formatted strings so that a missing value is
    written as an empty cell rather than a placeholder number.
    """

    model_config = ConfigDict(populate_by_name=True)

    hugo_symbol: str = Field("", alias="Hugo_Symbol")
    chromosome: str = Field(..., alias="Chromosome")
    start_position: int = Field(..., alias="Start_Position")
    end_position: int = Field(..., alias="End_Position")
    strand: str = Field("+", alias="Strand")
    variant_classification: str = Field("", alias="Variant_Classification")
    variant_type: str = Field("", alias="Variant_Type")
    reference_allele: str = Field(..., alias="Reference_Allele")
    tumor_seq_allele1: str = Field(..., alias="Tumor_Seq_Allele1")
    tumor_seq_allele2: str = Field(..., alias="Tumor_Seq_Allele2")
    tumor_sample_barcode: str = Field("", alias="Tumor_Sample_Barcode")
    hgvsc: str = Field("", alias="HGVSc")
    hgvsp: str = Field("", alias="HGVSp")
    hgvsp_short: str = Field("", alias="HGVSp_Short")
    transcript_id: str = Field("", alias="Transcript_ID")
    exon: str = Field("", alias="Exon")
    consequence: str = Field("", alias="Consequence")
    impact: str = Field("", alias="IMPACT")
    codons: str = Field("", alias="Codons")
    amino_acids: str = Field("", alias="Amino_Acids")
    cdna_position: str = Field("", alias="cDNA_position")
    cds_position: str = Field("", alias="CDS_position")
    protein_position: str = Field("", alias="Protein_position")
    dbsnp_rs: str = Field("", alias="dbSNP_RS")
    dbsnp_val_status: str = Field("", alias="dbSNP_Val_Status")
    cosmic_id: str = Field("", alias="COSMIC_ID")
    clinvar_id: str = Field("", alias="ClinVar_ID")
    clinvar_review_status: str = Field("", alias="ClinVar_Review_Status")
    clinvar_significance: str = Field("", alias="ClinVar_Significance")
    clinvar_disease: str = Field("", alias="ClinVar_Disease")
    primate_ai_score: str = Field("", alias="PrimateAI_Score")
    dann_score: str = Field("", alias="DANN_Score")
    revel_score: str = Field("", alias="REVEL_Score")
    gnomad_af: str = Field("", alias="gnomAD_AF")
    gnomad_eas_af: str = Field("", alias="gnomAD_EAS_AF")
    depth: str = Field("", alias="Depth")
    vaf: str = Field("", alias="VAF")

    @classmethod
    def columns(cls) -> list[str]:
        """MAF header columns in output order."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    def to_row(self) -> dict[str, str]:
        """Serialize to a column -> cell mapping for the TSV writer."""
        return {column: str(value) for column, value in self.model_dump(by_alias=True).items()}
