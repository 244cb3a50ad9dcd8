"""Tests for MAF annotation mapping."""

import pytest

from varsift.models.assessment import Decision, EvidenceSource, PathogenicityClass
from varsift.models.evidence.clinvar import ClinVarSubmission
from varsift.models.variant import PopulationFrequency, TranscriptAnnotation
from varsift.utils.annotation_mapping import (
    AnnotationMapper,
    format_optional,
    map_variant_classification,
    map_variant_type,
    shorten_hgvsp,
    variant_to_maf,
)


@pytest.fixture
def clinvar_decision():
    """Decision backed by a ClinVar submission."""
    return Decision(
        should_include=True,
        pathogenicity_class=PathogenicityClass.PATHOGENIC,
        primary_evidence=EvidenceSource.CLINVAR,
        justification="ClinVar pathogenic variant (confidence: high)",
        clinvar_entry=ClinVarSubmission(
            id="RCV000014992.30",
            significance=["Pathogenic", "drug response"],
            review_status="reviewed by expert panel",
            phenotypes=["Melanoma", "Colorectal cancer"],
        ),
    )


@pytest.fixture
def predictive_decision():
    """Decision backed by predictor scores."""
    return Decision(
        should_include=True,
        pathogenicity_class=PathogenicityClass.LIKELY_PATHOGENIC,
        primary_evidence=EvidenceSource.PREDICTIVE,
        justification="Supported by predictive scores: PrimateAI-3D (confidence: 0.70)",
    )


class TestTranscriptSelection:
    """Tests for canonical transcript selection."""

    def test_mane_select_preferred(self):
        """Test the MANE Select transcript wins over list order."""
        first = TranscriptAnnotation(transcript_id="NM_1")
        mane = TranscriptAnnotation(transcript_id="NM_2", is_mane_select=True)
        assert AnnotationMapper.select_canonical_transcript([first, mane]) is mane

    def test_first_when_no_mane(self):
        """Test the first transcript is used without MANE Select."""
        first = TranscriptAnnotation(transcript_id="NM_1", is_canonical=True)
        second = TranscriptAnnotation(transcript_id="NM_2", is_mane_select=False)
        assert AnnotationMapper.select_canonical_transcript([first, second]) is first

    def test_no_transcripts(self):
        """Test an empty list gives None."""
        assert AnnotationMapper.select_canonical_transcript([]) is None


class TestVariantClassification:
    """Tests for consequence to Variant_Classification mapping."""

    @pytest.mark.parametrize("consequence,expected", [
        ("missense_variant", "Missense_Mutation"),
        ("stop_gained", "Nonsense_Mutation"),
        ("frameshift_variant", "Frame_Shift_Del"),
        ("splice_acceptor_variant", "Splice_Site"),
        ("splice_donor_variant", "Splice_Site"),
        ("inframe_deletion", "In_Frame_Del"),
        ("inframe_insertion", "In_Frame_Ins"),
        ("start_lost", "Translation_Start_Site"),
        ("stop_lost", "Nonstop_Mutation"),
        ("synonymous_variant", "Silent"),
        ("5_prime_UTR_variant", "5'UTR"),
        ("3_prime_UTR_variant", "3'UTR"),
        ("intron_variant", "Intron"),
        ("upstream_gene_variant", ""),
    ])
    def test_single_term(self, consequence, expected):
        """Test each rule on its own."""
        assert map_variant_classification([consequence]) == expected

    def test_first_term_wins(self):
        """Test the first listed term decides, not the most severe."""
        assert map_variant_classification(["synonymous_variant", "missense_variant"]) == "Silent"

    def test_skips_unmatched_terms(self):
        """Test unmatched terms are skipped until one matches."""
        assert map_variant_classification(["NMD_transcript_variant", "intron_variant"]) == "Intron"

    def test_empty(self):
        """Test no terms gives an empty label."""
        assert map_variant_classification([]) == ""


class TestVariantType:
    """Tests for Variant_Type mapping."""

    @pytest.mark.parametrize("nirvana_type,expected", [
        ("SNV", "SNP"),
        ("insertion", "INS"),
        ("deletion", "DEL"),
        ("MNV", "DNP"),
        ("indel", "indel"),
    ])
    def test_mapping(self, nirvana_type, expected):
        """Test known types map and unknown types pass through."""
        assert map_variant_type(nirvana_type) == expected


class TestShortenHgvsp:
    """Tests for protein notation shortening."""

    @pytest.mark.parametrize("hgvsp,expected", [
        ("NP_004324.2:p.Val600Glu", "p.V600E"),
        ("p.Arg132His", "p.R132H"),
        ("p.Arg213Ter", "p.R213*"),
        ("NP_000537.3:p.Gly245Ser", "p.G245S"),
        ("p.Glu746_Ala750del", "p.E746_A750del"),
        ("c.1799T>A", "c.1799T>A"),
        ("", ""),
        (None, ""),
    ])
    def test_cases(self, hgvsp, expected):
        """Test known shortening cases."""
        assert shorten_hgvsp(hgvsp) == expected


class TestFormatOptional:
    """Tests for numeric cell formatting."""

    def test_format(self):
        """Test fixed-decimal formatting and empty cells."""
        assert format_optional(0.85, 4) == "0.8500"
        assert format_optional(0.000004, 6) == "0.000004"
        assert format_optional(None, 4) == ""


class TestVariantToMaf:
    """Tests for building MAF records."""

    def test_full_record(self, braf_v600e, clinvar_decision):
        """Test every column for a well-annotated call."""
        record = variant_to_maf(braf_v600e, clinvar_decision)

        assert record.hugo_symbol == "BRAF"
        assert record.chromosome == "chr7"
        assert record.start_position == 140453136
        assert record.end_position == 140453136
        assert record.strand == "+"
        assert record.variant_classification == "Missense_Mutation"
        assert record.variant_type == "SNP"
        assert record.reference_allele == "A"
        assert record.tumor_seq_allele1 == "A"
        assert record.tumor_seq_allele2 == "T"
        assert record.tumor_sample_barcode == ""
        assert record.hgvsc == "NM_004333.6:c.1799T>A"
        assert record.hgvsp == "NP_004324.2:p.Val600Glu"
        assert record.hgvsp_short == "p.V600E"
        assert record.transcript_id == "NM_004333.6"
        assert record.exon == "15/18"
        assert record.consequence == "missense_variant"
        assert record.impact == "MODERATE"
        assert record.codons == "gTg/gAg"
        assert record.amino_acids == "V/E"
        assert record.cdna_position == "1919"
        assert record.cds_position == "1799"
        assert record.protein_position == "600"
        assert record.dbsnp_rs == "rs113488022"
        assert record.dbsnp_val_status == ""
        assert record.cosmic_id == "COSV56056643"
        assert record.primate_ai_score == "0.9500"
        assert record.dann_score == "0.9900"
        assert record.revel_score == "0.9300"
        assert record.gnomad_af == "0.000004"
        assert record.gnomad_eas_af == "0.000000"
        assert record.depth == "100"
        assert record.vaf == "0.4500"

    def test_clinvar_columns_from_decision(self, braf_v600e, clinvar_decision):
        """Test ClinVar columns come from the selected submission."""
        record = variant_to_maf(braf_v600e, clinvar_decision)
        assert record.clinvar_id == "RCV000014992.30"
        assert record.clinvar_review_status == "reviewed by expert panel"
        assert record.clinvar_significance == "Pathogenic, drug response"
        assert record.clinvar_disease == "Melanoma; Colorectal cancer"

    def test_clinvar_columns_empty_for_predictive(self, braf_v600e, predictive_decision):
        """Test ClinVar columns stay empty for predictor-driven decisions."""
        record = variant_to_maf(braf_v600e, predictive_decision)
        assert record.clinvar_id == ""
        assert record.clinvar_review_status == ""
        assert record.clinvar_significance == ""
        assert record.clinvar_disease == ""

    def test_clinvar_falls_back_to_first_submission(self, braf_v600e):
        """Test a ClinVar decision without a carried entry uses the first submission."""
        decision = Decision(
            should_include=True,
            pathogenicity_class=PathogenicityClass.PATHOGENIC,
            primary_evidence=EvidenceSource.CLINVAR,
            justification="ClinVar pathogenic variant (confidence: high)",
        )
        record = variant_to_maf(braf_v600e, decision)
        assert record.clinvar_id == "RCV000014992.30"
        assert record.clinvar_disease == "Melanoma"

    def test_bare_call(self, make_variant, predictive_decision):
        """Test a call without annotations renders empty cells."""
        record = variant_to_maf(make_variant(variant_frequencies=None), predictive_decision)
        assert record.hugo_symbol == ""
        assert record.variant_classification == ""
        assert record.hgvsp_short == ""
        assert record.impact == ""
        assert record.dbsnp_rs == ""
        assert record.cosmic_id == ""
        assert record.primate_ai_score == ""
        assert record.gnomad_af == ""
        assert record.depth == "100"
        assert record.vaf == ""

    def test_primate_ai_fallback_score(self, make_variant, predictive_decision):
        """Test the PrimateAI column shows the sequence score when 3-D is absent."""
        record = variant_to_maf(make_variant(primate_ai=0.876543), predictive_decision)
        assert record.primate_ai_score == "0.8765"

    def test_gnomad_columns_use_exome(self, make_variant, predictive_decision):
        """Test gnomAD columns come from the exome block only."""
        variant = make_variant(population_frequencies=[
            PopulationFrequency(source="gnomad", all_af=0.5, eas_af=0.5),
        ])
        record = variant_to_maf(variant, predictive_decision)
        assert record.gnomad_af == ""
        assert record.gnomad_eas_af == ""
