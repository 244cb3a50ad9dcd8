"""Annotation mapping from Nirvana transcripts to MAF fields.

This module maps the annotations of a filtered variant call onto MAF columns:
- Canonical transcript selection (MANE Select, else first listed)
- SO consequence terms to MAF Variant_Classification (first match wins)
- Nirvana variant types to MAF Variant_Type (SNV → SNP, ...)
- HGVS protein notation to short form (NP_004324.2:p.Val600Glu → p.V600E)

"""

from varsift.constants import (
    CONSEQUENCE_RULES,
    GNOMAD_EXOME_SOURCE,
    HGVS_AMINO_ACID_3TO1,
    VARIANT_TYPE_MAP,
)
from varsift.models.assessment import Decision, EvidenceSource
from varsift.models.maf import MAFRecord
from varsift.models.variant import TranscriptAnnotation, VariantCall


class AnnotationMapper:
    """Maps variant annotations to MAF representations."""

    CONSEQUENCE_RULES = CONSEQUENCE_RULES
    VARIANT_TYPE_MAP = VARIANT_TYPE_MAP
    AA_3TO1 = HGVS_AMINO_ACID_3TO1

    PROTEIN_PREFIX = "p."
    ACCESSION_SEPARATOR = ":p."

    @staticmethod
    def select_canonical_transcript(
        transcripts: list[TranscriptAnnotation],
    ) -> TranscriptAnnotation | None:
        """Pick the MANE Select transcript, else the first one listed.

        Args:
            transcripts: Transcript annotations in source order

        Returns:
            The chosen transcript, or None when there are none
        """
        for transcript in transcripts:
            if transcript.is_mane_select is True:
                return transcript
        return transcripts[0] if transcripts else None

    @classmethod
    def map_variant_classification(cls, consequences: list[str]) -> str:
        """Map SO consequence terms to a MAF Variant_Classification.

        Terms are scanned in their listed order and the first term matching
        any rule decides the label, even if a later term is more severe.

        e.g.
        ["synonymous_variant", "missense_variant"] -> "Silent"
        """
        for consequence in consequences:
            term = consequence.lower()
            for substrings, classification in cls.CONSEQUENCE_RULES:
                if any(s in term for s in substrings):
                    return classification
        return ""

    @classmethod
    def map_variant_type(cls, variant_type: str) -> str:
        """Map a Nirvana variant type to MAF Variant_Type; unknown types pass through."""
        return cls.VARIANT_TYPE_MAP.get(variant_type, variant_type)

    @classmethod
    def shorten_hgvsp(cls, hgvsp: str | None) -> str:
        """Shorten HGVS protein notation to one-letter amino acid codes.

        Args:
            hgvsp: Full HGVS protein string, with or without accession prefix

        Returns:
            Short notation; strings not in ``p.`` form are returned unchanged

        e.g.
        NP_004324.2:p.Val600Glu -> p.V600E
        p.Arg213Ter -> p.R213*
        """
        if not hgvsp:
            return ""

        marker = hgvsp.find(cls.ACCESSION_SEPARATOR)
        if marker != -1:
            protein = hgvsp[marker + 1:]
        elif hgvsp.startswith(cls.PROTEIN_PREFIX):
            protein = hgvsp
        else:
            return hgvsp

        for three_letter, one_letter in cls.AA_3TO1.items():
            protein = protein.replace(three_letter, one_letter)
        return protein

    @classmethod
    def variant_to_maf(cls, variant: VariantCall, decision: Decision) -> MAFRecord:
        """Build the MAF row for an included call.

        Args:
            variant: The variant call
            decision: Decision for the call; ClinVar columns are filled only
                when the decision rests on ClinVar evidence

        Returns:
            MAFRecord with missing values rendered as empty strings
        """
        transcript = cls.select_canonical_transcript(variant.transcripts)
        if transcript is None:
            transcript = TranscriptAnnotation()

        clinvar_id = clinvar_review_status = clinvar_significance = clinvar_disease = ""
        if decision.primary_evidence == EvidenceSource.CLINVAR:
            entry = decision.clinvar_entry
            if entry is None and variant.clinvar:
                entry = variant.clinvar[0]
            if entry is not None:
                clinvar_id = entry.id or ""
                clinvar_review_status = entry.review_status or ""
                clinvar_significance = entry.joined_significance()
                clinvar_disease = "; ".join(entry.phenotypes)

        gnomad_exome = variant.population_frequency(GNOMAD_EXOME_SOURCE)

        return MAFRecord(
            hugo_symbol=transcript.gene_symbol or "",
            chromosome=variant.chromosome,
            start_position=variant.start,
            end_position=variant.end,
            strand="+",
            variant_classification=cls.map_variant_classification(transcript.consequence),
            variant_type=cls.map_variant_type(variant.variant_type),
            reference_allele=variant.reference_allele,
            tumor_seq_allele1=variant.reference_allele,
            tumor_seq_allele2=variant.alternate_allele,
            tumor_sample_barcode="",
            hgvsc=transcript.hgvsc or "",
            hgvsp=transcript.hgvsp or "",
            hgvsp_short=cls.shorten_hgvsp(transcript.hgvsp),
            transcript_id=transcript.transcript_id or "",
            exon=transcript.exons or "",
            consequence=",".join(transcript.consequence),
            impact=(transcript.impact or "").upper(),
            codons=transcript.codons or "",
            amino_acids=transcript.amino_acids or "",
            cdna_position=transcript.cdna_pos or "",
            cds_position=transcript.cds_pos or "",
            protein_position=transcript.protein_pos or "",
            dbsnp_rs=variant.dbsnp_ids[0] if variant.dbsnp_ids else "",
            dbsnp_val_status="",
            cosmic_id=(variant.cosmic[0].id or "") if variant.cosmic else "",
            clinvar_id=clinvar_id,
            clinvar_review_status=clinvar_review_status,
            clinvar_significance=clinvar_significance,
            clinvar_disease=clinvar_disease,
            primate_ai_score=format_optional(variant.primary_predictor_score, 4),
            dann_score=format_optional(variant.dann_score, 4),
            revel_score=format_optional(variant.revel_score, 4),
            gnomad_af=format_optional(gnomad_exome.all_af if gnomad_exome else None, 6),
            gnomad_eas_af=format_optional(gnomad_exome.eas_af if gnomad_exome else None, 6),
            depth=str(variant.total_depth) if variant.total_depth is not None else "",
            vaf=format_optional(variant.vaf, 4),
        )


# Convenience functions for common operations

def format_optional(value: float | None, decimals: int) -> str:
    """Format a number to fixed decimals; None becomes an empty string.

    Examples:
        >>> format_optional(0.85, 4)
        '0.8500'

        >>> format_optional(None, 4)
        ''
    """
    if value is None:
        return ""
    return f"{value:.{decimals}f}"


def shorten_hgvsp(hgvsp: str | None) -> str:
    """Shorten HGVS protein notation.

    Examples:
        >>> shorten_hgvsp('NP_004324.2:p.Val600Glu')
        'p.V600E'

        >>> shorten_hgvsp('p.Arg132His')
        'p.R132H'
    """
    return AnnotationMapper.shorten_hgvsp(hgvsp)


def map_variant_classification(consequences: list[str]) -> str:
    """Map consequence terms to a MAF Variant_Classification.

    Examples:
        >>> map_variant_classification(['missense_variant'])
        'Missense_Mutation'

        >>> map_variant_classification(['synonymous_variant', 'missense_variant'])
        'Silent'
    """
    return AnnotationMapper.map_variant_classification(consequences)


def map_variant_type(variant_type: str) -> str:
    """Map a Nirvana variant type to MAF Variant_Type.

    Examples:
        >>> map_variant_type('SNV')
        'SNP'

        >>> map_variant_type('complex')
        'complex'
    """
    return AnnotationMapper.map_variant_type(variant_type)


def variant_to_maf(variant: VariantCall, decision: Decision) -> MAFRecord:
    """Build the MAF row for an included call."""
    return AnnotationMapper.variant_to_maf(variant, decision)
