"""Centralized constants and mappings for varsift.

This module consolidates the lookup tables that encode filtering policy:
- ClinVar review-status tiers (evidence strength ordering)
- Cancer keywords for phenotype matching
- SO consequence term to MAF classification rules
- Variant type codes and amino acid codes
- Population frequency sources and predictor names
"""

from enum import IntEnum


# =============================================================================
# CLINVAR REVIEW STATUS
# =============================================================================
# Lower tier = stronger evidence. Tiers are totally ordered.

class ReviewStatusTier(IntEnum):
    """ClinVar review-status strength tiers (1 = strongest)."""

    PRACTICE_GUIDELINE = 1
    EXPERT_PANEL = 2
    MULTIPLE_SUBMITTERS_NO_CONFLICT = 3
    CONFLICTING = 4
    SINGLE_SUBMITTER = 5
    NO_ASSERTION_CRITERIA = 6
    NO_ASSERTION_PROVIDED = 7
    UNKNOWN = 8


# Checked in order; every substring in a rule must appear in the lowercased
# review status for the rule to match.
REVIEW_STATUS_RULES: tuple[tuple[tuple[str, ...], ReviewStatusTier], ...] = (
    (("practice guideline",), ReviewStatusTier.PRACTICE_GUIDELINE),
    (("reviewed by expert panel",), ReviewStatusTier.EXPERT_PANEL),
    (("multiple submitters", "no conflict"), ReviewStatusTier.MULTIPLE_SUBMITTERS_NO_CONFLICT),
    (("conflicting",), ReviewStatusTier.CONFLICTING),
    (("single submitter",), ReviewStatusTier.SINGLE_SUBMITTER),
    (("no assertion criteria provided",), ReviewStatusTier.NO_ASSERTION_CRITERIA),
    (("no assertion provided",), ReviewStatusTier.NO_ASSERTION_PROVIDED),
)

# Highest tier value still considered high / medium confidence
HIGH_CONFIDENCE_MAX_TIER = ReviewStatusTier.EXPERT_PANEL
MEDIUM_CONFIDENCE_MAX_TIER = ReviewStatusTier.CONFLICTING


# =============================================================================
# CANCER KEYWORDS
# =============================================================================
# A ClinVar phenotype containing any of these is treated as cancer-related

CANCER_KEYWORDS: frozenset[str] = frozenset({
    "cancer",
    "carcinoma",
    "tumor",
    "tumour",
    "malignant",
    "neoplasm",
    "lymphoma",
    "leukemia",
    "leukaemia",
    "sarcoma",
    "melanoma",
    "glioma",
    "blastoma",
    "myeloma",
    "adenocarcinoma",
})

# Delimiters used when splitting co-expressed significance labels
# e.g. "Pathogenic/Likely pathogenic"
SIGNIFICANCE_DELIMITERS: str = "/,;"


# =============================================================================
# CONSEQUENCE CLASSIFICATION
# =============================================================================
# Ordered SO-term substring rules. The first consequence term matching any
# rule wins, so order here is significant.

CONSEQUENCE_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("missense",), "Missense_Mutation"),
    (("nonsense", "stop_gained"), "Nonsense_Mutation"),
    (("frameshift",), "Frame_Shift_Del"),
    (("splice_acceptor", "splice_donor"), "Splice_Site"),
    (("inframe_deletion",), "In_Frame_Del"),
    (("inframe_insertion",), "In_Frame_Ins"),
    (("start_lost",), "Translation_Start_Site"),
    (("stop_lost",), "Nonstop_Mutation"),
    (("synonymous",), "Silent"),
    (("5_prime_utr",), "5'UTR"),
    (("3_prime_utr",), "3'UTR"),
    (("intron",), "Intron"),
)


# =============================================================================
# VARIANT TYPE CODES
# =============================================================================
# Nirvana variant type tag -> MAF Variant_Type. Unknown tags pass through.

VARIANT_TYPE_MAP: dict[str, str] = {
    "SNV": "SNP",
    "insertion": "INS",
    "deletion": "DEL",
    "MNV": "DNP",
}


# =============================================================================
# AMINO ACID CODES
# =============================================================================
# HGVS three-letter residue codes (as written in HGVS, title case) to one-letter.
# None of these is a substring of another, so replacement order is irrelevant.

HGVS_AMINO_ACID_3TO1: dict[str, str] = {
    'Ala': 'A', 'Arg': 'R', 'Asn': 'N', 'Asp': 'D', 'Cys': 'C',
    'Gln': 'Q', 'Glu': 'E', 'Gly': 'G', 'His': 'H', 'Ile': 'I',
    'Leu': 'L', 'Lys': 'K', 'Met': 'M', 'Phe': 'F', 'Pro': 'P',
    'Ser': 'S', 'Thr': 'T', 'Trp': 'W', 'Tyr': 'Y', 'Val': 'V',
    'Ter': '*',
}


# =============================================================================
# POPULATION FREQUENCY SOURCES
# =============================================================================

GNOMAD_SOURCE = "gnomad"
GNOMAD_EXOME_SOURCE = "gnomad-exome"
ONEKG_SOURCE = "oneKg"

# Sources consulted for the East Asian AF check, in priority order,
# with the display name used in failure reasons
EAS_AF_SOURCES: tuple[tuple[str, str], ...] = (
    (GNOMAD_EXOME_SOURCE, "gnomAD-exome"),
    (ONEKG_SOURCE, "1000G"),
)


# =============================================================================
# PREDICTOR NAMES
# =============================================================================

PRIMATE_AI_3D = "PrimateAI-3D"
PRIMATE_AI = "PrimateAI"
REVEL = "REVEL"
DANN = "DANN"
COSMIC = "COSMIC"

# Nominal value recorded for COSMIC presence
COSMIC_PRESENCE_SCORE = 1.0


# =============================================================================
# FILTERS
# =============================================================================

PASS_FILTER = "PASS"
