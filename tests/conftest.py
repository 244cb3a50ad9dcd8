"""Pytest configuration and fixtures."""

import gzip
import json

import pytest


@pytest.fixture(autouse=True)
def fresh_run_logger():
    """Reset the global run logger between tests."""
    from varsift.utils.logging_config import reset_logger

    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def default_config():
    """Filter configuration with default thresholds."""
    from varsift.models.config import FilterConfig

    return FilterConfig()


@pytest.fixture
def make_variant():
    """Factory for variant calls that pass quality unless overridden."""
    from varsift.models.variant import VariantCall

    def _make(**overrides):
        fields = {
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
        fields.update(overrides)
        return VariantCall(**fields)

    return _make


@pytest.fixture
def make_clinvar():
    """Factory for ClinVar submissions."""
    from varsift.models.evidence.clinvar import ClinVarSubmission

    def _make(significance, review_status="criteria provided, single submitter", **overrides):
        if isinstance(significance, str):
            significance = [significance]
        return ClinVarSubmission(
            significance=significance,
            review_status=review_status,
            **overrides,
        )

    return _make


@pytest.fixture
def braf_v600e(make_variant, make_clinvar):
    """BRAF V600E call with a MANE transcript and expert-panel ClinVar evidence."""
    from varsift.models.evidence.cosmic import CosmicEntry
    from varsift.models.variant import PopulationFrequency, TranscriptAnnotation

    return make_variant(
        transcripts=[
            TranscriptAnnotation(
                transcript_id="NM_001354609.2",
                gene_symbol="BRAF",
                consequence=["missense_variant"],
            ),
            TranscriptAnnotation(
                transcript_id="NM_004333.6",
                source="RefSeq",
                gene_symbol="BRAF",
                consequence=["missense_variant"],
                impact="moderate",
                amino_acids="V/E",
                cdna_pos="1919",
                cds_pos="1799",
                exons="15/18",
                codons="gTg/gAg",
                protein_pos="600",
                hgvsc="NM_004333.6:c.1799T>A",
                hgvsp="NP_004324.2:p.Val600Glu",
                is_canonical=True,
                is_mane_select=True,
            ),
        ],
        clinvar=[
            make_clinvar(
                "Pathogenic",
                review_status="reviewed by expert panel",
                id="RCV000014992.30",
                phenotypes=["Melanoma"],
                last_evaluated="2021-06-01",
            ),
        ],
        cosmic=[CosmicEntry(id="COSV56056643", gene="BRAF")],
        population_frequencies=[
            PopulationFrequency(source="gnomad-exome", all_af=0.000004, eas_af=0.0),
        ],
        dbsnp_ids=["rs113488022"],
        primate_ai_3d=0.95,
        revel_score=0.93,
        dann_score=0.99,
    )


def nirvana_position(
    chromosome="chr7",
    position=140453136,
    ref="A",
    alts=("T",),
    filters=("PASS",),
    depth=100,
    vaf=0.45,
    variant=None,
):
    """Build one Nirvana ``positions`` entry."""
    if variant is None:
        variant = {
            "vid": f"{chromosome}-{position}-{ref}-{alts[0]}",
            "chromosome": chromosome,
            "begin": position,
            "end": position,
            "refAllele": ref,
            "altAllele": alts[0],
            "variantType": "SNV",
        }
    return {
        "chromosome": chromosome,
        "position": position,
        "refAllele": ref,
        "altAlleles": list(alts),
        "filters": list(filters),
        "samples": [{"genotype": "0/1", "totalDepth": depth, "variantFrequencies": [vaf]}],
        "variants": [variant],
    }


@pytest.fixture
def make_position():
    """Factory for Nirvana ``positions`` entries."""
    return nirvana_position


NIRVANA_HEADER = {
    "annotator": "Nirvana 3.18.1",
    "creationTime": "2024-01-15 10:30:00",
    "genomeAssembly": "GRCh38",
    "schemaVersion": 6,
    "dataVersion": "91.26.57",
    "dataSources": [
        {"name": "ClinVar", "version": "20231230", "releaseDate": "2023-12-30"},
    ],
    "samples": ["TUMOR"],
}


@pytest.fixture
def nirvana_document():
    """Nirvana document with a pathogenic, a benign and a low-depth call."""
    pathogenic = nirvana_position()
    pathogenic["variants"][0].update({
        "dbsnp": ["rs113488022"],
        "clinvar": [
            {
                "id": "RCV000014992.30",
                "variantId": "13961",
                "reviewStatus": "reviewed by expert panel",
                "significance": ["pathogenic"],
                "phenotypes": ["Melanoma"],
                "lastEvaluated": "2021-06-01",
            }
        ],
        "gnomad-exome": {"allAf": 0.000004, "easAf": 0.0},
        "primateAI-3D": [{"score": 0.95, "classification": "pathogenic"}],
        "revel": {"score": 0.93},
        "dannScore": 0.99,
        "transcripts": [
            {
                "transcript": "NM_004333.6",
                "source": "RefSeq",
                "hgnc": "BRAF",
                "consequence": ["missense_variant"],
                "hgvsc": "NM_004333.6:c.1799T>A",
                "hgvsp": "NP_004324.2:p.Val600Glu",
                "isCanonical": True,
                "isManeSelect": True,
            }
        ],
    })

    unremarkable = nirvana_position(chromosome="chr1", position=1000, ref="G", alts=("C",))
    low_depth = nirvana_position(chromosome="chr2", position=2000, ref="C", alts=("T",), depth=5)
    reference_only = nirvana_position(chromosome="chr3", position=3000)
    reference_only["variants"] = []

    return {
        "header": NIRVANA_HEADER,
        "positions": [pathogenic, unremarkable, low_depth, reference_only],
    }


@pytest.fixture
def nirvana_header():
    """Nirvana header block."""
    return dict(NIRVANA_HEADER)


@pytest.fixture
def nirvana_file(tmp_path, nirvana_document):
    """Gzipped Nirvana file written from ``nirvana_document``."""
    path = tmp_path / "sample.json.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        json.dump(nirvana_document, f)
    return path
