"""Tests for the quality gate."""

import pytest

from varsift.filters.quality import (
    apply_quality_filters,
    check_population_frequency,
    check_sequencing_quality,
    get_eas_af,
)
from varsift.models.assessment import QualityFailure
from varsift.models.config import FilterConfig
from varsift.models.variant import PopulationFrequency


class TestApplyQualityFilters:
    """Tests for the full quality gate."""

    def test_passing_call(self, make_variant, default_config):
        """Test a PASS call with good depth and VAF passes."""
        verdict = apply_quality_filters(make_variant(), default_config)
        assert verdict.passed
        assert verdict.failure_reason is None
        assert verdict.failure_category is None
        assert verdict.depth == 100
        assert verdict.vaf == 0.45

    def test_low_depth_rejected(self, make_variant, default_config):
        """Test depth 20 against minimum 30 fails with a depth reason."""
        verdict = apply_quality_filters(make_variant(total_depth=20), default_config)
        assert not verdict.passed
        assert verdict.failure_category == QualityFailure.DEPTH
        assert "depth" in verdict.failure_reason
        assert verdict.failure_reason == "Low sequencing depth (20 < 30)"

    def test_failed_vcf_filters(self, make_variant, default_config):
        """Test non-PASS filter flags fail first."""
        verdict = apply_quality_filters(
            make_variant(filters=["LowQual", "StrandBias"], total_depth=5), default_config
        )
        assert not verdict.passed
        assert verdict.failure_category == QualityFailure.FILTER
        assert verdict.failure_reason == "Failed VCF filters: [LowQual, StrandBias]"

    def test_pass_with_extra_flag_fails(self, make_variant, default_config):
        """Test filters must be exactly PASS."""
        verdict = apply_quality_filters(make_variant(filters=["PASS", "LowQual"]), default_config)
        assert not verdict.passed
        assert verdict.failure_category == QualityFailure.FILTER

    def test_empty_filters_fail(self, make_variant, default_config):
        """Test an empty filter list is not PASS."""
        verdict = apply_quality_filters(make_variant(filters=[]), default_config)
        assert not verdict.passed
        assert verdict.failure_reason == "Failed VCF filters: []"

    def test_depth_checked_before_vaf(self, make_variant, default_config):
        """Test the first failing check decides the reason."""
        verdict = apply_quality_filters(
            make_variant(total_depth=10, variant_frequencies=[0.01]), default_config
        )
        assert verdict.failure_category == QualityFailure.DEPTH

    def test_low_vaf_rejected(self, make_variant, default_config):
        """Test VAF below the minimum fails with 4-decimal formatting."""
        verdict = apply_quality_filters(make_variant(variant_frequencies=[0.01]), default_config)
        assert not verdict.passed
        assert verdict.failure_category == QualityFailure.VAF
        assert verdict.failure_reason == "Low variant frequency (0.0100 < 0.03)"

    def test_high_population_af_rejected(self, make_variant, default_config):
        """Test common East Asian variants fail the population check."""
        variant = make_variant(population_frequencies=[
            PopulationFrequency(source="gnomad-exome", eas_af=0.05),
        ])
        verdict = apply_quality_filters(variant, default_config)
        assert not verdict.passed
        assert verdict.failure_category == QualityFailure.POPULATION_AF
        assert verdict.failure_reason == "High East Asian AF in gnomAD-exome (0.0500 > 0.01)"
        assert verdict.population_af_used == 0.05

    def test_boundary_values_pass(self, make_variant, default_config):
        """Test values exactly at the thresholds pass."""
        variant = make_variant(
            total_depth=30,
            variant_frequencies=[0.03],
            population_frequencies=[PopulationFrequency(source="gnomad-exome", eas_af=0.01)],
        )
        assert apply_quality_filters(variant, default_config).passed


class TestCheckSequencingQuality:
    """Tests for depth and VAF checks."""

    def test_missing_depth(self, make_variant, default_config):
        """Test missing depth fails."""
        result = check_sequencing_quality(make_variant(total_depth=None), default_config)
        assert result == (QualityFailure.DEPTH, "Missing sequencing depth")

    def test_missing_vaf(self, make_variant, default_config):
        """Test missing VAF fails."""
        result = check_sequencing_quality(make_variant(variant_frequencies=None), default_config)
        assert result == (QualityFailure.VAF, "Missing variant frequency")

    def test_empty_vaf_list(self, make_variant, default_config):
        """Test an empty frequency list counts as missing."""
        result = check_sequencing_quality(make_variant(variant_frequencies=[]), default_config)
        assert result == (QualityFailure.VAF, "Missing variant frequency")

    def test_only_first_vaf_used(self, make_variant, default_config):
        """Test the first alternate allele's VAF is the one compared."""
        variant = make_variant(variant_frequencies=[0.01, 0.5])
        result = check_sequencing_quality(variant, default_config)
        assert result[0] == QualityFailure.VAF

    def test_custom_thresholds(self, make_variant):
        """Test thresholds come from the configuration."""
        config = FilterConfig(min_total_depth=200)
        result = check_sequencing_quality(make_variant(), config)
        assert result == (QualityFailure.DEPTH, "Low sequencing depth (100 < 200)")


class TestCheckPopulationFrequency:
    """Tests for the East Asian allele frequency check."""

    def test_no_population_data_passes(self, make_variant, default_config):
        """Test absent frequency data does not fail the call."""
        assert check_population_frequency(make_variant(), default_config) == (None, None)

    def test_gnomad_exome_preferred(self, make_variant, default_config):
        """Test gnomAD-exome is consulted before 1000 Genomes."""
        variant = make_variant(population_frequencies=[
            PopulationFrequency(source="oneKg", eas_af=0.2),
            PopulationFrequency(source="gnomad-exome", eas_af=0.001),
        ])
        reason, af = check_population_frequency(variant, default_config)
        assert reason is None
        assert af == 0.001

    def test_falls_back_to_one_kg(self, make_variant, default_config):
        """Test 1000 Genomes is used when gnomAD-exome has no EAS value."""
        variant = make_variant(population_frequencies=[
            PopulationFrequency(source="gnomad-exome", all_af=0.001),
            PopulationFrequency(source="oneKg", eas_af=0.2),
        ])
        reason, af = check_population_frequency(variant, default_config)
        assert reason == "High East Asian AF in 1000G (0.2000 > 0.01)"
        assert af == 0.2

    def test_genome_gnomad_not_consulted(self, make_variant, default_config):
        """Test the genome gnomAD block does not drive the EAS check."""
        variant = make_variant(population_frequencies=[
            PopulationFrequency(source="gnomad", eas_af=0.5),
        ])
        assert check_population_frequency(variant, default_config) == (None, None)

    @pytest.mark.parametrize("source", ["gnomad-exome", "oneKg"])
    def test_get_eas_af(self, make_variant, source):
        """Test EAS AF lookup by source."""
        variant = make_variant(population_frequencies=[
            PopulationFrequency(source=source, eas_af=0.004),
        ])
        assert get_eas_af(variant, source) == 0.004
        assert get_eas_af(variant, "unknown") is None
