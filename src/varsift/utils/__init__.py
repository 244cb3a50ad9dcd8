"""Utility functions."""

from varsift.utils.annotation_mapping import (
    AnnotationMapper,
    format_optional,
    map_variant_classification,
    map_variant_type,
    shorten_hgvsp,
    variant_to_maf,
)

__all__ = [
    'AnnotationMapper',
    'format_optional',
    'map_variant_classification',
    'map_variant_type',
    'shorten_hgvsp',
    'variant_to_maf',
]
