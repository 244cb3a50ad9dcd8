"""Evidence models from curated databases."""

from varsift.models.evidence.clinvar import ClinVarSubmission
from varsift.models.evidence.cosmic import CosmicEntry

__all__ = ["ClinVarSubmission", "CosmicEntry"]
