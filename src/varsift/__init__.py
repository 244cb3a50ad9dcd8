"""varsift: pathogenicity filtering of Nirvana-annotated variants into MAF."""

__version__ = "0.5.0"
