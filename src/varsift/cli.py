"""Command-line interface for varsift.

ARCHITECTURE:
    CLI Commands → parse_nirvana_json → FilterEngine → MAFWriter

Three commands: convert (filter one Nirvana file), merge (combine MAF files), version

Key Design:
- Typer framework for auto-help and type validation
- Every threshold can come from a VARSIFT_* environment variable (.env supported)
- Library errors become a one-line message and exit code 1
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from varsift.engine import FilterEngine
from varsift.formats.maf import MAFWriteError, MAFWriter, merge_maf_files
from varsift.formats.nirvana import NirvanaParseError, parse_nirvana_json
from varsift.models.config import FilterConfig
from varsift.utils.logging_config import get_logger

load_dotenv()

app = typer.Typer(
    name="varsift",
    help="Pathogenic variant filtering for Nirvana JSON into MAF",
    add_completion=False,
)


def build_config(**thresholds) -> FilterConfig:
    """Validate CLI thresholds, exiting with the offending field on error."""
    try:
        return FilterConfig(**thresholds)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            typer.echo(f"Error: invalid value for {field}: {error['msg']}", err=True)
        raise typer.Exit(1)


@app.command()
def convert(
    input_file: Path = typer.Argument(..., help="Nirvana JSON(.gz) file"),
    output: Path = typer.Option(..., "--output", "-o", help="Output MAF file"),
    min_depth: int = typer.Option(30, "--min-depth", envvar="VARSIFT_MIN_DEPTH", help="Minimum sequencing depth"),
    min_vaf: float = typer.Option(0.03, "--min-vaf", envvar="VARSIFT_MIN_VAF", help="Minimum variant allele frequency"),
    max_eas_af: float = typer.Option(0.01, "--max-eas-af", envvar="VARSIFT_MAX_EAS_AF", help="Maximum East Asian population AF"),
    min_revel: float = typer.Option(0.75, "--min-revel", envvar="VARSIFT_MIN_REVEL", help="REVEL score threshold"),
    min_primate_ai: float = typer.Option(0.8, "--min-primate-ai", envvar="VARSIFT_MIN_PRIMATE_AI", help="PrimateAI-3D score threshold"),
    min_dann: float = typer.Option(0.96, "--min-dann", envvar="VARSIFT_MIN_DANN", help="DANN score threshold"),
    exclude_benign: bool = typer.Option(False, "--exclude-benign", envvar="VARSIFT_EXCLUDE_BENIGN", help="Exclude ClinVar benign/likely benign variants"),
    threads: Optional[int] = typer.Option(None, "--threads", "-j", min=1, envvar="VARSIFT_THREADS", help="Worker processes (defaults to CPU count)"),
    stats: Optional[Path] = typer.Option(None, "--stats", help="Write the statistics report to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print configuration and progress steps"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No progress bar or info logging"),
    log: bool = typer.Option(True, "--log/--no-log", help="Enable JSONL run audit logging"),
) -> None:
    """Filter pathogenic variants from a Nirvana JSON file into a MAF file."""
    config = build_config(
        min_total_depth=min_depth,
        min_variant_frequency=min_vaf,
        max_eas_af=max_eas_af,
        min_revel_score=min_revel,
        min_primate_ai_score=min_primate_ai,
        min_dann_score=min_dann,
        exclude_benign=exclude_benign,
    )
    workers = threads or os.cpu_count() or 1

    run_logger = get_logger(enable_file_logging=log, verbose=verbose, quiet=quiet)

    if not input_file.exists():
        typer.echo(f"Error: Input file does not exist: {input_file}", err=True)
        raise typer.Exit(1)

    if verbose:
        print(f"\nStarting processing: {input_file}")
        print(f"Output file: {output}")
        print(f"Number of workers: {workers}")
        print(config.to_report())

    run_id = run_logger.log_run_start(str(input_file), str(output), config, workers)

    try:
        if verbose:
            print("\n[1/3] Parsing Nirvana JSON...")
        _header, variants = parse_nirvana_json(input_file)

        if verbose:
            print(f"  ✓ Parsed {len(variants)} variants")
            print("\n[2/3] Filtering variants...")

        engine = FilterEngine(config)
        if quiet:
            result = engine.process_batch(variants, workers=workers)
        else:
            with typer.progressbar(length=len(variants), label="Filtering variants") as progress:
                result = engine.process_batch(variants, workers=workers, progress=progress.update)

        if verbose:
            print(f"  ✓ Filtered {result.stats.included} / {len(variants)} variants")
            print("\n[3/3] Writing MAF file...")

        with MAFWriter(output) as writer:
            writer.write_records(result.records)
            writer.flush()
            records_written = writer.records_written

        if verbose:
            print(f"  ✓ Successfully wrote {records_written} records to {output}")

    except (NirvanaParseError, MAFWriteError) as e:
        run_logger.log_run_error(run_id, e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    run_logger.log_run_summary(run_id, result.stats, records_written)

    if verbose or stats:
        report = result.stats.to_report(workers)
        print(report)
        if stats:
            try:
                stats.write_text(report)
            except OSError as e:
                typer.echo(f"Error: Failed to write statistics report: {e}", err=True)
                raise typer.Exit(1)
            print(f"Statistics report written to: {stats}")

    print(f"\n✓ Processing complete! ({records_written} variants written to {output})")


@app.command()
def merge(
    inputs: List[Path] = typer.Argument(..., help="MAF files to merge, in order"),
    output: Path = typer.Option(..., "--output", "-o", help="Merged MAF file"),
) -> None:
    """Merge MAF files produced by earlier runs into one file."""
    try:
        records_written = merge_maf_files(inputs, output)
    except MAFWriteError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    print(f"Merged {records_written} records from {len(inputs)} file(s) into {output}")


@app.command()
def version() -> None:
    """Show version information."""
    from varsift import __version__
    print(f"varsift version {__version__}")


if __name__ == "__main__":
    app()
