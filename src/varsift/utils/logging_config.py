"""Logging configuration for varsift runs.

Provides console logging for the ``varsift`` logger hierarchy and an optional
JSONL audit trail with one entry per run event (start, summary, error).
Audit entries go through the ``varsift.audit`` logger at DEBUG level and
only that logger's file handler writes them.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from varsift.models.config import FilterConfig
from varsift.models.stats import FilterStats


class RunLogger:
    """Logger for filtering runs with structured audit output."""

    def __init__(
        self,
        log_dir: Path | None = None,
        enable_file_logging: bool = True,
        verbose: bool = False,
        quiet: bool = False,
    ):
        """Initialize the run logger.

        Args:
            log_dir: Directory for audit files. Defaults to ./logs
            enable_file_logging: Whether to write the JSONL audit file
            verbose: Emit DEBUG messages from library modules on the console
            quiet: Only show warnings and errors on the console
        """
        if verbose:
            console_level = logging.DEBUG
        elif quiet:
            console_level = logging.WARNING
        else:
            console_level = logging.INFO

        self.logger = logging.getLogger("varsift")
        self.logger.setLevel(console_level)

        # Remove existing handlers to avoid duplicates
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(console_handler)

        self.audit_logger = logging.getLogger("varsift.audit")
        self.audit_logger.setLevel(logging.DEBUG)
        self.audit_logger.propagate = False
        for handler in self.audit_logger.handlers:
            handler.close()
        self.audit_logger.handlers.clear()

        self.log_file: Path | None = None
        self.file_handler: logging.FileHandler | None = None
        if enable_file_logging:
            if log_dir is None:
                log_dir = Path("./logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d")
            self.log_file = log_dir / f"varsift_runs_{timestamp}.jsonl"

            self.file_handler = logging.FileHandler(self.log_file)
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter('%(message)s'))
            # Only audit entries go to the file
            self.file_handler.addFilter(lambda record: record.levelno == logging.DEBUG)
            self.audit_logger.addHandler(self.file_handler)

            self.logger.info(f"Run audit logging enabled: {self.log_file}")

    def _write_event(self, entry: dict) -> None:
        self.audit_logger.debug(json.dumps(entry))

    def log_run_start(self, input_path: str, output_path: str, config: FilterConfig, workers: int) -> str:
        """Log the start of a run.

        Returns:
            Run ID for tracking
        """
        run_id = f"run_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"

        self._write_event({
            "timestamp": datetime.now().isoformat(),
            "event_type": "run_start",
            "run_id": run_id,
            "input": input_path,
            "output": output_path,
            "workers": workers,
            "config": config.model_dump(),
        })

        self.logger.info(f"Filtering {input_path} → {output_path} ({workers} worker(s))")
        return run_id

    def log_run_summary(self, run_id: str, stats: FilterStats, records_written: int) -> None:
        """Log the final tallies of a run."""
        self._write_event({
            "timestamp": datetime.now().isoformat(),
            "event_type": "run_summary",
            "run_id": run_id,
            "records_written": records_written,
            "stats": stats.model_dump(),
        })

        self.logger.info(
            f"Run complete: {stats.included} included, {stats.excluded} excluded, "
            f"{stats.total - stats.passed_quality} failed quality"
        )

    def log_run_error(self, run_id: str | None, error: Exception) -> None:
        """Log a fatal run error."""
        self._write_event({
            "timestamp": datetime.now().isoformat(),
            "event_type": "run_error",
            "run_id": run_id,
            "error": {
                "type": type(error).__name__,
                "message": str(error),
            },
        })

        self.logger.error(f"Run failed: {error}")

    def close(self) -> None:
        """Close console and audit handlers."""
        for log in (self.logger, self.audit_logger):
            for handler in log.handlers:
                handler.close()
            log.handlers.clear()


# Global logger instance
_global_logger: RunLogger | None = None


def get_logger(
    log_dir: Path | None = None,
    enable_file_logging: bool = True,
    verbose: bool = False,
    quiet: bool = False,
) -> RunLogger:
    """Get or create the global run logger."""
    global _global_logger

    if _global_logger is None:
        _global_logger = RunLogger(
            log_dir=log_dir,
            enable_file_logging=enable_file_logging,
            verbose=verbose,
            quiet=quiet,
        )

    return _global_logger


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
