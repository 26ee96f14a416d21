"""bola-scan: flag callers that reach more than one user_id in an access log."""

import logging
import sys
from argparse import ArgumentParser

from bola_detector.config import load_config, load_yaml_config
from bola_detector.detector import scan_file
from bola_detector.errors import ConfigError, SourceUnavailableError
from bola_detector.formatter import OUTPUT_FORMATS, render_report
from bola_detector.reader import prompt_for_path
from bola_detector.stats import compute_stats, format_stats_json, format_stats_text
from bola_detector.tracker import AccessHistory


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="bola-scan",
        description="Detect possible Broken Object Level Authorization in an access log.",
    )
    parser.add_argument(
        "log_file",
        nargs="?",
        help="Access log path, one JSON record per line ('-' for stdin). "
             "Prompted for when omitted.",
    )
    parser.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show scan statistics instead of the findings",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        help="Diagnostic log level on stderr (default: WARNING)",
    )
    return parser


def run(args) -> int:
    """Load config, scan the log, print the report. Returns the exit code."""
    try:
        config = load_config(args, load_yaml_config(args.config))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logging.getLogger().setLevel(config.log_level)

    path = config.log_file or prompt_for_path()
    history = AccessHistory()
    try:
        result = scan_file(path, history=history)
    except SourceUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.show_stats:
        stats = compute_stats(result, history)
        if config.output_format == "json":
            print(format_stats_json(stats))
        else:
            print(format_stats_text(stats))
    else:
        report = render_report(result.findings, config.output_format)
        if report:
            print(report)

    # read errors are already logged by the scan
    return 1 if result.read_error else 0


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [BOLA] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args()
    return run(args)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
