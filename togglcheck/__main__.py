"""Main module for the togglCheck package."""
import sys
import argparse
from typing import List, Optional

from .api.client import TogglClient
from .config import CheckConfig, load_environment, build_config
from .errors import TogglCheckError
from .reports.overlap_validator import ValidationReport, check_entries
from .utils.file_utils import write_csv, write_markdown
from .utils.format_utils import format_seconds

# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.
    
    Args:
        argv: Argument list (defaults to sys.argv[1:])
        
    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Check Toggl time entries for overlapping start and stop times.",
        epilog="""
Examples:
    # Check the entries of the API's default window
  togglcheck --token <api-token>
    ---
    # Check the last week, tolerating overlaps of up to 2 minutes
  togglcheck -t <api-token> --since "1 week" --allowed 2m
    ---
    # Check the last 30 days and export the overlaps to markdown and CSV
  togglcheck -t <api-token> -s 30d --md overlaps.md --csv june
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="togglcheck"
    )
    parser.add_argument('-t', '--token', help='Toggl API token (default: $TOGGL_API_TOKEN)')
    parser.add_argument('-s', '--since', help='Only check entries started within this duration, e.g. "7 days" (default: API default)')
    parser.add_argument('-a', '--allowed', help='Allowed window, e.g. "90" or "2 minutes" (default: 60 seconds)')
    parser.add_argument('--csv', help='Export overlaps to CSV (provide filename prefix)')
    parser.add_argument('--md', help='Export the report as markdown to the given file path')
    parser.add_argument('--overwrite', action='store_true', help='Explicitly overwrite the markdown file if it exists (DANGEROUS)')
    return parser.parse_args(argv)

def run_check(config: CheckConfig) -> ValidationReport:
    """Fetch the configured entries and check them for overlaps.
    
    Args:
        config: Settings for this run
        
    Returns:
        ValidationReport
    """
    client = TogglClient(config.token, config.base_url)
    entries = client.get_time_entries(config.since)
    return check_entries(entries, config.allowed_window)

def export_report(report: ValidationReport, config: CheckConfig, csv_prefix: Optional[str] = None,
                  md_path: Optional[str] = None, overwrite: bool = False) -> None:
    """Write the report to CSV and/or Markdown files."""
    if csv_prefix:
        csv_path = f"{csv_prefix}_overlaps.csv"
        count = write_csv(csv_path, report)
        print(f"[SUCCESS] {count} overlaps written to '{csv_path}'")
    if md_path:
        title = f"Overlap check (allowed window {format_seconds(config.allowed_window)})"
        write_markdown(md_path, report, title, overwrite)
        print(f"[SUCCESS] Markdown output written to '{md_path}'")

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    load_environment()
    args = parse_args(argv)
    
    try:
        config = build_config(args.token, args.since, args.allowed)
        report = run_check(config)
    except TogglCheckError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    
    print(report.render())
    export_report(report, config, args.csv, args.md, args.overwrite)

if __name__ == "__main__":
    main()
