"""Main entry point for timesheet summary system."""
import argparse
import logging
import re

from timesheet_summary.utilities import config, utils
from timesheet_summary.extractors import excel_reader
from timesheet_summary.loaders import excel_writer
from timesheet_summary.pipelines import pipeline

logger = logging.getLogger(__name__)

_MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")


def parse_month(month_str: str) -> str:
    """Validate a month key in YYYY-MM format."""
    if not _MONTH_PATTERN.match(month_str):
        raise argparse.ArgumentTypeError(f"Invalid month format: {month_str}. Use YYYY-MM")
    return month_str


def main(argv=None):
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Summarise a timesheet export per project and task",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarise the whole file
  python main.py "Timesheet.xlsx"

  # List the months present in the file
  python main.py "Timesheet.xlsx" --list-months

  # Only January and February 2024, written to a workbook
  python main.py "Timesheet.xlsx" --months 2024-01 2024-02 --export summary.xlsx

  # Only selected projects
  python main.py "Timesheet.xlsx" --projects Alpha Leave
        """,
    )

    parser.add_argument(
        "timesheet",
        help="Timesheet export to summarise (.xlsx, .xls or .csv)",
    )

    parser.add_argument(
        "--months",
        nargs="+",
        type=parse_month,
        help="Months to include (YYYY-MM); all months if not provided",
    )

    parser.add_argument(
        "--projects",
        nargs="+",
        help="Project names to include; all projects if not provided",
    )

    parser.add_argument(
        "--export",
        nargs="?",
        const=config.DEFAULT_EXPORT_PATH,
        help=f"Write the summary workbook (default path: {config.DEFAULT_EXPORT_PATH})",
    )

    parser.add_argument(
        "--list-months",
        action="store_true",
        help="Print the months found in the file and exit",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level (default: INFO)",
    )

    args = parser.parse_args(argv)

    # Configure logging with detailed format
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    try:
        if args.list_months:
            data = excel_reader.load_timesheet_file(args.timesheet)
            for month in utils.available_months(data.rows):
                print(month)
            return 0

        summary = pipeline.run_summary_pipeline(
            file_path=args.timesheet,
            months=args.months,
            projects=args.projects,
            export_path=args.export,
        )
        table = excel_writer.build_export_frame(summary)
        print(table.fillna("").to_string(index=False))
        return 0
    except excel_reader.TimesheetDecodeError as exc:
        logger.error("✗ Could not read timesheet: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        return 130
    except Exception as exc:
        logger.error("="*70)
        logger.error("PIPELINE EXECUTION FAILED")
        logger.error("="*70)
        logger.exception("Fatal error: %s", exc)
        return 1


if __name__ == "__main__":
    exit(main())
