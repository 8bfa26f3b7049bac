"""Main entry point for the quarter distribution"""
import argparse
import os
import sys
from typing import Any, Dict, List

from quarter_ratio.allocation import DistributedRatio, DistributionValidator
from quarter_ratio.analysis import QuarterAnalyzer
from quarter_ratio.config import OUTPUT_FILE, QUARTERS_FILE
from quarter_ratio.exceptions import DistributedRatioError
from quarter_ratio.io import QuarterLoader, ResultSaver
from quarter_ratio.models import DistributedRatioConfig, REMAINDER_STRATEGIES
from quarter_ratio.models.ratio_config import parse_ratios
from quarter_ratio.utils import configure_logging


class OutputFormatter:
    """Formats and displays distribution results"""

    @staticmethod
    def print_results(total: float, before: List[Dict[str, Any]], after: List[Dict[str, Any]],
                      validation_issues: List[str], config: DistributedRatioConfig):
        """Pretty print distribution results"""
        print("\n" + "="*60)
        print("📋 DISTRIBUTION RESULTS")
        print("="*60)

        OutputFormatter._print_settings(total, config)
        OutputFormatter._print_table(before, after, config.qtr_val_key)
        OutputFormatter._print_validation_issues(validation_issues)

        print("\n" + "="*60)

    @staticmethod
    def _print_settings(total: float, config: DistributedRatioConfig):
        """Print settings section"""
        print(f"\n📊 SETTINGS:")
        print(f"   Total: {total}")
        print(f"   Quarters: {config.number_of_qtrs}")
        print(f"   Default Ratios: {', '.join(f'{r:.4g}' for r in config.qtr_defaults)}")
        print(f"   Value Key: {config.qtr_val_key}")
        print(f"   Remainder Strategy: {config.remainder_strategy}")

    @staticmethod
    def _print_table(before: List[Dict[str, Any]], after: List[Dict[str, Any]], value_key: str):
        """Print the before/after table"""
        frame = QuarterAnalyzer.to_frame(before, after, value_key)
        print(f"\n🧮 QUARTERS:")
        print("-"*60)
        print(frame.to_string(index=False, float_format=lambda v: f"{v:.4g}"))

    @staticmethod
    def _print_validation_issues(issues: List[str]):
        """Print validation issues"""
        if issues:
            print(f"\n❌ VALIDATION ISSUES ({len(issues)}):")
            print("-"*60)
            for issue in issues:
                print(f"   • {issue}")
        else:
            print(f"\n✅ Quarters add up to the total")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='quarter-ratio',
        description='Distribute a total across quarters by ratio'
    )
    parser.add_argument('total', type=float, help='new total to distribute')
    parser.add_argument('--quarters',
                        help=f'JSON file of current quarters (default: {QUARTERS_FILE} if present)')
    parser.add_argument('--number-of-qtrs', type=int, help='number of quarters')
    parser.add_argument('--defaults', help='comma separated default ratios')
    parser.add_argument('--key', help='name of the quarter value field')
    parser.add_argument('--strategy', choices=REMAINDER_STRATEGIES, help='remainder strategy')
    parser.add_argument('--output', default=OUTPUT_FILE, help='where to write the final results')
    parser.add_argument('--no-save', action='store_true', help="don't write any result files")
    parser.add_argument('--log-level', help='logging level, e.g. DEBUG')
    return parser


def _default_quarters_file():
    return QUARTERS_FILE if os.path.exists(QUARTERS_FILE) else None


def _parse_total(total: float):
    # keep whole totals as ints so the quarters stay ints
    return int(total) if total.is_integer() else total


def main(argv: List[str] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = DistributedRatioConfig.from_settings(
            number_of_qtrs=args.number_of_qtrs,
            qtr_defaults=parse_ratios(args.defaults),
            qtr_val_key=args.key,
            remainder_strategy=args.strategy,
        )
        service = DistributedRatio(config)

        # Load data
        quarters_file = args.quarters or _default_quarters_file()
        if quarters_file:
            print("📂 Loading quarters...")
            before = QuarterLoader.load_quarters(quarters_file)
        else:
            before = QuarterLoader.empty_quarters(config.number_of_qtrs, config.qtr_val_key)
    except (DistributedRatioError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    total = _parse_total(args.total)

    # Distribute
    print(f"\n🚀 Distributing {total} across {len(before)} quarters...")
    after = service.distribute(total, before)

    # Validate
    validator = DistributionValidator(config)
    validation_issues = validator.validate(total, after)

    OutputFormatter.print_results(total, before, after, validation_issues, config)

    if not args.no_save:
        record = ResultSaver.build_record(total, config.to_dict(), before, after, validation_issues)
        saver = ResultSaver()
        saver.save_run(record)
        saver.save_final_results(record, args.output)

    return 0 if not validation_issues else 2


if __name__ == "__main__":
    sys.exit(main())
