#!/usr/bin/env python3
"""
Main entry point for the Weight Compliance Engine.

This module provides a CLI for checking vehicle weights against federal
and state limits, either one weight at a time or in batches of JSON
weight records.
"""

import argparse
import json
import sys
import logging
from pathlib import Path
from typing import List, Dict, Any, Optional
from datetime import datetime

from .config import Config
from .utils.logger import setup_logger
from .utils.io_handler import IOHandler
from .normalization.normalizer import WeightNormalizer
from .classification.classifier import ComplianceClassifier
from .validation.vehicle_validator import VehicleValidator
from .limits.limit_table import LimitTable
from .models.schema import AxleClass, ComplianceStatus, VehicleConfiguration

INVALID_STATUS = "Invalid"


class ComplianceChecker:
    """
    Weight compliance pipeline coordinator.

    This class orchestrates the evaluation of one weight record:
    1. Input normalization
    2. Classification (with optional bridge formula or state override)
    3. Optional whole-vehicle validation
    4. Output generation
    """

    def __init__(self, log_level: str = Config.LOG_LEVEL, log_file: Optional[Path] = None):
        """
        Initialize the checker with all components.

        Args:
            log_level: Logging level
            log_file: Optional file to copy log output to
        """
        self.logger = setup_logger(
            level=getattr(logging, log_level.upper(), logging.INFO),
            log_file=log_file
        )

        self.io_handler = IOHandler()
        self.limit_table = LimitTable()
        self.normalizer = WeightNormalizer(kg_to_lbs=Config.KG_TO_LBS)
        self.classifier = ComplianceClassifier(
            limit_table=self.limit_table,
            warning_threshold=Config.WARNING_THRESHOLD
        )
        self.vehicle_validator = VehicleValidator(
            limit_table=self.limit_table,
            warning_threshold=Config.WARNING_THRESHOLD
        )

        self.logger.info(f"Initialized {Config.APP_NAME} v{Config.VERSION}")

    def check_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check a single raw weight record.

        Recognized keys: weight, unit, axle_class, jurisdiction,
        axle_count, spacing_feet, state_limit_override, axle_weights,
        axle_spacings, id.

        Args:
            record: Raw record dictionary

        Returns:
            Result dictionary; invalid records get status 'Invalid' and an
            'error' message instead of a verdict
        """
        record_id = record.get('id')

        try:
            weight = self.normalizer.parse_weight(record.get('weight'), record.get('unit'))
            axle_class = self.normalizer.normalize_axle_class(
                record.get('axle_class', 'GROSS_VEHICLE_WEIGHT')
            )
            jurisdiction = self.normalizer.normalize_jurisdiction(record.get('jurisdiction'))
            axle_count = self.normalizer.normalize_axle_count(record.get('axle_count'))
            spacing_feet = self.normalizer.normalize_optional_number(record.get('spacing_feet'))
            override = self.normalizer.normalize_optional_number(record.get('state_limit_override'))

            if override is not None:
                verdict = self.classifier.classify_with_state_override(
                    weight, axle_class, jurisdiction, state_limit=override
                )
            else:
                verdict = self.classifier.classify(
                    weight, axle_class, jurisdiction,
                    axle_count=axle_count, spacing_feet=spacing_feet
                )

            result = {'id': record_id, **verdict.model_dump(mode='json')}

            if record.get('axle_weights'):
                vehicle = VehicleConfiguration(
                    axle_weights=record['axle_weights'],
                    axle_spacings=record.get('axle_spacings') or [],
                    gross_weight=weight if axle_class is AxleClass.GROSS_VEHICLE_WEIGHT else None,
                )
                report = self.vehicle_validator.validate(vehicle, jurisdiction)
                result['vehicle'] = report.model_dump(mode='json')

                if report.status.severity > verdict.status.severity:
                    worst_issue = (report.violations or report.issues)[0]
                    result['status'] = report.status.value
                    result['message'] = (
                        f"{report.status.value}: {worst_issue.description} "
                        f"(weight check: {verdict.message})"
                    )

        except ValueError as e:
            self.logger.error(f"Invalid record {record_id!r}: {e}")
            return {'id': record_id, 'status': INVALID_STATUS, 'error': str(e)}

        self.logger.info(f"Record {record_id!r} - {result['message']}")
        return result

    def check_file(self, input_path: Path) -> List[Dict[str, Any]]:
        """
        Check every record in a JSON file.

        Args:
            input_path: Path to a JSON file of weight records

        Returns:
            List of result dictionaries (a single error entry if the
            file cannot be read)
        """
        self.logger.info(f"Processing file: {input_path}")

        try:
            records = self.io_handler.read_records(input_path)
        except (FileNotFoundError, ValueError) as e:
            self.logger.error(f"Failed to read {input_path}: {e}")
            return [{
                'file_name': input_path.name,
                'status': INVALID_STATUS,
                'error': str(e),
            }]

        results = []
        for record in records:
            result = self.check_record(record)
            result['file_name'] = input_path.name
            results.append(result)

        return results

    def check_batch(self, input_paths: List[Path]) -> List[Dict[str, Any]]:
        """
        Check records from multiple files.

        Args:
            input_paths: List of input file paths

        Returns:
            List of result dictionaries
        """
        self.logger.info(f"Starting batch processing of {len(input_paths)} files")

        results = []
        for path in input_paths:
            results.extend(self.check_file(path))

        counts = {}
        for result in results:
            counts[result['status']] = counts.get(result['status'], 0) + 1

        self.logger.info(f"Batch processing complete: {counts}")
        return results

    def save_results(
        self,
        results: List[Dict[str, Any]],
        output_format: str = "json",
        output_path: Optional[Path] = None
    ) -> Path:
        """
        Save compliance results to file.

        Args:
            results: List of result dictionaries
            output_format: Output format ('json' or 'csv')
            output_path: Optional custom output path

        Returns:
            Path the results were written to
        """
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_dir = Config.get_output_dir()
            output_path = output_dir / f"compliance_results_{timestamp}.{output_format}"

        if output_format == "csv":
            flattened = []
            for result in results:
                flat_record = {k: v for k, v in result.items() if k != 'vehicle'}
                vehicle = result.get('vehicle')
                if vehicle:
                    flat_record['vehicle_status'] = vehicle['status']
                    flat_record['vehicle_max_allowed_weight'] = vehicle['max_allowed_weight']
                    flat_record['vehicle_over_weight'] = vehicle['over_weight']
                    flat_record['vehicle_issue_count'] = len(vehicle['issues'])
                flattened.append(flat_record)
            self.io_handler.write_csv(flattened, output_path)
        else:
            self.io_handler.write_json(results, output_path, indent=Config.JSON_INDENT)

        self.logger.info(f"Results saved to {output_path}")
        return output_path


def has_failures(results: List[Dict[str, Any]]) -> bool:
    """Whether any result is Non-Compliant or invalid."""
    return any(
        r.get('status') in (ComplianceStatus.NON_COMPLIANT.value, INVALID_STATUS)
        for r in results
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check vehicle weights against federal and state limits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check one gross weight in Texas
  weight-compliance -w "79,000 lbs" -a GROSS_VEHICLE_WEIGHT -j TX

  # Include the bridge formula for a 3-axle group spanning 30 ft
  weight-compliance -w 52000 -a TRIDEM_AXLE -j CA --axle-count 3 --spacing-feet 30

  # Check a batch of records and write CSV
  weight-compliance -i data/*.json -f csv
        """
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        '-w', '--weight',
        type=str,
        help='Weight to check (e.g. 79000, "32,500 lbs", "14000 kg")'
    )
    mode.add_argument(
        '-i', '--input',
        type=str,
        nargs='+',
        help='Input JSON file(s), directory or glob pattern of weight records'
    )
    mode.add_argument(
        '--list-jurisdictions',
        action='store_true',
        help='Print the weight limit table and exit'
    )

    parser.add_argument(
        '-a', '--axle-class',
        default='GROSS_VEHICLE_WEIGHT',
        help='Axle class: SINGLE_AXLE, TANDEM_AXLE, TRIDEM_AXLE or GROSS_VEHICLE_WEIGHT'
    )
    parser.add_argument(
        '-j', '--jurisdiction',
        default=Config.FEDERAL_JURISDICTION,
        help='Two-letter jurisdiction code (default: US federal)'
    )
    parser.add_argument('--axle-count', type=int, help='Axles in the group (bridge formula)')
    parser.add_argument('--spacing-feet', type=float, help='Outer axle spacing in feet (bridge formula)')
    parser.add_argument('--state-limit', type=float, help='Explicit state limit that replaces the table value')

    parser.add_argument(
        '-o', '--output',
        type=str,
        help='Output file path (default: auto-generated in output/)'
    )
    parser.add_argument(
        '-f', '--format',
        choices=['json', 'csv'],
        default='json',
        help='Output format (default: json)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='Optional log file path'
    )

    return parser


def resolve_inputs(checker: ComplianceChecker, specs: List[str]) -> List[Path]:
    input_paths: List[Path] = []
    for input_spec in specs:
        path = Path(input_spec)
        if path.is_file():
            input_paths.append(path)
        elif path.is_dir():
            input_paths.extend(checker.io_handler.read_batch(path))
        elif '*' in input_spec:
            input_paths.extend(sorted(path.parent.glob(path.name)))
        else:
            checker.logger.error(f"Invalid input: {input_spec}")
    return input_paths


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_arg_parser().parse_args(argv)

    checker = ComplianceChecker(
        log_level=args.log_level,
        log_file=Path(args.log_file) if args.log_file else None
    )

    if args.list_jurisdictions:
        table = [checker.limit_table.federal_limit.model_dump()]
        table += [checker.limit_table.weight_limit_for(code).model_dump()
                  for code in checker.limit_table.jurisdictions()]
        print(json.dumps(table, indent=Config.JSON_INDENT))
        sys.exit(0)

    if args.weight is not None:
        record = {
            'weight': args.weight,
            'axle_class': args.axle_class,
            'jurisdiction': args.jurisdiction,
            'axle_count': args.axle_count,
            'spacing_feet': args.spacing_feet,
            'state_limit_override': args.state_limit,
        }
        result = checker.check_record(record)
        result.pop('id', None)
        print(json.dumps(result, indent=Config.JSON_INDENT))
        sys.exit(1 if has_failures([result]) else 0)

    input_paths = resolve_inputs(checker, args.input)
    if not input_paths:
        checker.logger.error("No valid input files found")
        sys.exit(1)

    results = checker.check_batch(input_paths)

    output_path = Path(args.output) if args.output else None
    saved = checker.save_results(results, args.format, output_path)
    print(f"Wrote {len(results)} results to {saved}")

    if has_failures(results):
        failed = sum(1 for r in results if has_failures([r]))
        checker.logger.warning(f"{failed} record(s) were non-compliant or invalid")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
