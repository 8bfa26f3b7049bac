"""Data saving functionality"""
import json
import os
from typing import Any, Dict, List

from quarter_ratio.config import RUNS_DIR
from quarter_ratio.utils import ensure_directory, format_timestamp


class ResultSaver:
    """Handles saving of distribution results"""

    def __init__(self, runs_dir: str = RUNS_DIR):
        self.runs_dir = runs_dir
        ensure_directory(self.runs_dir)

    @staticmethod
    def build_record(total: float, config: Dict[str, Any],
                     before: List[Dict[str, Any]], after: List[Dict[str, Any]],
                     validation_issues: List[str]) -> Dict[str, Any]:
        """Assemble the JSON record of a single distribution run"""
        return {
            'timestamp': format_timestamp(),
            'total': total,
            'config': config,
            'quarters_before': before,
            'quarters_after': after,
            'total_issues': len(validation_issues),
            'validation_issues': validation_issues,
        }

    def save_run(self, record: Dict[str, Any]) -> str:
        """Save a distribution run to its own timestamped file"""
        strategy = record.get('config', {}).get('remainder_strategy', 'unknown')
        filename = f"run_{record['timestamp']}_{strategy}_total_{record['total']}.json"
        filepath = os.path.join(self.runs_dir, filename)

        with open(filepath, 'w') as f:
            json.dump(record, f, indent=2)

        print(f"   💾 Saved run to {filename}")
        return filepath

    def save_final_results(self, record: Dict[str, Any], output_file: str) -> None:
        """Save final distribution results to file"""
        output_dir = os.path.dirname(output_file)
        if output_dir:
            ensure_directory(output_dir)
        with open(output_file, 'w') as f:
            json.dump(record, f, indent=2)
        print(f"\n💾 Final results saved to {output_file}")
