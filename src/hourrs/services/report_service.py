"""
Period Report Generator
Summarises worked hours per name for one calendar month.
"""
import csv
import io
import logging
import os
from typing import Dict, List, Optional

from ..data.hours import Hours
from ..data.hours_data import HoursData
from ..data.period import Period
from ..utils.export_utils import get_export_directory, safe_filename, write_file

logger = logging.getLogger(__name__)

RULE_WIDTH = 44


class PeriodReport:
    """Generates a monthly hours report over the roster"""

    def __init__(self, hours_data: HoursData, period: Optional[Period] = None):
        """
        Initialize a period report.

        Args:
            hours_data: Data to report on
            period: Month to report (defaults to the current one)
        """
        self.hours_data = hours_data
        self.period = period or Period.current(hours_data.clock)

    def generate(self) -> Dict:
        """
        Generate the period report.

        Returns:
            Dictionary containing report data:
            {
                'period': Period,
                'rows': [{'name', 'hours', 'status', 'sessions'}, ...],
                'total': Hours over all rows,
            }
        """
        rows = []
        for name in self.hours_data.names:
            sessions = self.hours_data.dataframe.for_period(name, self.period)
            rows.append({
                'name': name,
                'hours': sessions.hours_for_period(name, self.period),
                'status': sessions.status_for_period(name, self.period),
                'sessions': len(sessions),
            })

        return {
            'period': self.period,
            'rows': rows,
            'total': Hours.total(row['hours'] for row in rows),
        }

    def sessions(self, name: str) -> List[Dict]:
        """Display fields of every session of name in this period"""
        return [
            {
                'rowid': record.rowid,
                'date': record.date(),
                'start': record.start_time(),
                'end': record.end_time(),
                'hours': record.display_hours(),
                'original_hours': record.original_hours(),
                'finished': record.finished(),
            }
            for record in self.hours_data.dataframe.for_period(name, self.period)
        ]

    def to_text(self) -> str:
        """
        Generate a human-readable text report.

        Returns:
            Formatted text report
        """
        report = self.generate()
        lines = []

        lines.append("=" * RULE_WIDTH)
        lines.append(f"HOURS REPORT {report['period']}")
        lines.append("=" * RULE_WIDTH)

        if not report['rows']:
            lines.append("No names registered.")
            return "\n".join(lines)

        lines.append(f"{'Name':<20} {'Hours':>8} {'Last session':>14}")
        lines.append("-" * RULE_WIDTH)
        for row in report['rows']:
            lines.append(f"{row['name']:<20} {str(row['hours']):>8} {row['status']:>14}")
        lines.append("-" * RULE_WIDTH)
        lines.append(f"{'Total':<20} {str(report['total']):>8}")
        lines.append("=" * RULE_WIDTH)

        return "\n".join(lines)

    def to_csv(self, filename: Optional[str] = None, export_root: Optional[str] = None) -> str:
        """
        Export report to CSV file.

        Args:
            filename: Optional filename. If not provided, generates one.
            export_root: Optional directory where the file should be written.

        Returns:
            Path to the generated file.
        """
        report = self.generate()

        if filename is None:
            root = get_export_directory(export_root)
            label = safe_filename(str(report['period']).replace('/', '-'))
            filename = os.path.join(root, f"Hours_Report_{label}.csv")

        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(['Hours Report'])
        writer.writerow(['Period:', str(report['period'])])
        writer.writerow([])
        writer.writerow(['Name', 'Hours (HH:MM)', 'Hours (decimal)', 'Sessions', 'Last session'])
        for row in report['rows']:
            writer.writerow([
                row['name'],
                str(row['hours']),
                f"{row['hours'].value:.2f}",
                row['sessions'],
                row['status'],
            ])
        writer.writerow([])
        writer.writerow(['Total:', str(report['total']), f"{report['total'].value:.2f}"])

        write_file(buffer.getvalue().encode('utf-8'), filename)
        logger.info(f"Hours report export written to {filename}")

        return filename


def generate_period_report(hours_data: HoursData, period: Optional[Period] = None) -> PeriodReport:
    """
    Convenience function to create a period report.

    Args:
        hours_data: Data to report on
        period: Month to report (optional, defaults to the current one)

    Returns:
        PeriodReport object
    """
    return PeriodReport(hours_data, period)
