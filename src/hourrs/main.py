"""
hourrs command line entry point.

Usage:
    hourrs [--data-dir DIR] [--store json|sqlite] [-v] COMMAND ...

Examples:
    hourrs add-name alice
    hourrs toggle alice
    hourrs status --period 2024/01
    hourrs report --csv
"""
import argparse
import logging
import sys
from dataclasses import replace

from .config import Settings, STORE_KINDS
from .data.period import Period
from .services.report_service import PeriodReport
from .services.session_service import SessionService
from .services.state_service import AdminSession
from .utils.clock import SystemClock
from .utils.errors import HourrsError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hourrs',
        description="Track work sessions and monthly hours",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s add-name alice
  %(prog)s toggle alice
  %(prog)s status --period 2024/01
  %(prog)s report --csv
        """
    )
    parser.add_argument('--data-dir', '-d', help='Data directory (default: $HOURRS_DATA_DIR or ./data)')
    parser.add_argument('--store', '-s', choices=STORE_KINDS, help='Store back-end (default: json)')
    parser.add_argument('--admin-password', '-p', help='Admin password for admin commands')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('names', help='List names and whether they are started')
    for command, text in (
        ('add-name', 'Add a name to the roster'),
        ('remove-name', 'Remove a name from the roster (admin)'),
        ('move-up', 'Move a name up in the roster'),
        ('move-down', 'Move a name down in the roster'),
        ('start', 'Start a session'),
        ('end', 'End the open session'),
        ('toggle', 'Start a session, or end the open one'),
    ):
        sub = commands.add_parser(command, help=text)
        sub.add_argument('name')

    status = commands.add_parser('status', help='Hours and last session per name')
    status.add_argument('--period', type=Period.parse, help='Period as YYYY/MM (default: current)')

    report = commands.add_parser('report', help='Monthly hours report')
    report.add_argument('--period', type=Period.parse, help='Period as YYYY/MM (default: current)')
    report.add_argument('--csv', nargs='?', const='', metavar='FILE',
                        help='Write CSV (to FILE, or the export directory)')

    sessions = commands.add_parser('sessions', help='Sessions of one name')
    sessions.add_argument('name')
    sessions.add_argument('--period', type=Period.parse, help='Period as YYYY/MM (default: current)')

    set_hours = commands.add_parser('set-hours', help='Override the hours of a record (admin)')
    set_hours.add_argument('rowid', type=int)
    set_hours.add_argument('value', help="Hours as a number, or '' to clear")

    return parser


def run(args, settings: Settings, clock) -> int:
    store = settings.make_store()
    hours_data = store.load(**settings.data_options(clock))
    admin = AdminSession(clock, settings.admin_timeout, settings.admin_password)
    service = SessionService(hours_data, store)

    if args.command == 'names':
        started = hours_data.started_names()
        for name in hours_data.names:
            marker = '*' if name in started else ' '
            print(f"{marker} {name}")
        return 0

    if args.command in ('start', 'end'):
        if args.name not in hours_data.names:
            logger.warning(f"{args.name} is not in the roster")
        record = service.start(args.name) if args.command == 'start' else service.end(args.name)
        print(f"{args.command.upper()} {args.name} @ {record.start if args.command == 'start' else record.end}")
        return 0

    if args.command == 'toggle':
        result = service.toggle(args.name)
        if not result.success:
            print(f"ERROR: {result.error}", file=sys.stderr)
            return 1
        print(f"{result.action.upper()} {args.name} ({result.record.display_hours()})")
        return 0

    if args.command == 'status':
        period = args.period or Period.current(clock)
        print(f"Period {period}")
        first, last = hours_data.first_period(), hours_data.last_period()
        if first.is_sentinel() or last.is_sentinel():
            print("No sessions recorded")
        else:
            print(f"Recorded {first} - {last}")
        for name in hours_data.names:
            print(f"{name:<20} {str(hours_data.hours_for_period(name, period)):>8} "
                  f"{hours_data.status_for_period(name, period):>14}")
        return 0

    if args.command == 'report':
        report = PeriodReport(hours_data, args.period)
        if args.csv is not None:
            path = report.to_csv(filename=args.csv or None, export_root=settings.export_path)
            print(f"Report written to {path}")
        else:
            print(report.to_text())
        return 0

    if args.command == 'sessions':
        report = PeriodReport(hours_data, args.period)
        print(f"{'ID':<6} {'Date':<11} {'Start':<6} {'End':<6} {'Hours':>10}")
        for row in report.sessions(args.name):
            print(f"{row['rowid']:<6} {row['date']:<11} {row['start']:<6} {row['end']:<6} {row['hours']:>10}")
        return 0

    # roster and admin commands below all end in a save
    if args.command == 'add-name':
        hours_data.add_name(args.name)
    elif args.command == 'move-up':
        hours_data.move_name_up(args.name)
    elif args.command == 'move-down':
        hours_data.move_name_down(args.name)
    elif args.command == 'remove-name':
        admin.login(args.admin_password)
        admin.require()
        hours_data.remove_name(args.name)
    elif args.command == 'set-hours':
        admin.login(args.admin_password)
        admin.require()
        hours_data.set_hours(args.rowid, args.value)

    hours_data.save(store)
    return 0


def main(argv=None, clock=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
        overrides = {}
        if args.data_dir:
            overrides['data_dir'] = args.data_dir
        if args.store:
            overrides['store'] = args.store
        if args.verbose:
            overrides['log_level'] = 'DEBUG'
        settings = replace(settings, **overrides)
        settings.validate()
    except HourrsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=settings.log_level)

    try:
        return run(args, settings, clock or SystemClock())
    except HourrsError as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
