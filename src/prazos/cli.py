"""
Prazos CLI

Command-line interface for the deadline calculator.

Usage:
    prazos calcular --disponibilizacao 2025-11-20 --prazo 15 --materia civil
    prazos calcular -d 2025-11-20 -p 15 --comprovar 2025-11-21 --interposicao 2025-12-15
    prazos calcular -d 2025-12-10 -p 5 --materia criminal --ignorar-recesso --json
    prazos calendario --calendario calendars/tjpr.yaml

Exit Codes:
    0   OK              - Calculated (and timely, when a filing date is given)
    2   PENDING_PROOF   - Untimely unless a decree is proven
    3   UNTIMELY        - Filing after the deadline
    10  INPUT_INVALID   - Invalid input
    11  CALENDAR_ERROR  - Calendar missing, invalid or not covering the dates
    20  INTERNAL_ERROR  - Unexpected internal error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .calendars import CalendarLoader, build_snapshot
from .config import Settings
from .engine import DeadlineCalculator
from .exceptions import (
    BeforeCutoffError,
    CalendarLoadError,
    CalendarValidationError,
    CalendarVersionMismatch,
    InvalidInputError,
    MissingCalendarDataError,
)
from .formatting import document_placeholders, format_br, parse_date
from .models import CalculationOutcome, DeadlineResult, SuspensionEvent, Timeliness
from .usage import LoggingUsageSink


class ExitCode:
    """Deterministic exit codes for scripting."""
    OK = 0                # Calculated / timely
    PENDING_PROOF = 2     # Untimely pending decree proof
    UNTIMELY = 3          # Filing after the deadline
    INPUT_INVALID = 10    # Invalid input
    CALENDAR_ERROR = 11   # Calendar loading/coverage failed
    INTERNAL_ERROR = 20   # Unexpected error


TIMELINESS_EXIT = {
    Timeliness.TIMELY: ExitCode.OK,
    Timeliness.UNTIMELY_PENDING_DECREE_PROOF: ExitCode.PENDING_PROOF,
    Timeliness.UNTIMELY: ExitCode.UNTIMELY,
}

TIMELINESS_LABELS = {
    Timeliness.TIMELY: "TEMPESTIVO",
    Timeliness.UNTIMELY_PENDING_DECREE_PROOF: "INTEMPESTIVO (pendente de comprovação de decreto)",
    Timeliness.UNTIMELY: "INTEMPESTIVO",
}


# ============================================================================
# OUTPUT FORMATTING
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        cls.BLUE = ''
        cls.CYAN = ''
        cls.GREEN = ''
        cls.YELLOW = ''
        cls.RED = ''
        cls.BOLD = ''
        cls.END = ''


def print_header(text: str):
    print(f"\n{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")


def print_success(text: str):
    print(f"{Colors.GREEN}[OK] {text}{Colors.END}")


def print_error(text: str):
    print(f"{Colors.RED}[ERROR] {text}{Colors.END}", file=sys.stderr)


def print_warning(text: str):
    print(f"{Colors.YELLOW}[WARN] {text}{Colors.END}")


def print_info(text: str):
    print(f"{Colors.BLUE}[INFO] {text}{Colors.END}")


def print_kv(key: str, value: str, indent: int = 0):
    spaces = "  " * indent
    print(f"{spaces}{Colors.BOLD}{key}:{Colors.END} {value}")


def print_events(events: tuple[SuspensionEvent, ...] | list[SuspensionEvent], indent: int = 1):
    spaces = "  " * indent
    for event in events:
        print(f"{spaces}- {format_br(event.date)} {event.reason} ({event.kind.value})")


def print_scenario(title: str, result: DeadlineResult):
    print(f"\n{Colors.BOLD}{title}{Colors.END}")
    if result.start_date is not None:
        print_kv("Início da contagem", format_br(result.start_date), indent=1)
    print_kv("Prazo final", format_br(result.final_date), indent=1)
    if result.was_prorogated:
        print_kv("Prazo final prorrogado", format_br(result.final_date_prorogated), indent=1)
        print_events(result.prorogated_days, indent=2)
    if result.non_business_days:
        print_kv("Suspensões no prazo", str(len(result.non_business_days)), indent=1)
        print_events(result.non_business_days, indent=2)


def print_outcome(outcome: CalculationOutcome):
    print_kv("Matéria", outcome.matter_type.value)
    print_kv("Prazo", f"{outcome.deadline_length_days} dias")
    print_kv("Processo", outcome.process_number or "Não informado")
    print()
    print_kv("Disponibilização", format_br(outcome.availability_date))
    print_kv("Publicação", format_br(outcome.publication_date))
    print_kv("Início do prazo", format_br(outcome.deadline_start_date))
    if outcome.is_fixed:
        print_warning(
            f"Prazo fixado em {format_br(outcome.fixed_final_date)} "
            "(SEI 0072049-32.2025.8.16.6000)"
        )

    print_scenario("Cenário sem comprovação", outcome.unproven_scenario)
    print_scenario("Cenário com comprovação", outcome.proven_scenario)

    if outcome.provable_suspensions:
        print(f"\n{Colors.BOLD}Suspensões comprováveis{Colors.END}")
        for event in outcome.provable_suspensions:
            mark = "x" if event.iso in outcome.proven else " "
            print(f"  [{mark}] {format_br(event.date)} {event.reason} ({event.kind.value})")


# ============================================================================
# COMMANDS
# ============================================================================

def _load_calculator(path: Optional[str], settings: Settings) -> DeadlineCalculator:
    config = CalendarLoader().load(path or settings.calendar_path)
    return DeadlineCalculator(
        build_snapshot(config),
        settings=settings,
        usage_sink=LoggingUsageSink(),
    )


def cmd_calcular(args) -> int:
    """Calculate a deadline."""
    settings = Settings.from_env()

    try:
        calculator = _load_calculator(args.calendario, settings)
    except (CalendarLoadError, CalendarValidationError, CalendarVersionMismatch) as e:
        print_error(str(e))
        return ExitCode.CALENDAR_ERROR

    try:
        outcome = calculator.calculate(
            args.disponibilizacao,
            args.prazo,
            args.materia,
            ignore_recess=args.ignorar_recesso,
            process_number=args.processo,
        )
        if args.comprovar:
            calculator.prove(outcome, args.comprovar)
        filing = parse_date(args.interposicao) if args.interposicao else None
        timeliness = calculator.assess_timeliness(outcome, filing) if filing else None
    except MissingCalendarDataError as e:
        print_error(str(e))
        return ExitCode.CALENDAR_ERROR
    except (InvalidInputError, BeforeCutoffError) as e:
        print_error(str(e))
        return ExitCode.INPUT_INVALID

    if args.json:
        data = outcome.to_dict()
        data["placeholders"] = document_placeholders(outcome, filing)
        data["timeliness"] = timeliness.value if timeliness else None
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print_header("Prazos - Cálculo de Prazo")
        print_outcome(outcome)
        if timeliness is not None:
            print()
            print_kv("Interposição", format_br(filing))
            label = TIMELINESS_LABELS[timeliness]
            if timeliness is Timeliness.TIMELY:
                print_success(label)
            else:
                print_warning(label)

    if timeliness is None:
        return ExitCode.OK
    return TIMELINESS_EXIT[timeliness]


def cmd_calendario(args) -> int:
    """Validate and summarize a calendar file."""
    settings = Settings.from_env()
    path = Path(args.calendario or settings.calendar_path)
    print_header("Prazos - Calendário")

    if not path.exists():
        print_error(f"Calendar file not found: {path}")
        return ExitCode.INPUT_INVALID

    print_info(f"Validating: {path}")
    try:
        snapshot = build_snapshot(CalendarLoader().load(path))
    except (CalendarLoadError, CalendarVersionMismatch) as e:
        print_error(str(e))
        return ExitCode.CALENDAR_ERROR
    except CalendarValidationError as e:
        print_error(e.message)
        for error in e.details.get("errors", []):
            location = ".".join(str(part) for part in error.get("loc", ()))
            print(f"  {Colors.RED}[X]{Colors.END} {location}: {error.get('msg')}")
        return ExitCode.CALENDAR_ERROR

    print_success("Calendar is valid!")
    summary = snapshot.summary()
    print()
    print_kv("Jurisdiction", summary["jurisdiction"])
    print_kv("Years", ", ".join(str(y) for y in summary["years"]))
    print_kv("Holidays", str(summary["holidays"]))
    print_kv("Decrees", str(summary["decrees"]))
    print_kv("Instability", str(summary["instability"]))
    for period in summary["recess"]:
        print_kv(
            "Recess",
            f"{period['start_day']:02d}-{period['end_day']:02d}/{period['month']:02d}",
        )
    for group in summary["proof_groups"]:
        print_kv("Proof group", " + ".join(group))
    return ExitCode.OK


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prazos",
        description="Prazos - judicial deadline calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   OK              Calculated / timely
  2   PENDING_PROOF   Untimely pending decree proof
  3   UNTIMELY        Filing after the deadline
  10  INPUT_INVALID   Invalid input
  11  CALENDAR_ERROR  Calendar missing or invalid

Examples:
  prazos calcular -d 2025-11-20 -p 15 --materia civil
  prazos calcular -d 2025-11-20 -p 15 --comprovar 2025-11-21 --interposicao 2025-12-15
  prazos calendario --calendario calendars/tjpr.yaml
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log engine steps")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    calc_parser = subparsers.add_parser("calcular", help="Calculate a deadline")
    calc_parser.add_argument("--disponibilizacao", "-d", required=True,
                             help="Availability date (YYYY-MM-DD or DD/MM/YYYY)")
    calc_parser.add_argument("--prazo", "-p", type=int, default=None,
                             help="Deadline length in days")
    calc_parser.add_argument("--materia", "-m", choices=["civil", "criminal"], default=None,
                             help="Matter type")
    calc_parser.add_argument("--ignorar-recesso", action="store_true",
                             help="Criminal only: disregard the recess")
    calc_parser.add_argument("--processo", help="Process number (display only)")
    calc_parser.add_argument("--comprovar", action="append", default=[], metavar="DATA",
                             help="Proven suspension date (repeatable)")
    calc_parser.add_argument("--interposicao", help="Filing date to check timeliness")
    calc_parser.add_argument("--calendario", "-c", help="Calendar YAML/JSON file")
    calc_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    calc_parser.set_defaults(func=cmd_calcular)

    cal_parser = subparsers.add_parser("calendario", help="Validate a calendar file")
    cal_parser.add_argument("--calendario", "-c", help="Calendar YAML/JSON file")
    cal_parser.set_defaults(func=cmd_calendario)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    if not sys.stdout.isatty():
        Colors.disable()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except InvalidInputError as e:
        print_error(str(e))
        return ExitCode.INPUT_INVALID
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
