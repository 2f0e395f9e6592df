"""
Command line entry point

Exit codes:
- 0: OK
- 1: Untranslated keys found (only with --strict)
- 2: Missing/malformed file, invalid patch or configuration error
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from localetree.config import Settings, load_settings
from localetree.errors import LocaleTreeError
from localetree.models.report import TranslationReport
from localetree.services.locale_service import PLACEHOLDER_MODES, LocaleService
from localetree.services.merge_service import MergeResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNTRANSLATED = 1
EXIT_ERROR = 2


def setup_logging(level: str) -> None:
    """Configure logging; diagnostics go to stderr, results to stdout"""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def print_report(report: TranslationReport, top: int = 10, list_keys: bool = False) -> None:
    label = report.language or 'target'
    print(f"🔎 {label}: {report.total_leaves} reference keys")
    print(f"   translated: {report.translated_count} ({report.progress * 100:.1f}%)")
    if report.intentional_count:
        print(f"   intentional matches: {report.intentional_count}")

    if report.is_complete:
        print(f"✅ {label}: no untranslated keys")
    else:
        print(f"❌ {label}: {report.untranslated_count} untranslated keys")
        if top:
            print("   Top sections:")
            for section, count in report.top_sections(top):
                print(f"     {section}: {count} keys")
        if list_keys:
            for key_path, value in report.untranslated:
                print(f"   - {key_path}: {value!r}")

    if report.extra_keys:
        print(f"⚠️  {label}: {len(report.extra_keys)} keys not in the reference")
        if list_keys:
            for key_path in report.extra_keys:
                print(f"   + {key_path}")
    if report.type_mismatches:
        print(f"⚠️  {label}: {len(report.type_mismatches)} object/leaf mismatches")
        for key_path in report.type_mismatches:
            print(f"   ! {key_path}")


def print_merge(target: str, result: MergeResult, dry_run: bool) -> None:
    verb = "would update" if dry_run else "updated"
    print(f"✅ {target}: {verb} {len(result.updated)} keys")
    if result.coerced:
        print(f"⚠️  {len(result.coerced)} values replaced to fit the patch structure:")
        for key_path in result.coerced:
            print(f"   ! {key_path}")


def cmd_compare(args: argparse.Namespace, service: LocaleService) -> int:
    report = service.compare(args.reference, args.target, language=args.language)
    print_report(report, top=args.top, list_keys=args.list)

    if args.report_file:
        service.store.save_report(args.report_file, report, mode=args.report_format)
        print(f"💾 Untranslated keys written to {args.report_file}")

    if args.strict and not report.is_complete:
        return EXIT_UNTRANSLATED
    return EXIT_OK


def cmd_merge(args: argparse.Namespace, service: LocaleService) -> int:
    result = service.merge(args.target, args.patch, root=args.root, shape=args.format, dry_run=args.dry_run)
    print_merge(args.target, result, args.dry_run)
    return EXIT_OK


def cmd_status(args: argparse.Namespace, service: LocaleService) -> int:
    reports = service.status()
    if not reports:
        print(f"⚠️  No target locales found in {service.locales_dir}")
        return EXIT_OK

    print(f"🔎 Reference: {service.settings.reference_language} ({service.reference_path()})")
    for language, report in reports.items():
        marker = "✅" if report.is_complete else "❌"
        print(
            f"{marker} {language}: {report.progress * 100:5.1f}% translated, "
            f"{report.untranslated_count} untranslated, {report.intentional_count} intentional, "
            f"{len(report.extra_keys)} extra"
        )

    if args.strict and any(not r.is_complete for r in reports.values()):
        return EXIT_UNTRANSLATED
    return EXIT_OK


def cmd_fill(args: argparse.Namespace, service: LocaleService) -> int:
    result = service.fill(args.language, placeholder=args.placeholder, dry_run=args.dry_run)
    target = str(service.store.locale_path(service.locales_dir, args.language))
    print_merge(target, result, args.dry_run)
    return EXIT_OK


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='localetree',
        description="Check locale files against a reference language and merge translation patches",
    )
    parser.add_argument('--locales-dir', help="Directory holding <lang>.json files (default: LOCALES_DIR)")
    parser.add_argument('--reference', help="Reference language code (default: REFERENCE_LANGUAGE)")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    sub = parser.add_subparsers(dest='command', required=True)

    compare = sub.add_parser('compare', help="Report untranslated keys of one target file")
    compare.add_argument('reference', help="Reference locale file")
    compare.add_argument('target', help="Target locale file")
    compare.add_argument('--language', help="Target language code (default: target file name)")
    compare.add_argument('--report-file', help="Write untranslated keys to this JSON file")
    compare.add_argument('--report-format', choices=['flat', 'nested'], default='flat')
    compare.add_argument('--top', type=non_negative_int, default=10, help="Number of sections to show (0 = none)")
    compare.add_argument('--list', action='store_true', help="List every untranslated key")
    compare.add_argument('--strict', action='store_true', help="Exit with 1 when keys are untranslated")
    compare.set_defaults(handler=cmd_compare)

    merge = sub.add_parser('merge', help="Apply a translation patch to a target file")
    merge.add_argument('target', help="Target locale file (updated in place)")
    merge.add_argument('patch', help="Patch JSON file")
    merge.add_argument('--root', help="Key path to merge a nested patch at")
    merge.add_argument('--format', choices=['auto', 'flat', 'nested'], default='auto')
    merge.add_argument('--dry-run', action='store_true', help="Do not write the target file")
    merge.set_defaults(handler=cmd_merge)

    status = sub.add_parser('status', help="Translation progress of every target locale")
    status.add_argument('--strict', action='store_true', help="Exit with 1 when any locale is incomplete")
    status.set_defaults(handler=cmd_status)

    fill = sub.add_parser('fill', help="Add keys missing from a target locale")
    fill.add_argument('language', help="Target language code")
    fill.add_argument(
        '--placeholder', choices=PLACEHOLDER_MODES, default='todo',
        help="copy=reference value, todo=prefix 'TODO: ', key=use dotted key",
    )
    fill.add_argument('--dry-run', action='store_true', help="Do not write the target file")
    fill.set_defaults(handler=cmd_fill)

    return parser


def build_service(args: argparse.Namespace, settings: Settings) -> LocaleService:
    overrides = {}
    if args.locales_dir:
        overrides['locales_dir'] = args.locales_dir
    if args.reference:
        overrides['reference_language'] = args.reference
    locale_settings = dataclasses.replace(settings.locales, **overrides) if overrides else settings.locales
    return LocaleService(locale_settings, settings.classifier)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging('DEBUG' if args.verbose else settings.logging.log_level)

    try:
        service = build_service(args, settings)
        return args.handler(args, service)
    except LocaleTreeError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
