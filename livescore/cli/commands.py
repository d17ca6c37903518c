"""Livescore CLI commands."""

import json

from livescore.cli.base import BaseCommand, print_summary
from livescore.fixture_config import FixtureConfigError, list_fixtures, load_fixture_script


def _add_fixtures_dir(parser) -> None:
    parser.add_argument("--fixtures-dir", default=None,
                        help="Directory of fixture scripts (default: LIVESCORE_FIXTURES_DIR, then built-ins)")


class ListFixturesCommand(BaseCommand):
    name = "list_fixtures"
    help = "List available fixture scripts"

    def add_arguments(self, parser) -> None:
        _add_fixtures_dir(parser)

    def run(self, args) -> int:
        fixture_ids = list_fixtures(args.fixtures_dir)
        if not fixture_ids:
            print("No fixture scripts found.")
            return 0
        print("Available fixtures:\n")
        for fixture_id in fixture_ids:
            print(f"  {fixture_id}")
        return 0


class ReplayCommand(BaseCommand):
    name = "replay"
    help = "Replay a fixture script and print the scoreboard summaries"
    epilog = "Example:\n  livescore replay world_cup"

    def add_arguments(self, parser) -> None:
        parser.add_argument("fixture", help="Fixture id (see list_fixtures)")
        _add_fixtures_dir(parser)
        parser.add_argument("--json", action="store_true",
                            help="Print the full replay report as JSON")
        parser.add_argument("--continue-on-error", action="store_true",
                            help="Keep applying events after a failed one")

    def run(self, args) -> int:
        from livescore.services.replay import FixtureReplay

        try:
            script = load_fixture_script(args.fixture, args.fixtures_dir)
        except FixtureConfigError as exc:
            return self.error(f"Error: {exc}")

        result = FixtureReplay(script, stop_on_error=not args.continue_on_error).run()

        if args.json:
            print(json.dumps(result.to_document(), indent=2))
        else:
            print(f"{result.display_name} ({result.fixture_id})")
            for er in result.event_results:
                if er.summary is not None:
                    print_summary(er.summary, label=f"SUMMARY (after event {er.index + 1})")
                elif not er.success:
                    print(f"\nEvent {er.index + 1} failed: {er.description}: {er.error}")
            print()

        return 0 if result.success else 1


COMMANDS = [
    ListFixturesCommand(),
    ReplayCommand(),
]
