"""
Command-line tools for managing the training plans seed.

    python -m backend.cli validate-plans [--file PATH]
    python -m backend.cli seed-plans [--file PATH]
"""
import argparse
import logging
import sys

import yaml
from supabase import create_client

from application.exceptions import StorageError
from backend.core.training_plans import load_seed_plans, seed_training_plans
from backend.settings import get_settings
from infrastructure.db import SupabaseTrainingPlanRepository

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FitTrack training plan tools")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate-plans", help="Validate the seed file without writing")
    validate.add_argument("--file", help="YAML seed file (default: bundled training_plans.yaml)")

    seed = sub.add_parser("seed-plans", help="Upsert the seed plans into the database")
    seed.add_argument("--file", help="YAML seed file (default: bundled training_plans.yaml)")

    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    try:
        if args.command == "validate-plans":
            plans = load_seed_plans(args.file)
            print(f"{len(plans)} plans OK")
            return 0

        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_key:
            print("Error: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set", file=sys.stderr)
            return 1

        client = create_client(settings.supabase_url, settings.supabase_key)
        written = seed_training_plans(SupabaseTrainingPlanRepository(client), args.file)
        print(f"Seeded {written} plans")
        return 0

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: Invalid seed data: {e}", file=sys.stderr)
        return 1
    except StorageError:
        print("Error: Failed to write plans to the database", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
