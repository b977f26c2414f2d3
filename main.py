#!/usr/bin/env python3
"""
Design Pattern Catalog Demo.

Runs the pattern examples, either picked from an interactive menu or named
on the command line:

    python main.py                      # interactive menu
    python main.py observer strategy    # run the named demos
    python main.py all                  # run every demo

Settings come from config/catalog.yaml (if present) and CATALOG_*
environment variables, which may be placed in a .env file.
"""
# pylint: disable=wrong-import-position

import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from dotenv import load_dotenv

# Load environment variables
load_dotenv(override=True)

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from catalog import Catalog, CatalogConfig, PatternCategory, configure_logging

DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "catalog.yaml"


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> CatalogConfig:
    """Load the YAML config if it exists, then apply environment overrides."""
    base = CatalogConfig.from_yaml(path) if path.exists() else CatalogConfig()
    return CatalogConfig.from_env(base=base)


def print_menu(catalog: Catalog) -> Dict[str, str]:
    """Print the numbered demo menu.

    Returns:
        Dictionary of menu number -> demo name
    """
    choices: Dict[str, str] = {}
    number = 1

    for category, names in catalog.list_by_category().items():
        print(f"\n{category.value.title()} patterns:")
        for name in names:
            definition = catalog.get_demo(name)
            title = definition.title if definition else name
            print(f"  {number:2}. {title}")
            choices[str(number)] = name
            number += 1

    print("\n   b/c/s. Run all behavioral / creational / structural")
    print("       a. Run all demos")
    print("       q. Quit")
    return choices


def run_interactive(catalog: Catalog) -> int:
    """Let the user pick demos from the menu."""
    choices = print_menu(catalog)
    shortcuts = {
        "b": PatternCategory.BEHAVIORAL,
        "c": PatternCategory.CREATIONAL,
        "s": PatternCategory.STRUCTURAL,
    }

    choice = input("\nSelect demo: ").strip().lower()

    if choice in ("q", "quit", "exit"):
        print("Goodbye!")
        return 0
    if choice in ("a", "all"):
        catalog.run_all()
        return 0
    if choice in shortcuts:
        catalog.run_category(shortcuts[choice])
        return 0
    if choice in choices:
        catalog.run_all([choices[choice]])
        return 0
    if choice in catalog.registry:
        catalog.run_all([choice])
        return 0

    print(f"Invalid choice: {choice!r}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    try:
        config = load_config()
        configure_logging(
            level=config.log_level,
            log_file=config.log_file,
            json_format=config.json_logs,
            use_colors=config.use_colors,
        )
        catalog = Catalog()

        if args:
            if args == ["all"]:
                catalog.run_all(echo=config.echo)
            else:
                catalog.run_all(args, echo=config.echo)
            return 0

        if config.demos:
            catalog.run_all(config.demos, echo=config.echo)
            return 0

        print("=" * 60)
        print("Design Pattern Catalog")
        print("=" * 60)
        return run_interactive(catalog)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 0
    except (ValueError, FileNotFoundError, yaml.YAMLError) as e:
        print(f"\nError: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
