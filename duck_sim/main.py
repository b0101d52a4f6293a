"""
Main entry point for the duck simulator.

Usage:
    duck-sim
    duck-sim --config path/to/duck_config.yaml
    duck-sim --duck redhead
    duck-sim --list
"""

import sys
import argparse
import traceback
from pathlib import Path

import yaml

from .core.config_models import Settings, DuckConfig
from .core.logger import SimulatorLogger
from .core.simulator import DuckSimulator, build_ducks
from .ducks import list_available_ducks
from .strategies import list_available_behaviours

DEFAULT_CONFIG = Path(__file__).parent / "config" / "duck_config.yaml"


def load_config(config_path: str | Path = DEFAULT_CONFIG) -> Settings:
    """Load and validate configuration."""
    config_file = Path(config_path)
    try:
        with open(config_file, 'r') as f:
            config_data = yaml.safe_load(f)
        settings = Settings(**config_data)
        return settings
    except FileNotFoundError:
        print(f"FATAL: Configuration file not found at {config_file}")
        sys.exit(1)
    except Exception as e:
        print(f"FATAL: Error validating configuration file {config_file}:\n{e}")
        sys.exit(1)


def print_available():
    behaviours = list_available_behaviours()
    print("Ducks:  " + ", ".join(list_available_ducks()))
    print("Quack:  " + ", ".join(behaviours["quack"]))
    print("Fly:    " + ", ".join(behaviours["fly"]))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Duck simulator")
    parser.add_argument(
        '--config',
        type=str,
        default=str(DEFAULT_CONFIG),
        help="Path to the YAML config file"
    )
    parser.add_argument(
        '--duck',
        type=str,
        choices=list_available_ducks(),
        help="Run a single duck of this kind instead of the configured flock"
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help="List available ducks and behaviours, then exit"
    )
    args = parser.parse_args(argv)
    
    if args.list:
        print_available()
        return 0
    
    config = load_config(args.config)
    
    if args.duck:
        # Single duck, no configured swaps (they target flock ids)
        config = config.model_copy(update={
            "ducks": [DuckConfig(id=args.duck, type=args.duck)],
            "swaps": [],
        })
    
    logger = SimulatorLogger(
        log_dir=config.logging.log_dir,
        max_logs=config.logging.max_logs,
        log_to_console=config.logging.log_to_console
    )
    
    try:
        ducks = build_ducks(config, logger)
        simulator = DuckSimulator(ducks, config.simulator, logger, swaps=config.swaps)
        simulator.run()
    except Exception as e:
        logger.log(f"Fatal error: {e}", "error")
        traceback.print_exc()
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
