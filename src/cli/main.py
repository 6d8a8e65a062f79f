"""
Main CLI module with argument parsing and command execution.

This module provides the command line interface of the driver:
- create / destroy the server recorded in a state file
- show the recorded state
- validate configuration
"""
import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from src import __version__
from src.cli.formatters import format_output
from src.config.manager import ConfigurationManager
from src.domain.base.exceptions import DomainException
from src.domain.provisioning.state import ProvisioningState
from src.infrastructure.exceptions import InfrastructureError
from src.infrastructure.persistence.json.state_store import JsonStateStore

DEFAULT_STATE_FILE = os.path.join(".vro", "state.json")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vro-driver",
        description="Create and destroy servers through vRealize Orchestrator workflows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --config vro_driver.yml create      # Run the create-server workflow
  %(prog)s --config vro_driver.yml destroy     # Run the destroy-server workflow
  %(prog)s show --format yaml                  # Show the recorded server
  %(prog)s --config vro_driver.yml config validate
        """,
    )

    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--state-file', default=DEFAULT_STATE_FILE,
                        help=f'Provisioning state file (default: {DEFAULT_STATE_FILE})')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured log level')
    parser.add_argument('--format', choices=['json', 'yaml'], default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.add_parser('create', help='Create the server unless one is recorded')
    subparsers.add_parser('destroy', help='Destroy the recorded server')
    subparsers.add_parser('show', help='Show the recorded server')

    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Config actions')
    config_subparsers.add_parser('validate', help='Validate configuration')

    return parser


def _configure_logging(config_manager: ConfigurationManager, log_level: Optional[str]) -> None:
    from src.helpers.logger import setup_logging

    logging_config = config_manager.logging
    if log_level:
        logging_config = logging_config.model_copy(update={"level": log_level})
    setup_logging(logging_config)


def _persist_state(store: JsonStateStore, state: ProvisioningState) -> None:
    if state.is_provisioned:
        store.save(state)
    else:
        store.delete()


def run_lifecycle(command: str, config_manager: ConfigurationManager, store: JsonStateStore) -> Dict[str, Any]:
    """Run ``create`` or ``destroy`` against the stored state and persist the outcome."""
    from src.bootstrap import create_lifecycle_service

    service = create_lifecycle_service(config_manager.app_config)
    state = store.load()
    try:
        getattr(service, command)(state)
    except Exception:
        # keep what the controller recorded before failing
        try:
            _persist_state(store, state)
        except (InfrastructureError, OSError) as persist_error:
            logger.error(f"Failed to update state file {store.file_path}: {persist_error}")
        raise

    _persist_state(store, state)

    return {"driver": service.name, "command": command, "state": state.to_dict()}


def execute_command(args: argparse.Namespace) -> Dict[str, Any]:
    """Execute the command selected on the command line."""
    store = JsonStateStore(args.state_file)

    if args.command == 'show':
        state = store.load()
        return {"provisioned": state.is_provisioned, "state": state.to_dict()}

    config_manager = ConfigurationManager(args.config)

    if args.command == 'config':
        if args.action != 'validate':
            raise ValueError("No config action specified. Use --help for usage information.")
        driver = config_manager.driver
        return {
            "valid": True,
            "vro_base_url": driver.vro_base_url,
            "create_workflow": driver.create_workflow_name,
            "destroy_workflow": driver.destroy_workflow_name,
            "request_timeout": driver.request_timeout,
        }

    if args.command in ('create', 'destroy'):
        _configure_logging(config_manager, args.log_level)
        return run_lifecycle(args.command, config_manager, store)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        result = execute_command(args)
        print(format_output(result, args.format))
    except DomainException as e:
        logger.error(f"Domain error: {e}")
        print(format_output({"error": e.to_dict()}, args.format))
        sys.exit(1)
    except (InfrastructureError, ValueError) as e:
        logger.error(f"Error: {e}")
        print(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
