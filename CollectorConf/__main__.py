#!/usr/bin/env python3
"""
Main entry point for the CollectorConf package when run as a module.

Example:
    $ python -m CollectorConf config show --config config.yaml --set processors.batch.timeout=2s
    $ python -m CollectorConf config keys --set receivers.otlp.protocols.grpc.endpoint=0.0.0.0:4317
"""

import sys

from CollectorConf.utils import report_error
from CollectorConf.utils.logging import get_logger

logger = get_logger(__name__)


def main():
    """Main entry point for the CollectorConf package."""
    try:
        from CollectorConf.cli.commands import main as cli_main
        cli_main()
    except ImportError as e:
        report_error(e, "Failed to start CollectorConf. The package may be incorrectly installed")
        sys.exit(1)


if __name__ == "__main__":
    main()
