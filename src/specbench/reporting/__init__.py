"""Console reporting for spec runs."""

from specbench.reporting.console import ConsoleReporter

__all__ = ["ConsoleReporter"]
