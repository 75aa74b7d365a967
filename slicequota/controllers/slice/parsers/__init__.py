"""Parsers for slice usage payloads."""

from slicequota.controllers.slice.parsers.pod_metrics_parser import PodMetricsParser
from slicequota.controllers.slice.parsers.status_parser import StatusParser

__all__ = ["PodMetricsParser", "StatusParser"]
