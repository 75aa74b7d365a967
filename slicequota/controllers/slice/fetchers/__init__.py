"""Fetchers for slice usage data."""

from slicequota.controllers.slice.fetchers.metrics_fetcher import PodMetricsFetcher
from slicequota.controllers.slice.fetchers.namespace_fetcher import NamespaceFetcher

__all__ = ["NamespaceFetcher", "PodMetricsFetcher"]
