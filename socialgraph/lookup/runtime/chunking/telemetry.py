"""Structured logging for batching operations.

This module provides telemetry hooks for bulk lookups, emitting structured
logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import LookupReport

logger = logging.getLogger(__name__)


def log_batch_plan(
    *,
    endpoint_id: str,
    total_keys: int,
    total_batches: int,
    max_batch_size: int,
) -> None:
    """Log batch plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_keys: Number of keys to fetch
        total_batches: Number of batches planned
        max_batch_size: Maximum keys per batch
    """
    logger.info(
        "batch_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_keys": total_keys,
            "total_batches": total_batches,
            "max_batch_size": max_batch_size,
        },
    )


def log_batch_completed(
    *,
    endpoint_id: str,
    batch_index: int,
    keys_requested: int,
    records_received: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single batch.

    Args:
        endpoint_id: Endpoint identifier
        batch_index: Zero-based index of the batch
        keys_requested: Number of keys sent
        records_received: Number of records decoded from the response
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "batch_completed",
        extra={
            "endpoint_id": endpoint_id,
            "batch_index": batch_index,
            "keys_requested": keys_requested,
            "records_received": records_received,
            "latency_ms": latency_ms,
        },
    )


def log_batch_error(
    *,
    endpoint_id: str,
    batch_index: int,
    keys_requested: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed batch.

    Args:
        endpoint_id: Endpoint identifier
        batch_index: Zero-based index of the batch that failed
        keys_requested: Number of keys in the failed batch
        error_type: Type of error (e.g., "FetchError", "RateLimitError")
        error_message: Error message
    """
    logger.error(
        "batch_failed",
        extra={
            "endpoint_id": endpoint_id,
            "batch_index": batch_index,
            "keys_requested": keys_requested,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_lookup_complete(
    *,
    endpoint_id: str,
    report: LookupReport,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a bulk lookup.

    Args:
        endpoint_id: Endpoint identifier
        report: LookupReport from execution
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "lookup_complete",
        extra={
            "endpoint_id": endpoint_id,
            "records": len(report.records),
            "cached_keys": len(report.cached_keys),
            "batches_dispatched": report.batches_dispatched,
            "batches_failed": report.batches_failed,
            "total_latency_ms": total_latency_ms,
        },
    )
