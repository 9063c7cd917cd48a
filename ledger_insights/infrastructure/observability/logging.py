"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from ledger_insights.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_analytics(
    request_id: str,
    transaction_count: int,
    filtered_count: int,
    granularity: str,
    score: int,
    cached: bool,
    duration_ms: float,
) -> None:
    """Log structured analytics outcome for analysis"""
    logging.info(
        "Analytics completed",
        extra={
            "request_id": request_id,
            "step": "analytics_complete",
            "transaction_count": transaction_count,
            "filtered_count": filtered_count,
            "granularity": granularity,
            "health_score": score,
            "cache": "hit" if cached else "miss",
            "duration_ms": duration_ms,
        },
    )
