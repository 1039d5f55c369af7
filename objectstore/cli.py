"""Demonstration driver exercising the object store end to end."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable

from objectstore.exceptions import ObjectStoreError
from objectstore.logging_config import get_logger, setup_logging
from objectstore.schemas import DemoReport, StepResult
from objectstore.settings import get_settings
from objectstore.storage import ObjectStoreService, StoredObject

logger = get_logger(__name__)


def _render(value: Any) -> Any:
    if isinstance(value, StoredObject):
        return {"key": value.key, "size": value.size(), "data": value.data.hex()}
    if isinstance(value, list):
        return sorted(value)
    return value


def run_step(
    report: DemoReport,
    operation: str,
    call: Callable[[], Any],
    *,
    expected: str = "ok",
) -> StepResult:
    """Invoke ``call`` once and record what came back.

    Errors are reported by kind only; nothing is retried.
    """
    try:
        value = call()
    except ObjectStoreError as exc:
        step = StepResult(
            operation=operation,
            outcome="error",
            error=exc.kind,
            message=exc.message,
            expected=expected,
        )
    else:
        step = StepResult(operation=operation, outcome="ok", value=_render(value), expected=expected)

    if step.as_expected:
        logger.info("{} -> {}", operation, step.error or step.outcome)
    else:
        logger.warning("{} -> {} (expected {})", operation, step.error or step.outcome, expected)
    report.steps.append(step)
    return step


def run_demo(service: ObjectStoreService, bucket: str, key: str, payload: bytes) -> DemoReport:
    report = DemoReport()
    missing = f"{key}.missing"

    run_step(report, f"create_bucket({bucket!r})", lambda: service.create_bucket(bucket))
    run_step(
        report,
        f"create_bucket({bucket!r})",
        lambda: service.create_bucket(bucket),
        expected="BucketAlreadyExists",
    )
    run_step(
        report,
        f"put_object({bucket!r}, {key!r}, {payload.hex()!r})",
        lambda: service.put_object(bucket, key, payload),
    )
    run_step(report, f"get_object({bucket!r}, {key!r})", lambda: service.get_object(bucket, key))
    run_step(report, "list_buckets()", service.list_buckets)
    run_step(report, f"list_objects({bucket!r})", lambda: service.list_objects(bucket))
    run_step(
        report,
        f"delete_object({bucket!r}, {missing!r})",
        lambda: service.delete_object(bucket, missing),
        expected="ObjectNotFound",
    )
    run_step(report, "check_consistency()", service.check_consistency)
    run_step(report, f"delete_bucket({bucket!r})", lambda: service.delete_bucket(bucket))
    run_step(
        report,
        f"get_object({bucket!r}, {key!r})",
        lambda: service.get_object(bucket, key),
        expected="BucketNotFound",
    )
    run_step(report, "list_buckets()", service.list_buckets)
    return report


def format_report(report: DemoReport) -> str:
    lines = []
    for step in report.steps:
        status = step.outcome if step.outcome == "ok" else f"error:{step.error}"
        line = f"[{status}] {step.operation}"
        if step.value is not None:
            line += f" = {step.value}"
        if step.message:
            line += f" ({step.message})"
        lines.append(line)
    lines.append("PASSED" if report.passed else "FAILED")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise the in-memory object store and report each outcome")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--bucket", help="Bucket name used by the scenario")
    parser.add_argument("--key", help="Object key used by the scenario")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )

    args = parser.parse_args(argv)

    try:
        settings = get_settings(str(args.config) if args.config else None)
    except ObjectStoreError as exc:
        parser.error(exc.message)

    log_settings = settings.logging
    setup_logging(
        level=args.log_level or log_settings.level,
        json_format=log_settings.json_format,
        log_file=log_settings.log_file,
    )

    service = ObjectStoreService()
    report = run_demo(
        service,
        bucket=args.bucket or settings.demo.bucket,
        key=args.key or settings.demo.key,
        payload=settings.demo.payload,
    )

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))

    return 0 if report.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
