"""Example targets used by the test suite.

- Webhook targets: AccountingTarget, EmailNotificationTarget, AnalyticsTarget, RefundTarget
- Prioritized targets: ValidationTarget (100), BusinessLogicTarget (50),
  LoggingTarget (10), DefaultTarget (no priority)
- Async helpers: DelayedTarget, FailingTarget, RecordingTarget
"""

from .webhook_targets import (
    AccountingTarget,
    AnalyticsTarget,
    BusinessLogicTarget,
    DefaultTarget,
    DelayedTarget,
    EmailNotificationTarget,
    FailingTarget,
    LoggingTarget,
    RecordingTarget,
    RefundTarget,
    ValidationTarget,
)

__all__ = [
    "AccountingTarget",
    "AnalyticsTarget",
    "BusinessLogicTarget",
    "DefaultTarget",
    "DelayedTarget",
    "EmailNotificationTarget",
    "FailingTarget",
    "LoggingTarget",
    "RecordingTarget",
    "RefundTarget",
    "ValidationTarget",
]
