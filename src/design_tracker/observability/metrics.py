"""Business metrics for the Design Tracker service.

Defines OpenTelemetry metrics for tasks and the member roster. Without a
configured SDK the meter is a no-op.
"""

from opentelemetry import metrics

meter = metrics.get_meter(__name__)

# =============================================================================
# TASK METRICS
# =============================================================================

tasks_created = meter.create_counter(
    name="design_tracker.tasks.created",
    description="Total tasks created",
    unit="1",
)

tasks_updated = meter.create_counter(
    name="design_tracker.tasks.updated",
    description="Total task updates",
    unit="1",
)

tasks_deleted = meter.create_counter(
    name="design_tracker.tasks.deleted",
    description="Total tasks deleted",
    unit="1",
)

tasks_failed = meter.create_counter(
    name="design_tracker.tasks.failed",
    description="Total task operation failures",
    unit="1",
)

task_processing_time = meter.create_histogram(
    name="design_tracker.task.processing_time",
    description="Time to process task operations",
    unit="ms",
)

# =============================================================================
# MEMBER METRICS
# =============================================================================

members_added = meter.create_counter(
    name="design_tracker.members.added",
    description="Total members added explicitly",
    unit="1",
)

members_seeded = meter.create_counter(
    name="design_tracker.members.seeded",
    description="Total default members inserted into an empty roster",
    unit="1",
)
