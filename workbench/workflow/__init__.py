"""Process workflow orchestration.

Drives the assistant exchange end to end and owns the form state:
input buffer, result text, busy flag, selected assistant and file.
"""

from workbench.workflow.orchestrator import Workflow, run_exchange

__all__ = ["Workflow", "run_exchange"]
