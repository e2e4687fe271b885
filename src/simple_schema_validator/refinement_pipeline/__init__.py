"""Transform and refinement pipeline exports."""

from .refinement_context import RefinementContext
from .step_runner import StepGenerator, run_steps

__all__ = [
    "RefinementContext",
    "StepGenerator",
    "run_steps",
]
