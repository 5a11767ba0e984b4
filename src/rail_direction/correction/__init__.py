"""Direction resolution, path reversal and the correction run."""

from rail_direction.correction.pipeline import (
    CorrectionReport,
    FeatureService,
    Stage,
    UpdateTally,
    run_correction,
)
from rail_direction.correction.resolver import should_reverse
from rail_direction.correction.reverser import reverse_path

__all__ = [
    "CorrectionReport",
    "FeatureService",
    "Stage",
    "UpdateTally",
    "reverse_path",
    "run_correction",
    "should_reverse",
]
