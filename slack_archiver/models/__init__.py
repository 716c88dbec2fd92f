# Shared data models
from slack_archiver.models.archive import PipelineResult, PipelineState

__all__ = ["PipelineResult", "PipelineState"]
