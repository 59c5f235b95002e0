from .meta import FieldSummary, QueueSummary, SaveResponse

__all__ = ["FieldSummary", "QueueSummary", "SaveResponse"]
