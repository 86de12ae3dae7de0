from .base import (
    DraftInput,
    DraftOutput,
    EmailDraftProvider,
    SegmentDefinitionProvider,
    SmartAssistError,
)

__all__ = [
    'DraftInput',
    'DraftOutput',
    'EmailDraftProvider',
    'SegmentDefinitionProvider',
    'SmartAssistError',
]
