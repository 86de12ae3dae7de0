# apps/smart_assist/providers/base.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional
from apps.segments.definitions import SegmentDefinition


class SmartAssistError(Exception):
    """A provider failed to produce output; callers may retry"""


@dataclass(frozen=True)
class DraftInput:
    customer_email: str
    recent_event_type: Optional[str] = None
    recommended_sku: Optional[str] = None


@dataclass(frozen=True)
class DraftOutput:
    subject: str
    body: str

    def to_dict(self) -> Dict[str, str]:
        return {'subject': self.subject, 'body': self.body}


class SegmentDefinitionProvider(ABC):
    @abstractmethod
    def generate(self, prompt: str) -> SegmentDefinition:
        pass


class EmailDraftProvider(ABC):
    @abstractmethod
    def generate(self, draft_input: DraftInput) -> DraftOutput:
        pass
