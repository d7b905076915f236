# apps/core/adapters/mock_insight.py
from typing import List

from apps.core.ports.insight_provider import IInsightProvider, InsightSnapshot


class StaticInsightProvider(IInsightProvider):
    """Mock dostawcy wskazówek: stały tekst, zapamiętuje otrzymane migawki."""

    def __init__(self, text: str = "Keep going - you are on track."):
        self.text = text
        self.snapshots: List[InsightSnapshot] = []

    def suggest(self, snapshot: InsightSnapshot) -> str:
        self.snapshots.append(snapshot)
        return self.text
