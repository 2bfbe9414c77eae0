from .orchestrator import DailyChallengeOrchestrator

__all__ = ["DailyChallengeOrchestrator"]
