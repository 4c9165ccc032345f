"""
Agents - Model-backed pipeline stages.

ARCHITECTURE:
-------------
    Orchestrator
        ├── RepoService / select_key_files / ContentMaterializer
        ├── AnalysisAgent   → analysis text (placeholder on failure)
        └── ReadmeAgent     → per-file summaries → README
                                  └── build_fallback_readme (no network)
"""

from repodoc.agents.base import AgentRole, BaseAgent
from repodoc.agents.analyst import ANALYSIS_PLACEHOLDER, AnalysisAgent
from repodoc.agents.readme_writer import ReadmeAgent
from repodoc.agents.fallback import build_fallback_readme
from repodoc.agents.orchestrator import Orchestrator

__all__ = [
    "AgentRole",
    "BaseAgent",
    "ANALYSIS_PLACEHOLDER",
    "AnalysisAgent",
    "ReadmeAgent",
    "build_fallback_readme",
    "Orchestrator",
]
