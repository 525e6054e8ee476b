"""SiteGen -- website generation orchestration engine.

Routes generation presets to an assembly or AI-orchestration backend,
tracks each run through deploy and cleanup, and turns business fixtures into
structured multi-page sites through per-industry template libraries.
"""

__version__ = "0.1.0"
