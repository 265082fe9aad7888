"""Test suite for framekit.

Test Structure:
- unit/: Unit tests for individual components
  - motion/: Random streams, interpolation, springs and timelines
  - layout/: Procedural node placement and proximity edges
  - effects/: Per-effect frame state and the effect registry
  - config/: Config models and loaders
  - utils/: Math, JSON and logging helpers
- integration/: Whole-effect evaluation properties (purity, ordering)
- conftest.py: Shared fixtures
"""
