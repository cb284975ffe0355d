"""Test suite for assetsmith.

Test Structure:
- unit/: Unit tests per component
  - catalog/: Asset catalog data and selection policy
  - imaging/: Decoding, fitting strategies, encoding
  - conversion/: Batch orchestrator and request models
  - packaging/: Archive writing and outcome report
  - config/, utils/, cli/: Ambient stack
- conftest.py: Shared source image fixtures
"""
