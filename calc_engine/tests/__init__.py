"""
Test suite for the calculator engine.

Focus areas:
- Reducer transitions and rejections
- Number parsing and formatting
- Input normalization and stream merging
- Session publishing and replay determinism
"""
