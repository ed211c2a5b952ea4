"""Unit tests for individual components in isolation.

Coverage:
    - assistant/: Configuration, SDK calls, poll loop, citation resolution
    - parsing/: File to text extraction
    - workflow/: Process and reset state machine
"""
