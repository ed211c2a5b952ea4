"""Test package for Assistant Workbench.

Structure:
    - unit/: Config, extractor, citation resolver, client and workflow tests
    - integration/: HTTP API tests through the real FastAPI app

The Assistants SDK is replaced by AsyncMock fakes; nothing contacts Azure.
Leverages pytest with pytest-check for soft assertions.
"""
