"""Test suite for faultlog.

Test structure:
- unit/: Unit tests - Test each module in isolation
- integration/: Integration tests - Test the public facade end-to-end
"""
