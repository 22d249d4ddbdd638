"""
Test Support Package

Test doubles for page-object tests. They implement the viewkit capability
interfaces directly, so they need no browser.
"""
