"""
suitesmith Test Suite

Unit and integration tests for suite generation, configuration, manifests
and the command-line interface.
"""
