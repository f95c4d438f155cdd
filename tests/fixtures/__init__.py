"""Shared test fixtures and model builders."""
