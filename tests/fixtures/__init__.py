"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing

Usage:
    Load via the sample_config_path fixture in conftest.py.
"""
