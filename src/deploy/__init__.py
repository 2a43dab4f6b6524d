"""Manifest apply layer.

This module turns an environment config into ordered kubectl invocations.
It runs them one at a time and stops on the first failing manifest.
"""
