"""
Shared Components

Models, protocols, configuration and logging used across the SDK.
"""
