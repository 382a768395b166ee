"""
Shared helpers: configuration, logging, errors, plan state and prompts
"""
