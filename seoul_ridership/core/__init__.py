"""Core data model, conversion and error types"""
