"""Shared utilities: logging, terminal output, networking"""
