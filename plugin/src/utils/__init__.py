"""Shared utilities: logging, error handling and configuration"""
