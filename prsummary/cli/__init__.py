"""Command-line interface for prsummary"""
