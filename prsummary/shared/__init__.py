"""Shared constants and helpers"""
