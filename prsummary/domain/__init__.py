"""Domain logic for collecting changes and summarizing them"""
