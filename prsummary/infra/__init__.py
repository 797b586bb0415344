"""Infrastructure adapters: shell, config and HTTP APIs"""
