"""Domain layer: front matter record, document splitting, rendering.

This layer depends only on stdlib, pydantic, ruamel.yaml and markdown-it-py.
It must never import from services, infrastructure, commands, or config.
"""
