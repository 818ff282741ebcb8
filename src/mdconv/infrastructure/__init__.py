"""Infrastructure layer: file reads, writes and path resolution.

This layer depends on stdlib only.
It must never import from domain, services, commands, or output.
"""
