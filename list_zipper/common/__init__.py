"""
Package marker for `list_zipper.common`.
It holds cross-cutting helpers (settings and logging) used by the command-line entry points.
"""
