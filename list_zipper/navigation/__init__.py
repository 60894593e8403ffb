"""
Package marker for `list_zipper.navigation`.
It groups the move-script parser, its configuration loader, and the CLI that drives a zipper.
"""
