"""Query layer over git's tag subsystem.

Creates annotated tags and answers listing and reachability questions about
local and remote tags without exposing git's command syntax or output grammar.
"""
