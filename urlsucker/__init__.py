"""
urlsucker

Passive discovery of URLs and paths hidden in JavaScript responses.
"""
