"""
The api sub-package holds the small containers and formatters used to print
results inside tutorial documents.
"""
