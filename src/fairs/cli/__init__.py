"""
Command Line Interface Package

Command Structure:
- fairs: Main entry point with utility commands (version, config)
- fairs allocate / fairs summary: Work out who owes what for a group file
- fairs scan: Parse OCR receipt lines into candidate items
- fairs groups: List, back up and restore the stored group collection
"""
