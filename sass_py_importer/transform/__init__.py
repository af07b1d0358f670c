"""
Subprocess side of the importer.

- exit_codes: outcome codes shared by both sides of the process boundary
- import_to_json: entry point run in the child process
- runner: spawns the child and interprets what it reports
"""
