"""
taskdeck: a console task tracker.

Layout:
- storage/: key-value backends + JSON value adapter
- tasks/: task model, id source, collection manager
- posts/: read-only remote posts browser
- cli/, connectors/: composition root, slash commands, console REPL
"""

__version__ = "0.1.0"
